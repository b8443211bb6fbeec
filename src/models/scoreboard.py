from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class LeadRecord(BaseModel):
    id: str
    user_id: int
    commission: Decimal = Field(default=Decimal("0"), ge=0)
    campaign: Optional[str] = None
    sms_count: int = Field(default=0, ge=0)
    user_name: Optional[str] = None
    status: Optional[str] = None
    campaign_id: Optional[str] = None
    created_at: Optional[datetime] = None
    phone_number: Optional[str] = None


class CrmUserRecord(BaseModel):
    user_id: int
    name: str
    email: Optional[str] = None
    group_id: Optional[int] = None
    group_name: Optional[str] = None


class AgentRecord(BaseModel):
    user_id: int
    name: str
    email: Optional[str] = None
    group_id: Optional[int] = None
    profile_image_url: Optional[str] = None
    personal_sound_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LeaderboardRecord(BaseModel):
    id: int
    name: str
    time_period: str
    custom_start_date: Optional[date] = None
    custom_end_date: Optional[date] = None
    group_id: Optional[int] = None
    display_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BonusTierRecord(BaseModel):
    id: int
    campaign_name: str
    deals_required: int
    bonus_per_deal: Decimal
    created_at: Optional[datetime] = None


class AgentBonusAssignmentRecord(BaseModel):
    id: int
    user_id: int
    campaign_name: str
    created_at: Optional[datetime] = None


class SlideshowSettingsRecord(BaseModel):
    id: int = 1
    display_duration: int = 10
    enable_sound: bool = True
    standard_sound_url: Optional[str] = None
    milestone_sound_url: Optional[str] = None
    milestone_threshold: Optional[Decimal] = None
    updated_at: Optional[datetime] = None
