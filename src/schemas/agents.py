from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field

from src.schemas.bonus_tiers import CampaignAssignment
from src.shared.base import BaseSchema


class Agent(BaseSchema):
    user_id: int
    name: str
    email: Optional[str] = None
    group_id: Optional[int] = None
    profile_image_url: Optional[str] = None
    personal_sound_url: Optional[str] = None
    bonus_assignments: List[CampaignAssignment] = Field(default_factory=list)


class AgentMediaUpdateRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    url: Optional[str] = Field(default=None, max_length=2000)


class BonusAssignmentRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    campaign_name: str = Field(min_length=1, max_length=200)


class AgentSyncResult(BaseSchema):
    message: str
    count: int
