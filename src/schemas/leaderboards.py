from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import ConfigDict, Field, computed_field, model_validator

from src.shared.base import BaseSchema


TimePeriod = Literal["day", "week", "month", "custom"]
EarningsColor = Literal["red", "orange", "black", "green"]


class AgentStats(BaseSchema):
    user_id: int
    name: str
    profile_image_url: Optional[str] = None
    personal_sound_url: Optional[str] = None
    deals: int = 0
    commission: Decimal = Decimal("0")
    sms_sent: int = 0
    sms_success_rate: int = 0
    campaign_deals: Dict[str, int] = Field(default_factory=dict)
    bonus: Decimal = Decimal("0")
    color: Optional[EarningsColor] = None

    @computed_field(alias="totalEarnings")  # type: ignore[prop-decorator]
    @property
    def total_earnings(self) -> Decimal:
        return self.commission + self.bonus


class Leaderboard(BaseSchema):
    id: int
    name: str
    time_period: TimePeriod
    custom_start_date: Optional[date] = None
    custom_end_date: Optional[date] = None
    group_id: Optional[int] = None
    display_order: int = 0
    is_active: bool = True


class LeaderboardWriteRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=200)
    time_period: TimePeriod
    custom_start_date: Optional[date] = None
    custom_end_date: Optional[date] = None
    group_id: Optional[int] = None
    display_order: int = 0
    is_active: bool = True

    @model_validator(mode="after")
    def _check_custom_range(self) -> "LeaderboardWriteRequest":
        if self.time_period != "custom":
            return self
        if self.custom_start_date is None or self.custom_end_date is None:
            raise ValueError("custom leaderboards need customStartDate and customEndDate")
        if self.custom_start_date > self.custom_end_date:
            raise ValueError("customStartDate must not be after customEndDate")
        return self


class DateRange(BaseSchema):
    start_date: date
    end_date: date


class MilestoneNotification(BaseSchema):
    user_id: int
    name: str
    profile_image_url: Optional[str] = None
    previous_total: Decimal
    total_earnings: Decimal
    sound_url: str


class LeaderboardStatsResponse(BaseSchema):
    leaderboard: Leaderboard
    stats: List[AgentStats]
    date_range: DateRange
    notifications: List[MilestoneNotification] = Field(default_factory=list)
