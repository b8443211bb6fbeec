from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import ConfigDict, Field

from src.shared.base import BaseSchema


class BonusTier(BaseSchema):
    deals_required: int = Field(gt=0)
    bonus_per_deal: Decimal = Field(ge=0)


class CampaignAssignment(BaseSchema):
    campaign_name: str
    bonus_tiers: List[BonusTier] = Field(default_factory=list)


class BonusTierEntry(BaseSchema):
    id: int
    campaign_name: str
    deals_required: int
    bonus_per_deal: Decimal


class BonusTierUpsertRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    campaign_name: str = Field(min_length=1, max_length=200)
    deals_required: int = Field(gt=0)
    bonus_per_deal: Decimal = Field(ge=0)
