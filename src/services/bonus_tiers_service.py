from __future__ import annotations

from typing import List, Optional

from src.repositories.bonus_tiers_repository import BonusTiersRepository
from src.schemas.bonus_tiers import BonusTierEntry, BonusTierUpsertRequest


class BonusTiersService:
    def __init__(self, repository: BonusTiersRepository) -> None:
        self.repository = repository

    def list_tiers(self, campaign_name: Optional[str] = None) -> List[BonusTierEntry]:
        records = self.repository.list_tiers([campaign_name] if campaign_name else None)
        return [BonusTierEntry(**record.model_dump(exclude={"created_at"})) for record in records]

    def upsert_tier(self, request: BonusTierUpsertRequest) -> List[BonusTierEntry]:
        campaign_name = request.campaign_name.strip()
        self.repository.upsert_tier(campaign_name, request.deals_required, request.bonus_per_deal)
        return self.list_tiers(campaign_name)

    def delete_tier(self, tier_id: int) -> None:
        self.repository.delete_tier(tier_id)

    def delete_campaign(self, campaign_name: str) -> None:
        self.repository.delete_campaign(campaign_name)
