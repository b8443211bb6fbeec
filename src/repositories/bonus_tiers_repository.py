from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional

from src.core.supabase import SupabaseClient
from src.models.scoreboard import AgentBonusAssignmentRecord, BonusTierRecord


def _in_filter(values: Iterable[object]) -> str:
    return "in.(" + ",".join(f'"{value}"' for value in values) + ")"


class BonusTiersRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_tiers(self, campaign_names: Optional[Iterable[str]] = None) -> List[BonusTierRecord]:
        filters = None
        if campaign_names is not None:
            names = sorted(set(campaign_names))
            if not names:
                return []
            filters = [("campaign_name", _in_filter(names))]
        rows = self.client.select(
            table="bonus_tiers",
            select="id,campaign_name,deals_required,bonus_per_deal,created_at",
            filters=filters,
            order="campaign_name.asc,deals_required.asc",
        )
        return [BonusTierRecord.model_validate(row) for row in rows]

    def upsert_tier(self, campaign_name: str, deals_required: int, bonus_per_deal: Decimal) -> None:
        self.client.insert(
            table="bonus_tiers",
            payload={
                "campaign_name": campaign_name,
                "deals_required": deals_required,
                "bonus_per_deal": str(bonus_per_deal),
            },
            resolution="merge-duplicates",
            on_conflict="campaign_name,deals_required",
        )

    def delete_tier(self, tier_id: int) -> None:
        self.client.delete(table="bonus_tiers", filters=[("id", f"eq.{tier_id}")])

    def delete_campaign(self, campaign_name: str) -> None:
        self.client.delete(table="bonus_tiers", filters=[("campaign_name", f"eq.{campaign_name}")])


class AgentBonusAssignmentsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_for_users(self, user_ids: Iterable[int]) -> List[AgentBonusAssignmentRecord]:
        ids = sorted(set(user_ids))
        if not ids:
            return []
        rows = self.client.select(
            table="agent_bonus_assignments",
            select="id,user_id,campaign_name,created_at",
            filters=[("user_id", "in.(" + ",".join(str(user_id) for user_id in ids) + ")")],
            order="user_id.asc,campaign_name.asc",
        )
        return [AgentBonusAssignmentRecord.model_validate(row) for row in rows]

    def assign(self, user_id: int, campaign_name: str) -> None:
        self.client.insert(
            table="agent_bonus_assignments",
            payload={"user_id": user_id, "campaign_name": campaign_name},
            resolution="ignore-duplicates",
            on_conflict="user_id,campaign_name",
        )

    def unassign(self, user_id: int, campaign_name: str) -> None:
        self.client.delete(
            table="agent_bonus_assignments",
            filters=[("user_id", f"eq.{user_id}"), ("campaign_name", f"eq.{campaign_name}")],
        )
