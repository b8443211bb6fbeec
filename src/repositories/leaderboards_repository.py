from __future__ import annotations

from typing import Any, Dict, List, Optional

from src.core.supabase import SupabaseClient
from src.models.scoreboard import LeaderboardRecord

LEADERBOARD_COLUMNS = (
    "id,name,time_period,custom_start_date,custom_end_date,group_id,display_order,"
    "is_active,created_at,updated_at"
)


class LeaderboardsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_leaderboards(self, active_only: bool = False) -> List[LeaderboardRecord]:
        filters = [("is_active", "eq.true")] if active_only else None
        rows = self.client.select(
            table="leaderboards",
            select=LEADERBOARD_COLUMNS,
            filters=filters,
            order="display_order.asc,id.asc",
        )
        return [LeaderboardRecord.model_validate(row) for row in rows]

    def get_leaderboard(self, leaderboard_id: int) -> Optional[LeaderboardRecord]:
        rows = self.client.select(
            table="leaderboards",
            select=LEADERBOARD_COLUMNS,
            filters=[("id", f"eq.{leaderboard_id}")],
            limit=1,
        )
        return LeaderboardRecord.model_validate(rows[0]) if rows else None

    def create_leaderboard(self, payload: Dict[str, Any]) -> LeaderboardRecord:
        rows = self.client.insert(table="leaderboards", payload=payload)
        if not rows:
            raise ValueError("Failed to create leaderboard")
        return LeaderboardRecord.model_validate(rows[0])

    def update_leaderboard(
        self, leaderboard_id: int, payload: Dict[str, Any]
    ) -> Optional[LeaderboardRecord]:
        rows = self.client.update(
            table="leaderboards",
            payload=payload,
            filters=[("id", f"eq.{leaderboard_id}")],
        )
        return LeaderboardRecord.model_validate(rows[0]) if rows else None

    def delete_leaderboard(self, leaderboard_id: int) -> None:
        self.client.delete(table="leaderboards", filters=[("id", f"eq.{leaderboard_id}")])
