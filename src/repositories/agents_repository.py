from __future__ import annotations

from typing import Any, Dict, List, Optional

from src.core.supabase import SupabaseClient
from src.models.scoreboard import AgentRecord

AGENT_COLUMNS = (
    "user_id,name,email,group_id,profile_image_url,personal_sound_url,created_at,updated_at"
)


class AgentsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_agents(self, group_id: Optional[int] = None) -> List[AgentRecord]:
        filters = [("group_id", f"eq.{group_id}")] if group_id is not None else None
        rows = self.client.select(
            table="agents",
            select=AGENT_COLUMNS,
            filters=filters,
            order="name.asc",
        )
        return [AgentRecord.model_validate(row) for row in rows]

    def get_agent(self, user_id: int) -> Optional[AgentRecord]:
        rows = self.client.select(
            table="agents",
            select=AGENT_COLUMNS,
            filters=[("user_id", f"eq.{user_id}")],
            limit=1,
        )
        return AgentRecord.model_validate(rows[0]) if rows else None

    def upsert_agents(self, payload: List[Dict[str, Any]]) -> List[AgentRecord]:
        # Media URLs are left out of the payload so a CRM sync never clears them.
        if not payload:
            return []
        rows = self.client.insert(
            table="agents",
            payload=payload,
            resolution="merge-duplicates",
            on_conflict="user_id",
        )
        return [AgentRecord.model_validate(row) for row in rows]

    def update_agent(self, user_id: int, payload: Dict[str, Any]) -> Optional[AgentRecord]:
        rows = self.client.update(
            table="agents",
            payload=payload,
            filters=[("user_id", f"eq.{user_id}")],
        )
        return AgentRecord.model_validate(rows[0]) if rows else None
