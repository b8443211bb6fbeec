from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from src.core.adversus import AdversusClient
from src.core.errors import NotFoundError
from src.models.scoreboard import AgentRecord, CrmUserRecord
from src.repositories.agents_repository import AgentsRepository
from src.repositories.bonus_tiers_repository import (
    AgentBonusAssignmentsRepository,
    BonusTiersRepository,
)
from src.schemas.agents import Agent, AgentSyncResult
from src.schemas.bonus_tiers import BonusTier, CampaignAssignment

logger = logging.getLogger(__name__)


class AgentsService:
    def __init__(
        self,
        repository: AgentsRepository,
        assignments_repository: AgentBonusAssignmentsRepository,
        tiers_repository: BonusTiersRepository,
        crm_client: AdversusClient,
    ) -> None:
        self.repository = repository
        self.assignments_repository = assignments_repository
        self.tiers_repository = tiers_repository
        self.crm_client = crm_client

    @staticmethod
    def _to_agent(record: AgentRecord, assignments: Optional[List[CampaignAssignment]] = None) -> Agent:
        return Agent(
            user_id=record.user_id,
            name=record.name,
            email=record.email,
            group_id=record.group_id,
            profile_image_url=record.profile_image_url,
            personal_sound_url=record.personal_sound_url,
            bonus_assignments=assignments or [],
        )

    @staticmethod
    def _sync_payload(user: CrmUserRecord) -> Dict[str, object]:
        return {
            "user_id": user.user_id,
            "name": user.name,
            "email": user.email,
            "group_id": user.group_id,
        }

    def list_agents(self, group_id: Optional[int] = None) -> List[Agent]:
        return [self._to_agent(record) for record in self.repository.list_agents(group_id=group_id)]

    def get_agent(self, user_id: int) -> Agent:
        record = self.repository.get_agent(user_id)
        if record is None:
            raise NotFoundError("Agent not found")
        return self._to_agent(record, self.get_bonus_assignments(user_id))

    def sync_agent(self, user_id: int) -> Agent:
        user = self.crm_client.fetch_user(user_id)
        self.repository.upsert_agents([self._sync_payload(user)])
        return self.get_agent(user.user_id)

    def sync_all_agents(self) -> AgentSyncResult:
        users = self.crm_client.fetch_all_users()
        synced = self.repository.upsert_agents([self._sync_payload(user) for user in users])
        count = len(synced) if synced else len(users)
        logger.info("Synced %d agents from Adversus", count)
        return AgentSyncResult(message=f"Synced {count} agents", count=count)

    def set_profile_image(self, user_id: int, url: Optional[str]) -> Agent:
        record = self.repository.update_agent(user_id, {"profile_image_url": url})
        if record is None:
            raise NotFoundError("Agent not found")
        return self._to_agent(record)

    def set_personal_sound(self, user_id: int, url: Optional[str]) -> Agent:
        record = self.repository.update_agent(user_id, {"personal_sound_url": url})
        if record is None:
            raise NotFoundError("Agent not found")
        return self._to_agent(record)

    def get_bonus_assignments(self, user_id: int) -> List[CampaignAssignment]:
        return self._assignments_by_user([user_id]).get(user_id, [])

    def assign_bonus(self, user_id: int, campaign_name: str) -> List[CampaignAssignment]:
        if self.repository.get_agent(user_id) is None:
            raise NotFoundError("Agent not found")
        self.assignments_repository.assign(user_id, campaign_name.strip())
        return self.get_bonus_assignments(user_id)

    def unassign_bonus(self, user_id: int, campaign_name: str) -> None:
        self.assignments_repository.unassign(user_id, campaign_name)

    def get_roster(self, group_id: Optional[int] = None) -> List[Agent]:
        """Agents for one leaderboard pass, each with its tier schedules attached."""
        records = self.repository.list_agents(group_id=group_id)
        assignments = self._assignments_by_user([record.user_id for record in records])
        return [self._to_agent(record, assignments.get(record.user_id)) for record in records]

    def _assignments_by_user(self, user_ids: List[int]) -> Dict[int, List[CampaignAssignment]]:
        rows = self.assignments_repository.list_for_users(user_ids)
        if not rows:
            return {}
        tiers_by_campaign: Dict[str, List[BonusTier]] = defaultdict(list)
        for tier in self.tiers_repository.list_tiers({row.campaign_name for row in rows}):
            if tier.deals_required <= 0 or tier.bonus_per_deal < 0:
                continue
            tiers_by_campaign[tier.campaign_name].append(
                BonusTier(deals_required=tier.deals_required, bonus_per_deal=tier.bonus_per_deal)
            )

        result: Dict[int, List[CampaignAssignment]] = defaultdict(list)
        for row in rows:
            result[row.user_id].append(
                CampaignAssignment(
                    campaign_name=row.campaign_name,
                    bonus_tiers=list(tiers_by_campaign.get(row.campaign_name, [])),
                )
            )
        return dict(result)
