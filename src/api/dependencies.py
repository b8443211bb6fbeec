from __future__ import annotations

from functools import lru_cache

from src.analytics.milestones import MilestoneSessions
from src.core.adversus import AdversusClient
from src.repositories.agents_repository import AgentsRepository
from src.repositories.bonus_tiers_repository import (
    AgentBonusAssignmentsRepository,
    BonusTiersRepository,
)
from src.repositories.leaderboards_repository import LeaderboardsRepository
from src.repositories.slideshow_repository import SlideshowSettingsRepository
from src.services.agents_service import AgentsService
from src.services.bonus_tiers_service import BonusTiersService
from src.services.leaderboards_service import LeaderboardsService
from src.services.slideshow_service import SlideshowService


@lru_cache
def get_adversus_client() -> AdversusClient:
    return AdversusClient()


@lru_cache
def get_milestone_sessions() -> MilestoneSessions:
    return MilestoneSessions()


@lru_cache
def get_agents_repository() -> AgentsRepository:
    return AgentsRepository()


@lru_cache
def get_bonus_tiers_repository() -> BonusTiersRepository:
    return BonusTiersRepository()


@lru_cache
def get_agent_bonus_assignments_repository() -> AgentBonusAssignmentsRepository:
    return AgentBonusAssignmentsRepository()


@lru_cache
def get_leaderboards_repository() -> LeaderboardsRepository:
    return LeaderboardsRepository()


@lru_cache
def get_slideshow_settings_repository() -> SlideshowSettingsRepository:
    return SlideshowSettingsRepository()


def get_agents_service() -> AgentsService:
    return AgentsService(
        repository=get_agents_repository(),
        assignments_repository=get_agent_bonus_assignments_repository(),
        tiers_repository=get_bonus_tiers_repository(),
        crm_client=get_adversus_client(),
    )


def get_bonus_tiers_service() -> BonusTiersService:
    return BonusTiersService(repository=get_bonus_tiers_repository())


def get_slideshow_service() -> SlideshowService:
    return SlideshowService(repository=get_slideshow_settings_repository())


def get_leaderboards_service() -> LeaderboardsService:
    return LeaderboardsService(
        repository=get_leaderboards_repository(),
        agents_service=get_agents_service(),
        slideshow_service=get_slideshow_service(),
        crm_client=get_adversus_client(),
        sessions=get_milestone_sessions(),
    )
