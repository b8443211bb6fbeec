from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Tuple

from src.models.scoreboard import LeadRecord
from src.schemas.agents import Agent
from src.schemas.bonus_tiers import BonusTier, CampaignAssignment
from src.schemas.leaderboards import AgentStats


def make_lead(
    lead_id: str,
    user_id: int,
    commission: str = "0",
    campaign: Optional[str] = None,
    sms_count: int = 0,
) -> LeadRecord:
    return LeadRecord(
        id=lead_id,
        user_id=user_id,
        commission=Decimal(commission),
        campaign=campaign,
        sms_count=sms_count,
    )


def make_agent(
    user_id: int,
    name: str,
    schedules: Optional[Iterable[Tuple[str, Sequence[Tuple[int, str]]]]] = None,
    personal_sound_url: Optional[str] = None,
) -> Agent:
    assignments: List[CampaignAssignment] = [
        CampaignAssignment(
            campaign_name=campaign,
            bonus_tiers=[
                BonusTier(deals_required=deals, bonus_per_deal=Decimal(bonus))
                for deals, bonus in tiers
            ],
        )
        for campaign, tiers in (schedules or [])
    ]
    return Agent(
        user_id=user_id,
        name=name,
        personal_sound_url=personal_sound_url,
        bonus_assignments=assignments,
    )


def make_stats(user_id: int, total: str, personal_sound_url: Optional[str] = None) -> AgentStats:
    return AgentStats(
        user_id=user_id,
        name=f"Agent {user_id}",
        commission=Decimal(total),
        personal_sound_url=personal_sound_url,
    )
