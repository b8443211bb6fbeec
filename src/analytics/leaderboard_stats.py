from __future__ import annotations

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Sequence

from src.analytics.bonus import resolve_bonus
from src.models.scoreboard import LeadRecord
from src.schemas.agents import Agent
from src.schemas.leaderboards import AgentStats


class _Tally:
    __slots__ = ("deals", "commission", "sms_sent", "campaign_deals")

    def __init__(self) -> None:
        self.deals = 0
        self.commission = Decimal("0")
        self.sms_sent = 0
        self.campaign_deals: Dict[str, int] = defaultdict(int)


def sms_success_rate(deals: int, sms_sent: int) -> int:
    if sms_sent <= 0:
        return 0
    rate = Decimal(100 * deals) / Decimal(sms_sent)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def aggregate_stats(leads: Iterable[LeadRecord], agents: Sequence[Agent]) -> List[AgentStats]:
    """Fold leads into per-agent totals, ranked by total earnings.

    Leads for agents outside the roster are ignored. The sort is stable, so
    agents with equal totals keep their roster order.
    """
    roster: Dict[int, Agent] = {}
    for agent in agents:
        roster.setdefault(agent.user_id, agent)
    tallies: Dict[int, _Tally] = {user_id: _Tally() for user_id in roster}

    for lead in leads:
        tally = tallies.get(lead.user_id)
        if tally is None:
            continue
        tally.deals += 1
        tally.commission += lead.commission
        tally.sms_sent += lead.sms_count
        if lead.campaign:
            tally.campaign_deals[lead.campaign] += 1

    stats: List[AgentStats] = []
    for user_id, agent in roster.items():
        tally = tallies[user_id]
        campaign_deals = dict(tally.campaign_deals)
        stats.append(
            AgentStats(
                user_id=user_id,
                name=agent.name,
                profile_image_url=agent.profile_image_url,
                personal_sound_url=agent.personal_sound_url,
                deals=tally.deals,
                commission=tally.commission,
                sms_sent=tally.sms_sent,
                sms_success_rate=sms_success_rate(tally.deals, tally.sms_sent),
                campaign_deals=campaign_deals,
                bonus=resolve_bonus(campaign_deals, agent.bonus_assignments),
            )
        )
    return sorted(stats, key=lambda row: row.total_earnings, reverse=True)
