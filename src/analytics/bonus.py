from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping, Optional

from src.schemas.bonus_tiers import BonusTier, CampaignAssignment


def _winning_tier(tiers: Iterable[BonusTier], deal_count: int) -> Optional[BonusTier]:
    qualifying = [tier for tier in tiers if tier.deals_required <= deal_count]
    if not qualifying:
        return None
    return max(qualifying, key=lambda tier: tier.deals_required)


def resolve_bonus(
    campaign_deals: Mapping[str, int],
    assignments: Optional[Iterable[CampaignAssignment]],
) -> Decimal:
    """Bonus earned across an agent's assigned campaigns.

    The highest tier the agent qualifies for wins, and every deal in that
    campaign is paid at the winning tier's rate. Tiers are not cumulative.
    """
    bonus = Decimal("0")
    for assignment in assignments or ():
        deal_count = campaign_deals.get(assignment.campaign_name, 0)
        if deal_count <= 0:
            continue
        tier = _winning_tier(assignment.bonus_tiers, deal_count)
        if tier is None:
            continue
        bonus += deal_count * tier.bonus_per_deal
    return bonus
