from __future__ import annotations

from decimal import Decimal

from src.analytics.bonus import resolve_bonus
from src.schemas.bonus_tiers import BonusTier, CampaignAssignment

STANDARD_TIERS = [
    BonusTier(deals_required=3, bonus_per_deal=Decimal("600")),
    BonusTier(deals_required=4, bonus_per_deal=Decimal("800")),
    BonusTier(deals_required=5, bonus_per_deal=Decimal("1000")),
]


def _assignment(campaign: str, tiers=STANDARD_TIERS) -> CampaignAssignment:
    return CampaignAssignment(campaign_name=campaign, bonus_tiers=list(tiers))


def test_highest_qualifying_tier_pays_every_deal() -> None:
    bonus = resolve_bonus({"Solar": 4}, [_assignment("Solar")])
    assert bonus == Decimal("3200")


def test_no_qualifying_tier_pays_nothing() -> None:
    assert resolve_bonus({"Solar": 2}, [_assignment("Solar")]) == Decimal("0")


def test_unsorted_tiers_still_pick_largest_threshold() -> None:
    shuffled = [STANDARD_TIERS[2], STANDARD_TIERS[0], STANDARD_TIERS[1]]
    assert resolve_bonus({"Solar": 7}, [_assignment("Solar", shuffled)]) == Decimal("7000")


def test_bonus_sums_across_campaigns_and_ignores_unassigned_deals() -> None:
    assignments = [
        _assignment("Solar"),
        _assignment("Fiber", [BonusTier(deals_required=1, bonus_per_deal=Decimal("50"))]),
    ]
    campaign_deals = {"Solar": 3, "Fiber": 2, "Insurance": 10}
    assert resolve_bonus(campaign_deals, assignments) == Decimal("1800") + Decimal("100")


def test_empty_or_missing_assignments_yield_zero() -> None:
    assert resolve_bonus({"Solar": 5}, []) == Decimal("0")
    assert resolve_bonus({"Solar": 5}, None) == Decimal("0")
    assert resolve_bonus({}, [_assignment("Solar")]) == Decimal("0")
