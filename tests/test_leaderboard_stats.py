from __future__ import annotations

from decimal import Decimal

from src.analytics.leaderboard_stats import aggregate_stats, sms_success_rate
from tests.factories import make_agent, make_lead

SOLAR_TIERS = ("Solar", [(3, "600"), (4, "800"), (5, "1000")])


def test_aggregate_folds_leads_and_resolves_bonus() -> None:
    agents = [make_agent(1, "Anna", [SOLAR_TIERS]), make_agent(2, "Bo")]
    leads = [
        make_lead("l1", 1, "100", "Solar", sms_count=2),
        make_lead("l2", 1, "150", "Solar", sms_count=3),
        make_lead("l3", 1, "50", "Solar", sms_count=1),
        make_lead("l4", 1, "0", "Solar", sms_count=2),
        make_lead("l5", 2, "900", None, sms_count=0),
    ]

    stats = aggregate_stats(leads, agents)

    anna = next(row for row in stats if row.user_id == 1)
    assert anna.deals == 4
    assert anna.commission == Decimal("300")
    assert anna.sms_sent == 8
    assert anna.sms_success_rate == 50
    assert anna.campaign_deals == {"Solar": 4}
    assert anna.bonus == Decimal("3200")
    assert anna.total_earnings == Decimal("3500")

    bo = next(row for row in stats if row.user_id == 2)
    assert bo.campaign_deals == {}
    assert bo.sms_success_rate == 0
    assert [row.user_id for row in stats] == [1, 2]


def test_leads_for_unknown_agents_are_dropped() -> None:
    agents = [make_agent(1, "Anna")]
    leads = [make_lead("l1", 1, "100"), make_lead("l2", 99, "5000"), make_lead("l3", 98, "1")]

    stats = aggregate_stats(leads, agents)

    assert len(stats) == 1
    assert stats[0].deals == 1
    assert stats[0].commission == Decimal("100")
    assert sum(row.deals for row in stats) <= len(leads)


def test_equal_totals_keep_roster_order() -> None:
    agents = [make_agent(1, "Anna"), make_agent(2, "Bo"), make_agent(3, "Cy")]
    leads = [make_lead("l1", 1, "500"), make_lead("l2", 2, "500"), make_lead("l3", 3, "900")]

    stats = aggregate_stats(leads, agents)

    assert [row.user_id for row in stats] == [3, 1, 2]


def test_agents_without_leads_are_listed_with_zero_totals() -> None:
    stats = aggregate_stats([], [make_agent(7, "Dee")])

    assert len(stats) == 1
    assert stats[0].deals == 0
    assert stats[0].total_earnings == Decimal("0")


def test_total_earnings_is_commission_plus_bonus() -> None:
    agents = [make_agent(1, "Anna", [SOLAR_TIERS]), make_agent(2, "Bo", [SOLAR_TIERS])]
    leads = [make_lead(f"a{i}", 1, "10.5", "Solar") for i in range(5)]
    leads += [make_lead(f"b{i}", 2, "7", "Solar") for i in range(2)]

    for row in aggregate_stats(leads, agents):
        assert row.total_earnings == row.commission + row.bonus


def test_sms_success_rate_rounds_half_up_and_guards_zero() -> None:
    assert sms_success_rate(0, 0) == 0
    assert sms_success_rate(3, 0) == 0
    assert sms_success_rate(1, 8) == 13
    assert sms_success_rate(1, 3) == 33
    assert sms_success_rate(5, 2) == 250
