from __future__ import annotations

from decimal import Decimal

from src.schemas.leaderboards import EarningsColor, TimePeriod

DAY_GREEN_THRESHOLD = Decimal("3400")
PERIOD_GREEN_THRESHOLD = Decimal("50000")


def classify_earnings(total_earnings: Decimal, period: TimePeriod) -> EarningsColor:
    # Display colors only; unrelated to the configurable milestone threshold.
    if total_earnings == 0:
        return "red"
    if period == "day":
        return "orange" if total_earnings < DAY_GREEN_THRESHOLD else "green"
    return "black" if total_earnings < PERIOD_GREEN_THRESHOLD else "green"
