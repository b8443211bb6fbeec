from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Tuple

from src.core.errors import BadRequestError


def week_start(today: date) -> date:
    # Weeks start on Sunday; date.weekday() is Monday=0.
    return today - timedelta(days=(today.weekday() + 1) % 7)


def resolve_date_range(
    time_period: str,
    today: date,
    custom_start: Optional[date] = None,
    custom_end: Optional[date] = None,
) -> Tuple[date, date]:
    if time_period == "day":
        return today, today
    if time_period == "week":
        return week_start(today), today
    if time_period == "month":
        return today.replace(day=1), today
    if time_period == "custom":
        if custom_start is None or custom_end is None:
            raise BadRequestError("Custom leaderboard is missing its date range")
        return custom_start, custom_end
    raise BadRequestError(f"Unknown time period: {time_period}")

