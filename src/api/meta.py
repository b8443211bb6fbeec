from __future__ import annotations

from datetime import date, datetime, timezone

from src.shared.response import Meta

CALCULATION_VERSION = "v1"


def build_meta(*, source: str, time_window: str = "now", data_status: str = "live") -> Meta:
    return Meta(
        as_of_date=date.today().isoformat(),
        source=source,
        time_window=time_window,
        calculation_version=CALCULATION_VERSION,
        data_status=data_status,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )
