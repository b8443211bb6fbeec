from __future__ import annotations

from typing import Any, Dict

from src.core.supabase import SupabaseClient
from src.models.scoreboard import SlideshowSettingsRecord

SETTINGS_ROW_ID = 1


class SlideshowSettingsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def get_settings(self) -> SlideshowSettingsRecord:
        rows = self.client.select(
            table="slideshow_settings",
            select=(
                "id,display_duration,enable_sound,standard_sound_url,milestone_sound_url,"
                "milestone_threshold,updated_at"
            ),
            filters=[("id", f"eq.{SETTINGS_ROW_ID}")],
            limit=1,
        )
        if not rows:
            return SlideshowSettingsRecord()
        return SlideshowSettingsRecord.model_validate(rows[0])

    def save_settings(self, payload: Dict[str, Any]) -> SlideshowSettingsRecord:
        rows = self.client.insert(
            table="slideshow_settings",
            payload={**payload, "id": SETTINGS_ROW_ID},
            resolution="merge-duplicates",
            on_conflict="id",
        )
        if not rows:
            return self.get_settings()
        return SlideshowSettingsRecord.model_validate(rows[0])
