from __future__ import annotations

from decimal import Decimal

from src.models.scoreboard import SlideshowSettingsRecord
from src.repositories.slideshow_repository import SlideshowSettingsRepository
from src.schemas.slideshow import (
    DEFAULT_MILESTONE_THRESHOLD,
    SlideshowConfig,
    SlideshowSettingsUpdateRequest,
)


class SlideshowService:
    def __init__(self, repository: SlideshowSettingsRepository) -> None:
        self.repository = repository

    @staticmethod
    def _to_config(record: SlideshowSettingsRecord) -> SlideshowConfig:
        return SlideshowConfig(
            milestone_threshold=record.milestone_threshold or DEFAULT_MILESTONE_THRESHOLD,
            sound_enabled=record.enable_sound,
            standard_sound_url=record.standard_sound_url,
            milestone_sound_url=record.milestone_sound_url,
            display_duration=record.display_duration,
        )

    def get_config(self) -> SlideshowConfig:
        return self._to_config(self.repository.get_settings())

    def update_config(self, request: SlideshowSettingsUpdateRequest) -> SlideshowConfig:
        threshold = request.milestone_threshold
        if not threshold:
            threshold = DEFAULT_MILESTONE_THRESHOLD
        record = self.repository.save_settings(
            {
                "display_duration": request.display_duration,
                "enable_sound": request.sound_enabled,
                "standard_sound_url": request.standard_sound_url or None,
                "milestone_sound_url": request.milestone_sound_url or None,
                "milestone_threshold": str(Decimal(threshold)),
            }
        )
        return self._to_config(record)
