from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from src.models.scoreboard import SlideshowSettingsRecord
from src.schemas.slideshow import SlideshowSettingsUpdateRequest
from src.services.slideshow_service import SlideshowService


class StubSlideshowRepository:
    def __init__(self, record: Optional[SlideshowSettingsRecord] = None) -> None:
        self.record = record or SlideshowSettingsRecord()
        self.saved_payload: Optional[Dict[str, Any]] = None

    def get_settings(self) -> SlideshowSettingsRecord:
        return self.record

    def save_settings(self, payload: Dict[str, Any]) -> SlideshowSettingsRecord:
        self.saved_payload = payload
        self.record = SlideshowSettingsRecord.model_validate(payload)
        return self.record


def test_missing_threshold_falls_back_to_default() -> None:
    service = SlideshowService(repository=StubSlideshowRepository())

    config = service.get_config()

    assert config.milestone_threshold == Decimal("3600")
    assert config.sound_enabled is True


def test_zero_stored_threshold_falls_back_to_default() -> None:
    record = SlideshowSettingsRecord(milestone_threshold=Decimal("0"), enable_sound=False)
    service = SlideshowService(repository=StubSlideshowRepository(record))

    config = service.get_config()

    assert config.milestone_threshold == Decimal("3600")
    assert config.sound_enabled is False


def test_update_config_stores_threshold_and_blanks_empty_urls() -> None:
    repository = StubSlideshowRepository()
    service = SlideshowService(repository=repository)

    config = service.update_config(
        SlideshowSettingsUpdateRequest(
            milestone_threshold=Decimal("5000"),
            standard_sound_url="",
            milestone_sound_url="https://cdn.test/win.mp3",
        )
    )

    assert repository.saved_payload is not None
    assert repository.saved_payload["milestone_threshold"] == "5000"
    assert repository.saved_payload["standard_sound_url"] is None
    assert config.milestone_threshold == Decimal("5000")
    assert config.milestone_sound_url == "https://cdn.test/win.mp3"


def test_update_config_without_threshold_uses_default() -> None:
    repository = StubSlideshowRepository()
    service = SlideshowService(repository=repository)

    config = service.update_config(SlideshowSettingsUpdateRequest(milestone_threshold=Decimal("0")))

    assert repository.saved_payload["milestone_threshold"] == "3600"
    assert config.milestone_threshold == Decimal("3600")
