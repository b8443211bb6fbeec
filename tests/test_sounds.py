from __future__ import annotations

from decimal import Decimal

from src.analytics.milestones import CrossingEvent
from src.analytics.sounds import select_sound
from src.schemas.slideshow import SlideshowConfig
from tests.factories import make_stats


def _config(**overrides) -> SlideshowConfig:
    values = {
        "milestone_threshold": Decimal("3600"),
        "sound_enabled": True,
        "standard_sound_url": "https://cdn.test/standard.mp3",
        "milestone_sound_url": "https://cdn.test/milestone.mp3",
    }
    values.update(overrides)
    return SlideshowConfig(**values)


def _event(total: str, personal_sound_url=None) -> CrossingEvent:
    agent = make_stats(1, total, personal_sound_url=personal_sound_url)
    return CrossingEvent(agent=agent, previous_total=Decimal("0"), current_total=agent.total_earnings)


def test_personal_sound_wins_above_threshold() -> None:
    event = _event("3600", personal_sound_url="https://cdn.test/anna.mp3")
    assert select_sound(event, _config()) == "https://cdn.test/anna.mp3"


def test_milestone_sound_when_agent_has_no_personal_sound() -> None:
    assert select_sound(_event("4000"), _config()) == "https://cdn.test/milestone.mp3"


def test_standard_sound_below_threshold() -> None:
    assert select_sound(_event("100"), _config()) == "https://cdn.test/standard.mp3"


def test_sound_disabled_returns_none() -> None:
    event = _event("4000", personal_sound_url="https://cdn.test/anna.mp3")
    assert select_sound(event, _config(sound_enabled=False)) is None


def test_unset_urls_return_none() -> None:
    config = _config(standard_sound_url=None, milestone_sound_url=None)
    assert select_sound(_event("4000"), config) is None
    assert select_sound(_event("100"), config) is None
