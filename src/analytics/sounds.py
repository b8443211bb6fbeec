from __future__ import annotations

from typing import Optional

from src.analytics.milestones import CrossingEvent
from src.schemas.slideshow import SlideshowConfig


def select_sound(event: CrossingEvent, config: SlideshowConfig) -> Optional[str]:
    if not config.sound_enabled:
        return None
    # Crossings only fire at or above the threshold, so the standard sound
    # branch is unreachable from MilestoneTracker output.
    if event.current_total < config.milestone_threshold:
        return config.standard_sound_url or None
    return event.agent.personal_sound_url or config.milestone_sound_url or None
