from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from src.shared.base import BaseSchema

DEFAULT_MILESTONE_THRESHOLD = Decimal("3600")


class SlideshowConfig(BaseSchema):
    milestone_threshold: Decimal = DEFAULT_MILESTONE_THRESHOLD
    sound_enabled: bool = True
    standard_sound_url: Optional[str] = None
    milestone_sound_url: Optional[str] = None
    display_duration: int = 10


class SlideshowSettingsUpdateRequest(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    display_duration: int = Field(default=10, ge=1, le=600)
    sound_enabled: bool = True
    standard_sound_url: Optional[str] = Field(default=None, max_length=2000)
    milestone_sound_url: Optional[str] = Field(default=None, max_length=2000)
    milestone_threshold: Optional[Decimal] = Field(default=None, ge=0)
