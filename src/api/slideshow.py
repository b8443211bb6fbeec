from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.dependencies import get_slideshow_service
from src.api.meta import build_meta
from src.schemas.slideshow import SlideshowConfig, SlideshowSettingsUpdateRequest
from src.services.slideshow_service import SlideshowService
from src.shared.response import ResponseEnvelope


router = APIRouter(prefix="/slideshow-settings", tags=["slideshow"])


@router.get("")
def get_slideshow_settings(
    service: SlideshowService = Depends(get_slideshow_service),
) -> ResponseEnvelope[SlideshowConfig]:
    return ResponseEnvelope(data=service.get_config(), meta=build_meta(source="slideshow_settings"))


@router.put("")
def update_slideshow_settings(
    request: SlideshowSettingsUpdateRequest,
    service: SlideshowService = Depends(get_slideshow_service),
) -> ResponseEnvelope[SlideshowConfig]:
    data = service.update_config(request)
    return ResponseEnvelope(data=data, meta=build_meta(source="slideshow_settings"))
