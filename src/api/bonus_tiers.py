from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from src.api.dependencies import get_bonus_tiers_service
from src.api.meta import build_meta
from src.schemas.bonus_tiers import BonusTierEntry, BonusTierUpsertRequest
from src.services.bonus_tiers_service import BonusTiersService
from src.shared.response import ResponseEnvelope


router = APIRouter(prefix="/bonus-tiers", tags=["bonus-tiers"])


@router.get("")
def list_bonus_tiers(
    campaign: Optional[str] = Query(default=None),
    service: BonusTiersService = Depends(get_bonus_tiers_service),
) -> ResponseEnvelope[List[BonusTierEntry]]:
    data = service.list_tiers(campaign_name=campaign)
    return ResponseEnvelope(data=data, meta=build_meta(source="bonus_tiers"))


@router.post("")
def upsert_bonus_tier(
    request: BonusTierUpsertRequest,
    service: BonusTiersService = Depends(get_bonus_tiers_service),
) -> ResponseEnvelope[List[BonusTierEntry]]:
    data = service.upsert_tier(request)
    return ResponseEnvelope(data=data, meta=build_meta(source="bonus_tiers"))


@router.delete("/campaign/{campaign_name}", status_code=204)
def delete_campaign_tiers(
    campaign_name: str,
    service: BonusTiersService = Depends(get_bonus_tiers_service),
) -> Response:
    service.delete_campaign(campaign_name)
    return Response(status_code=204)


@router.delete("/{tier_id}", status_code=204)
def delete_bonus_tier(
    tier_id: int,
    service: BonusTiersService = Depends(get_bonus_tiers_service),
) -> Response:
    service.delete_tier(tier_id)
    return Response(status_code=204)
