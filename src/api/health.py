from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from src.api.meta import build_meta
from src.shared.response import ResponseEnvelope


router = APIRouter(tags=["health"])


def _status_payload() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/health")
def health_check() -> ResponseEnvelope[dict]:
    return ResponseEnvelope(data=_status_payload(), meta=build_meta(source="system"))


@router.get("/healthz")
def health_check_liveness() -> ResponseEnvelope[dict]:
    return ResponseEnvelope(data=_status_payload(), meta=build_meta(source="system"))
