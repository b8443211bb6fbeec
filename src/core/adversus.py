from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from src.core.config import get_settings
from src.core.errors import AppError, UpstreamError
from src.models.scoreboard import CrmUserRecord, LeadRecord
from src.shared.ids import normalize_user_id

logger = logging.getLogger(__name__)


def _first(payload: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value not in (None, ""):
            return value
    return None


def _to_decimal(value: Any) -> Decimal:
    if value in (None, ""):
        return Decimal("0")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
    if not parsed.is_finite() or parsed < 0:
        return Decimal("0")
    return parsed


def _to_count(value: Any) -> int:
    if value in (None, ""):
        return 0
    try:
        parsed = int(float(str(value)))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(parsed, 0)


def _optional_str(value: Any) -> Optional[str]:
    return None if value in (None, "") else str(value)


def default_lead_window(today: date) -> Tuple[date, date]:
    """Current month plus the seven days before it."""
    return today.replace(day=1) - timedelta(days=7), today


class AdversusClient:
    """Adversus CRM boundary. Every numeric field is coerced here."""

    def __init__(self, http_client: Optional[httpx.Client] = None) -> None:
        settings = get_settings()
        self.base_url = settings.adversus_api_url.rstrip("/")
        self._client = http_client or httpx.Client(timeout=settings.adversus_timeout_seconds)
        self._headers = {
            "Authorization": f"Bearer {settings.adversus_api_key or ''}",
            "Content-Type": "application/json",
        }

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self._client.get(url, params=params, headers=self._headers)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Adversus request to %s failed: %s", path, exc)
            raise UpstreamError(f"Adversus request failed: {exc}", source="adversus") from exc

    @staticmethod
    def _parse_user(payload: Dict[str, Any]) -> CrmUserRecord:
        group = payload.get("group") or {}
        group_id = group.get("id") if isinstance(group, dict) else None
        return CrmUserRecord(
            user_id=normalize_user_id(payload.get("id")),
            name=str(payload.get("name") or ""),
            email=_optional_str(payload.get("email")),
            group_id=normalize_user_id(group_id) if group_id not in (None, "") else None,
            group_name=_optional_str(group.get("name")) if isinstance(group, dict) else None,
        )

    @staticmethod
    def parse_lead(payload: Dict[str, Any]) -> LeadRecord:
        return LeadRecord(
            id=str(payload.get("id")),
            user_id=normalize_user_id(_first(payload, "userId", "user_id")),
            user_name=_optional_str(_first(payload, "userName", "user_name")),
            status=_optional_str(payload.get("status")),
            commission=_to_decimal(payload.get("commission")),
            campaign=_optional_str(payload.get("campaign")),
            campaign_id=_optional_str(_first(payload, "campaignId", "campaign_id")),
            created_at=_first(payload, "createdAt", "created_at"),
            sms_count=_to_count(_first(payload, "smsCount", "sms_count")),
            phone_number=_optional_str(_first(payload, "phoneNumber", "phone_number")),
        )

    def fetch_user(self, user_id: Any) -> CrmUserRecord:
        normalized = normalize_user_id(user_id)
        return self._parse_user(self._get(f"/users/{normalized}"))

    def fetch_all_users(self) -> List[CrmUserRecord]:
        payload = self._get("/users")
        users: List[CrmUserRecord] = []
        for row in payload or []:
            try:
                users.append(self._parse_user(row))
            except (AppError, ValidationError) as exc:
                logger.warning("Skipping Adversus user %r: %s", row.get("id"), exc)
        return users

    def fetch_success_leads(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        **filters: Any,
    ) -> List[LeadRecord]:
        if start_date is None or end_date is None:
            start_date, end_date = default_lead_window(date.today())
        params: Dict[str, Any] = {
            "status": "success",
            "from": start_date.isoformat(),
            "to": end_date.isoformat(),
        }
        params.update({key: value for key, value in filters.items() if value is not None})
        logger.info("Fetching success leads from %s to %s", params["from"], params["to"])

        payload = self._get("/v1/leads/", params=params)
        leads: List[LeadRecord] = []
        for row in payload or []:
            try:
                leads.append(self.parse_lead(row))
            except (AppError, ValidationError) as exc:
                logger.warning("Skipping Adversus lead %r: %s", row.get("id"), exc)
        logger.info("Fetched %d success leads", len(leads))
        return leads
