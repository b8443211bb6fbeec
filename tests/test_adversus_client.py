from __future__ import annotations

from datetime import date
from decimal import Decimal

import httpx
import pytest

from src.core.adversus import AdversusClient
from src.core.errors import BadRequestError, UpstreamError


def _client(handler) -> AdversusClient:
    return AdversusClient(http_client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_fetch_success_leads_coerces_fields_and_skips_bad_rows() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json=[
                {"id": 1, "userId": "42", "commission": "120.50", "campaign": "Solar", "smsCount": "3"},
                {"id": 2, "user_id": 43, "commission": None, "campaign": "", "sms_count": None},
                {"id": 3, "userId": "not-a-number", "commission": "10"},
                {"id": 4, "userId": 44, "commission": "abc", "smsCount": "-2"},
            ],
        )

    leads = _client(handler).fetch_success_leads(date(2026, 10, 1), date(2026, 10, 14))

    assert seen["path"].endswith("/v1/leads/")
    assert seen["params"] == {"status": "success", "from": "2026-10-01", "to": "2026-10-14"}
    assert seen["auth"].startswith("Bearer ")
    assert [lead.user_id for lead in leads] == [42, 43, 44]
    assert leads[0].commission == Decimal("120.50")
    assert leads[0].sms_count == 3
    assert leads[1].commission == Decimal("0")
    assert leads[1].campaign is None
    assert leads[1].sms_count == 0
    assert leads[2].commission == Decimal("0")
    assert leads[2].sms_count == 0


def test_fetch_user_reads_group() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/users/42")
        return httpx.Response(
            200,
            json={"id": "42", "name": "Anna", "email": "anna@example.com", "group": {"id": "7", "name": "Team A"}},
        )

    user = _client(handler).fetch_user("42")

    assert user.user_id == 42
    assert user.group_id == 7
    assert user.group_name == "Team A"


def test_fetch_user_rejects_non_numeric_id_before_calling_out() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(BadRequestError):
        _client(handler).fetch_user("abc")


def test_transport_failure_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    with pytest.raises(UpstreamError) as exc_info:
        _client(handler).fetch_all_users()
    assert exc_info.value.status_code == 502
