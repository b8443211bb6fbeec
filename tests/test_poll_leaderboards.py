from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Dict, List

import pytest

from scripts.poll_leaderboards import run_tick
from src.core.errors import UpstreamError
from src.schemas.leaderboards import (
    DateRange,
    Leaderboard,
    LeaderboardStatsResponse,
    MilestoneNotification,
)


def _leaderboard(leaderboard_id: int) -> Leaderboard:
    return Leaderboard(id=leaderboard_id, name=f"Board {leaderboard_id}", time_period="day")


def _result(leaderboard_id: int, notifications: List[MilestoneNotification]) -> LeaderboardStatsResponse:
    today = date(2026, 10, 14)
    return LeaderboardStatsResponse(
        leaderboard=_leaderboard(leaderboard_id),
        stats=[],
        date_range=DateRange(start_date=today, end_date=today),
        notifications=notifications,
    )


class StubLeaderboardsService:
    def __init__(self, ids: List[int], failures: Dict[int, Exception]) -> None:
        self.ids = ids
        self.failures = failures
        self.attempted: List[int] = []

    def list_leaderboards(self, active_only: bool = False) -> List[Leaderboard]:
        assert active_only is True
        return [_leaderboard(leaderboard_id) for leaderboard_id in self.ids]

    def get_leaderboard_stats(self, leaderboard_id: int) -> LeaderboardStatsResponse:
        self.attempted.append(leaderboard_id)
        if leaderboard_id in self.failures:
            raise self.failures[leaderboard_id]
        return _result(
            leaderboard_id,
            [
                MilestoneNotification(
                    user_id=7,
                    name="Anna",
                    previous_total=Decimal("3500"),
                    total_earnings=Decimal("3700"),
                    sound_url="https://cdn.test/milestone.mp3",
                )
            ],
        )


class BrokenListService:
    def list_leaderboards(self, active_only: bool = False) -> List[Leaderboard]:
        raise ValueError("Expecting value")


@pytest.mark.parametrize(
    "failure",
    [
        json.JSONDecodeError("Expecting value", "", 0),
        UpstreamError("Adversus request failed", source="adversus"),
    ],
)
def test_failed_leaderboard_is_skipped_and_the_rest_still_run(failure, capsys) -> None:
    service = StubLeaderboardsService(ids=[1, 2], failures={1: failure})

    emitted = run_tick(service)

    assert service.attempted == [1, 2]
    assert emitted == 1
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["leaderboardId"] == 2


def test_notifications_are_printed_as_json_lines(capsys) -> None:
    service = StubLeaderboardsService(ids=[3], failures={})

    emitted = run_tick(service)

    payload = json.loads(capsys.readouterr().out.strip())
    assert emitted == 1
    assert payload["leaderboardId"] == 3
    assert payload["userId"] == 7
    assert payload["soundUrl"] == "https://cdn.test/milestone.mp3"
    assert payload["totalEarnings"] == "3700"


def test_leaderboard_listing_failure_ends_the_tick_quietly(capsys) -> None:
    assert run_tick(BrokenListService()) == 0
    assert capsys.readouterr().out == ""
