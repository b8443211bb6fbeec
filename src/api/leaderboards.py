from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, Response

from src.api.dependencies import get_leaderboards_service
from src.api.meta import build_meta
from src.schemas.leaderboards import Leaderboard, LeaderboardStatsResponse, LeaderboardWriteRequest
from src.services.leaderboards_service import LeaderboardsService
from src.shared.response import ResponseEnvelope


router = APIRouter(prefix="/leaderboards", tags=["leaderboards"])


@router.get("")
def list_leaderboards(
    active_only: bool = Query(default=False),
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> ResponseEnvelope[List[Leaderboard]]:
    data = service.list_leaderboards(active_only=active_only)
    return ResponseEnvelope(data=data, meta=build_meta(source="leaderboards"))


@router.post("", status_code=201)
def create_leaderboard(
    request: LeaderboardWriteRequest,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> ResponseEnvelope[Leaderboard]:
    created = service.create_leaderboard(request)
    return ResponseEnvelope(data=created, meta=build_meta(source="leaderboards"))


@router.get("/{leaderboard_id}")
def get_leaderboard(
    leaderboard_id: int,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> ResponseEnvelope[Leaderboard]:
    data = service.get_leaderboard(leaderboard_id)
    return ResponseEnvelope(data=data, meta=build_meta(source="leaderboards"))


@router.put("/{leaderboard_id}")
def update_leaderboard(
    leaderboard_id: int,
    request: LeaderboardWriteRequest,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> ResponseEnvelope[Leaderboard]:
    data = service.update_leaderboard(leaderboard_id, request)
    return ResponseEnvelope(data=data, meta=build_meta(source="leaderboards"))


@router.delete("/{leaderboard_id}", status_code=204)
def delete_leaderboard(
    leaderboard_id: int,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> Response:
    service.delete_leaderboard(leaderboard_id)
    return Response(status_code=204)


@router.get("/{leaderboard_id}/stats")
def leaderboard_stats(
    leaderboard_id: int,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> ResponseEnvelope[LeaderboardStatsResponse]:
    data = service.get_leaderboard_stats(leaderboard_id)
    time_window = f"{data.date_range.start_date.isoformat()}..{data.date_range.end_date.isoformat()}"
    return ResponseEnvelope(
        data=data,
        meta=build_meta(source="adversus", time_window=time_window),
    )


@router.post("/{leaderboard_id}/milestones/reset", status_code=204)
def reset_milestones(
    leaderboard_id: int,
    service: LeaderboardsService = Depends(get_leaderboards_service),
) -> Response:
    service.reset_milestones(leaderboard_id)
    return Response(status_code=204)
