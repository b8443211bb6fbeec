from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from src.api.dependencies import get_agents_service
from src.api.meta import build_meta
from src.schemas.agents import (
    Agent,
    AgentMediaUpdateRequest,
    AgentSyncResult,
    BonusAssignmentRequest,
)
from src.schemas.bonus_tiers import CampaignAssignment
from src.services.agents_service import AgentsService
from src.shared.ids import normalize_user_id
from src.shared.response import ResponseEnvelope


router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("")
def list_agents(
    group_id: Optional[int] = Query(default=None),
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[List[Agent]]:
    data = service.list_agents(group_id=group_id)
    return ResponseEnvelope(data=data, meta=build_meta(source="agents"))


@router.post("/sync-all")
def sync_all_agents(
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[AgentSyncResult]:
    result = service.sync_all_agents()
    return ResponseEnvelope(data=result, meta=build_meta(source="adversus"))


@router.post("/sync/{user_id}")
def sync_agent(
    user_id: str,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[Agent]:
    agent = service.sync_agent(normalize_user_id(user_id))
    return ResponseEnvelope(data=agent, meta=build_meta(source="adversus"))


@router.get("/{user_id}")
def get_agent(
    user_id: str,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[Agent]:
    agent = service.get_agent(normalize_user_id(user_id))
    return ResponseEnvelope(data=agent, meta=build_meta(source="agents"))


@router.put("/{user_id}/profile-image")
def update_profile_image(
    user_id: str,
    request: AgentMediaUpdateRequest,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[Agent]:
    agent = service.set_profile_image(normalize_user_id(user_id), request.url)
    return ResponseEnvelope(data=agent, meta=build_meta(source="agents"))


@router.put("/{user_id}/personal-sound")
def update_personal_sound(
    user_id: str,
    request: AgentMediaUpdateRequest,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[Agent]:
    agent = service.set_personal_sound(normalize_user_id(user_id), request.url)
    return ResponseEnvelope(data=agent, meta=build_meta(source="agents"))


@router.get("/{user_id}/bonuses")
def list_bonus_assignments(
    user_id: str,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[List[CampaignAssignment]]:
    data = service.get_bonus_assignments(normalize_user_id(user_id))
    return ResponseEnvelope(data=data, meta=build_meta(source="agent_bonus_assignments"))


@router.post("/{user_id}/bonuses")
def assign_bonus(
    user_id: str,
    request: BonusAssignmentRequest,
    service: AgentsService = Depends(get_agents_service),
) -> ResponseEnvelope[List[CampaignAssignment]]:
    data = service.assign_bonus(normalize_user_id(user_id), request.campaign_name)
    return ResponseEnvelope(data=data, meta=build_meta(source="agent_bonus_assignments"))


@router.delete("/{user_id}/bonuses/{campaign_name}", status_code=204)
def unassign_bonus(
    user_id: str,
    campaign_name: str,
    service: AgentsService = Depends(get_agents_service),
) -> Response:
    service.unassign_bonus(normalize_user_id(user_id), campaign_name)
    return Response(status_code=204)
