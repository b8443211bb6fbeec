from __future__ import annotations

from fastapi import APIRouter

from src.api.agents import router as agents_router
from src.api.bonus_tiers import router as bonus_tiers_router
from src.api.health import router as health_router
from src.api.leaderboards import router as leaderboards_router
from src.api.slideshow import router as slideshow_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(agents_router)
api_router.include_router(leaderboards_router)
api_router.include_router(bonus_tiers_router)
api_router.include_router(slideshow_router)
