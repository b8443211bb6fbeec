from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from src.analytics.date_ranges import resolve_date_range
from src.analytics.earnings import classify_earnings
from src.analytics.leaderboard_stats import aggregate_stats
from src.analytics.milestones import CrossingEvent, LeaderboardRoster, MilestoneSessions
from src.analytics.sounds import select_sound
from src.core.adversus import AdversusClient
from src.core.errors import NotFoundError
from src.models.scoreboard import LeaderboardRecord
from src.repositories.leaderboards_repository import LeaderboardsRepository
from src.schemas.leaderboards import (
    AgentStats,
    DateRange,
    Leaderboard,
    LeaderboardStatsResponse,
    LeaderboardWriteRequest,
    MilestoneNotification,
)
from src.schemas.slideshow import SlideshowConfig
from src.services.agents_service import AgentsService
from src.services.slideshow_service import SlideshowService

logger = logging.getLogger(__name__)


class LeaderboardsService:
    def __init__(
        self,
        repository: LeaderboardsRepository,
        agents_service: AgentsService,
        slideshow_service: SlideshowService,
        crm_client: AdversusClient,
        sessions: MilestoneSessions,
    ) -> None:
        self.repository = repository
        self.agents_service = agents_service
        self.slideshow_service = slideshow_service
        self.crm_client = crm_client
        self.sessions = sessions

    @staticmethod
    def _to_leaderboard(record: LeaderboardRecord) -> Leaderboard:
        return Leaderboard(**record.model_dump(exclude={"created_at", "updated_at"}))

    @staticmethod
    def _write_payload(request: LeaderboardWriteRequest) -> Dict[str, Any]:
        custom = request.time_period == "custom"
        return {
            "name": request.name.strip(),
            "time_period": request.time_period,
            "custom_start_date": request.custom_start_date.isoformat()
            if custom and request.custom_start_date
            else None,
            "custom_end_date": request.custom_end_date.isoformat()
            if custom and request.custom_end_date
            else None,
            "group_id": request.group_id,
            "display_order": request.display_order,
            "is_active": request.is_active,
        }

    def list_leaderboards(self, active_only: bool = False) -> List[Leaderboard]:
        return [
            self._to_leaderboard(record)
            for record in self.repository.list_leaderboards(active_only=active_only)
        ]

    def _get_record(self, leaderboard_id: int) -> LeaderboardRecord:
        record = self.repository.get_leaderboard(leaderboard_id)
        if record is None:
            raise NotFoundError("Leaderboard not found")
        return record

    def get_leaderboard(self, leaderboard_id: int) -> Leaderboard:
        return self._to_leaderboard(self._get_record(leaderboard_id))

    def create_leaderboard(self, request: LeaderboardWriteRequest) -> Leaderboard:
        return self._to_leaderboard(self.repository.create_leaderboard(self._write_payload(request)))

    def update_leaderboard(self, leaderboard_id: int, request: LeaderboardWriteRequest) -> Leaderboard:
        record = self.repository.update_leaderboard(leaderboard_id, self._write_payload(request))
        if record is None:
            raise NotFoundError("Leaderboard not found")
        # A changed period or group invalidates the old totals.
        self.sessions.reset(leaderboard_id)
        return self._to_leaderboard(record)

    def delete_leaderboard(self, leaderboard_id: int) -> None:
        self.repository.delete_leaderboard(leaderboard_id)
        self.sessions.reset(leaderboard_id)

    def reset_milestones(self, leaderboard_id: int) -> None:
        self._get_record(leaderboard_id)
        self.sessions.reset(leaderboard_id)

    def get_leaderboard_stats(
        self, leaderboard_id: int, today: Optional[date] = None
    ) -> LeaderboardStatsResponse:
        """Run one aggregation pass for a leaderboard.

        Every call advances that leaderboard's milestone snapshot. The tracker
        lock is held from the lead fetch until the snapshot is recorded, so
        overlapping passes on one leaderboard run one after the other.
        """
        record = self._get_record(leaderboard_id)
        leaderboard = self._to_leaderboard(record)
        start_date, end_date = resolve_date_range(
            leaderboard.time_period,
            today or date.today(),
            leaderboard.custom_start_date,
            leaderboard.custom_end_date,
        )

        tracker = self.sessions.tracker_for(leaderboard_id)
        with tracker.lock:
            roster = self.agents_service.get_roster(group_id=leaderboard.group_id)
            config = self.slideshow_service.get_config()
            leads = self.crm_client.fetch_success_leads(start_date, end_date)

            stats = [
                row.model_copy(update={"color": classify_earnings(row.total_earnings, leaderboard.time_period)})
                for row in aggregate_stats(leads, roster)
            ]
            events = tracker.detect_crossings(
                LeaderboardRoster.from_stats(stats), config.milestone_threshold
            )

        return LeaderboardStatsResponse(
            leaderboard=leaderboard,
            stats=stats,
            date_range=DateRange(start_date=start_date, end_date=end_date),
            notifications=self._build_notifications(leaderboard, events, config),
        )

    @staticmethod
    def _build_notifications(
        leaderboard: Leaderboard,
        events: List[CrossingEvent],
        config: SlideshowConfig,
    ) -> List[MilestoneNotification]:
        notifications: List[MilestoneNotification] = []
        for event in events:
            agent: AgentStats = event.agent
            logger.info(
                "Leaderboard %s: %s crossed %s (%s -> %s)",
                leaderboard.id,
                agent.name,
                config.milestone_threshold,
                event.previous_total,
                event.current_total,
            )
            sound_url = select_sound(event, config)
            if sound_url is None:
                continue
            notifications.append(
                MilestoneNotification(
                    user_id=agent.user_id,
                    name=agent.name,
                    profile_image_url=agent.profile_image_url,
                    previous_total=event.previous_total,
                    total_earnings=event.current_total,
                    sound_url=sound_url,
                )
            )
        return notifications
