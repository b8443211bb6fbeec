from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from threading import Lock, RLock
from typing import Dict, Iterable, List, Optional, Tuple

from src.schemas.leaderboards import AgentStats


@dataclass(frozen=True)
class CrossingEvent:
    agent: AgentStats
    previous_total: Decimal
    current_total: Decimal


@dataclass(frozen=True)
class LeaderboardRoster:
    """Every agent of one aggregation pass.

    The tracker only accepts a full roster. Agents left out of a pass keep
    their old snapshot value and could fire again when they come back.
    """

    stats: Tuple[AgentStats, ...]

    @classmethod
    def from_stats(cls, stats: Iterable[AgentStats]) -> "LeaderboardRoster":
        return cls(stats=tuple(stats))


class MilestoneSnapshot:
    """Last observed total per agent. Lives in memory only."""

    def __init__(self, totals: Optional[Dict[int, Decimal]] = None) -> None:
        self._totals: Dict[int, Decimal] = dict(totals or {})

    def get(self, user_id: int) -> Decimal:
        return self._totals.get(user_id, Decimal("0"))

    def record_totals(self, totals: Dict[int, Decimal]) -> None:
        self._totals.update(totals)

    def as_dict(self) -> Dict[int, Decimal]:
        return dict(self._totals)


class MilestoneTracker:
    def __init__(self, snapshot: Optional[MilestoneSnapshot] = None) -> None:
        self.snapshot = snapshot if snapshot is not None else MilestoneSnapshot()
        # Held by callers for a whole pass, so it must be reentrant.
        self.lock = RLock()

    def detect_crossings(self, roster: LeaderboardRoster, threshold: Decimal) -> List[CrossingEvent]:
        """Upward threshold crossings since the previous pass.

        Fires when ``previous < threshold <= current``. Unseen agents start
        from zero, so a new agent already above the threshold fires once.
        The snapshot is updated for the whole roster after detection.
        """
        with self.lock:
            events: List[CrossingEvent] = []
            for agent in roster.stats:
                previous = self.snapshot.get(agent.user_id)
                current = agent.total_earnings
                if previous < threshold <= current:
                    events.append(
                        CrossingEvent(agent=agent, previous_total=previous, current_total=current)
                    )
            self.snapshot.record_totals({agent.user_id: agent.total_earnings for agent in roster.stats})
            return events


class MilestoneSessions:
    """One tracker per leaderboard for the lifetime of the process."""

    def __init__(self) -> None:
        self._trackers: Dict[int, MilestoneTracker] = {}
        self._lock = Lock()

    def tracker_for(self, leaderboard_id: int) -> MilestoneTracker:
        with self._lock:
            tracker = self._trackers.get(leaderboard_id)
            if tracker is None:
                tracker = MilestoneTracker()
                self._trackers[leaderboard_id] = tracker
            return tracker

    def reset(self, leaderboard_id: int) -> None:
        with self._lock:
            self._trackers.pop(leaderboard_id, None)
