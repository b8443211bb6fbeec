from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

logger = logging.getLogger("poll_leaderboards")


def load_env_file(env_path: str) -> None:
    if not os.path.exists(env_path):
        return
    with open(env_path, "r", encoding="utf-8") as env_file:
        for line in env_file:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key, value)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a stats pass for every active leaderboard and emit milestone notifications."
    )
    parser.add_argument(
        "--env-file",
        default=os.path.join(PROJECT_ROOT, ".env"),
        help="Path to .env file.",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Seconds between ticks (default: POLL_INTERVAL_SECONDS).",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single tick and exit.",
    )
    return parser.parse_args()


def run_tick(service) -> int:
    """One pass per active leaderboard. Returns the number of notifications emitted."""
    try:
        leaderboards = service.list_leaderboards(active_only=True)
    except Exception:
        logger.exception("Could not load active leaderboards")
        return 0

    emitted = 0
    for leaderboard in leaderboards:
        try:
            result = service.get_leaderboard_stats(leaderboard.id)
        except Exception:
            # No pass this tick; the snapshot stays as it was.
            logger.exception("Skipping leaderboard %s this tick", leaderboard.id)
            continue
        for notification in result.notifications:
            payload = {"leaderboardId": leaderboard.id, **notification.model_dump(by_alias=True)}
            print(json.dumps(payload, default=str), flush=True)
            emitted += 1
    return emitted


def main() -> None:
    args = parse_args()
    load_env_file(os.path.abspath(args.env_file))

    from src.api.dependencies import get_leaderboards_service
    from src.core.config import get_settings
    from src.core.logging import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level)
    interval = max(args.interval or settings.poll_interval_seconds, 1)
    # One service instance keeps the milestone sessions alive across ticks.
    service = get_leaderboards_service()

    while True:
        emitted = run_tick(service)
        logger.info("Tick complete, %d notifications", emitted)
        if args.once:
            return
        time.sleep(interval)


if __name__ == "__main__":
    main()
