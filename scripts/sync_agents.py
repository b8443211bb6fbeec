from __future__ import annotations

import argparse
import json
import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


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
    parser = argparse.ArgumentParser(description="Sync the agent roster from Adversus into Supabase.")
    parser.add_argument(
        "--env-file",
        default=os.path.join(PROJECT_ROOT, ".env"),
        help="Path to .env file.",
    )
    parser.add_argument(
        "--user-id",
        default=None,
        help="Sync a single Adversus user instead of the full roster.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    load_env_file(os.path.abspath(args.env_file))

    from src.api.dependencies import get_agents_service
    from src.core.config import get_settings
    from src.core.logging import configure_logging
    from src.shared.ids import normalize_user_id

    configure_logging(get_settings().log_level)
    service = get_agents_service()
    if args.user_id is not None:
        result = service.sync_agent(normalize_user_id(args.user_id))
    else:
        result = service.sync_all_agents()
    print(json.dumps(result.model_dump(by_alias=True), indent=2, default=str))


if __name__ == "__main__":
    main()
