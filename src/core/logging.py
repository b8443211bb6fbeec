from __future__ import annotations

import logging
import sys
from typing import Optional

NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: Optional[str] = None) -> None:
    log_level = (level or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Request lines from the HTTP clients drown out pass logs at INFO.
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
