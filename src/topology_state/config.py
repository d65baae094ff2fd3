from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True)
class StateConfig:
    log_level: str
    log_diff_summary: bool


def load_config() -> StateConfig:
    return StateConfig(
        log_level=os.getenv("TOPOLOGY_LOG_LEVEL", "INFO").upper(),
        log_diff_summary=os.getenv("TOPOLOGY_LOG_DIFF_SUMMARY", "true").lower() == "true",
    )


def configure_logging(config: StateConfig | None = None) -> None:
    cfg = config or load_config()
    level = getattr(logging, cfg.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
