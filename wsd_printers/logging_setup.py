# Program: WSD Printers Logging Setup
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Per-run log file used by every module of the package."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import AppConfig

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] [%(funcName)s] %(message)s"
TIME_FORMAT = "%H:%M:%S"


def configure_logging(cfg: AppConfig) -> Path:
    """Create a fresh log file and route all records to it."""
    log_path = cfg.log_path.resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=TIME_FORMAT,
        handlers=[logging.FileHandler(log_path, mode="w", encoding="utf-8")],
        force=True,
    )
    return log_path


# Created by Dr. Z. Bakhtiyorov
