# Program: WSD Printers Config
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Fixed settings for the single invocation of the tool."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    log_path: Path = Path("wsd_to_ip.log")
    log_level: str = "INFO"


# Created by Dr. Z. Bakhtiyorov
