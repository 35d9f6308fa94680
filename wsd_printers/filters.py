# Program: WSD Printers Filters
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Select printers attached through a WSD port."""

from __future__ import annotations

import logging
from typing import Sequence

from .models import PrinterRecord

logger = logging.getLogger(__name__)

WSD_PORT_PREFIX = "WSD"


def is_wsd_port(port_name: object) -> bool:
    # Ports that are not text never match.
    return isinstance(port_name, str) and port_name.startswith(WSD_PORT_PREFIX)


def filter_wsd(records: Sequence[PrinterRecord]) -> list[PrinterRecord]:
    """Keep the records whose port name starts with ``WSD``, preserving order."""
    if not records:
        logger.warning("Received empty set of printers")
        return []

    logger.info("Searching through %d printers", len(records))
    wsd_printers = [record for record in records if is_wsd_port(record.port_name)]
    logger.info("Successfully found %d WSD connected printers", len(wsd_printers))
    return wsd_printers


# Created by Dr. Z. Bakhtiyorov
