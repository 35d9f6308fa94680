# Program: WSD Printers CLI
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from .config import AppConfig
from .enumerator import enumerate_local_printers
from .filters import filter_wsd
from .logging_setup import configure_logging
from .models import PrinterRecord
from .report import print_report
from .winspool import SpoolerApi

app = typer.Typer(add_completion=False)
console = Console()
logger = logging.getLogger(__name__)


def run(
    api: Optional[SpoolerApi] = None,
    out: Optional[Console] = None,
) -> list[PrinterRecord]:
    """Enumerate, filter and report; returns the printers that were reported."""
    logger.info("Getting information from all locally connected printers")
    all_printers = enumerate_local_printers(api)
    if not all_printers:
        logger.warning("No printers found")
        return []
    logger.info("Successfully retrieved printer information")

    wsd_printers = filter_wsd(all_printers)
    if not wsd_printers:
        logger.warning("No WSD connected printers found")
        return []

    print_report(wsd_printers, out or console)
    return wsd_printers


@app.command()
def report():
    """List locally registered printers connected through WSD ports."""

    configure_logging(AppConfig())
    run()


def main() -> int:
    app()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


# Created by Dr. Z. Bakhtiyorov
