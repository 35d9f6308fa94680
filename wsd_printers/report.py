# Program: WSD Printers Report
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Console report of the selected printers."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console

from .models import PrinterRecord


def format_printer(record: PrinterRecord) -> str:
    return (
        f"Printer Name: {record.printer_name}\n"
        f" Port Name: {record.port_name}\n"
        f" Driver Name: {record.driver_name}"
    )


def print_report(records: Iterable[PrinterRecord], console: Optional[Console] = None) -> int:
    """Print one block per printer and return how many were printed."""
    console = console or Console()
    printed = 0
    for record in records:
        console.print(format_printer(record), markup=False, highlight=False, soft_wrap=True)
        printed += 1
    return printed


# Created by Dr. Z. Bakhtiyorov
