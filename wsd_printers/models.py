# Program: WSD Printers Models
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Plain records produced by printer enumeration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrinterRecord:
    """One printer registered with the local print spooler.

    Attributes:
        printer_name: Display name of the printer.
        port_name: Port the printer is attached to, e.g. ``WSD-...``, ``USB001``, ``LPT1``.
        driver_name: Name of the driver bound to the printer.
    """

    printer_name: str
    port_name: str
    driver_name: str


# Created by Dr. Z. Bakhtiyorov
