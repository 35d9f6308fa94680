# Program: WSD Printers Package Init
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Find local printers attached through WSD (Web Services on Devices) ports."""

from .config import AppConfig
from .enumerator import decode_printer_info, enumerate_local_printers, read_wide_string
from .filters import filter_wsd, is_wsd_port
from .models import PrinterRecord
from .winspool import EnumResult, SpoolerApi, SpoolerError, WinSpooler

__all__ = [
    "AppConfig",
    "EnumResult",
    "PrinterRecord",
    "SpoolerApi",
    "SpoolerError",
    "WinSpooler",
    "decode_printer_info",
    "enumerate_local_printers",
    "filter_wsd",
    "is_wsd_port",
    "read_wide_string",
]


# Created by Dr. Z. Bakhtiyorov
