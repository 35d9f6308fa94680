# Program: Test Fixtures
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Fake spooler reproducing the two-call EnumPrintersW contract."""

from __future__ import annotations

import ctypes as C
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from wsd_printers.winspool import PRINTER_INFO_2W, EnumResult

# (printer_name, port_name, driver_name); None leaves the pointer null.
PrinterFields = tuple[Optional[str], Optional[str], Optional[str]]


def build_printer_buffer(printers: Sequence[PrinterFields], base: int) -> bytes:
    """Pack PRINTER_INFO_2W headers plus their strings as the spooler does."""
    record_size = C.sizeof(PRINTER_INFO_2W)
    headers = bytearray()
    strings = bytearray()
    offset = record_size * len(printers)

    def place(text: Optional[str]) -> int:
        if text is None:
            return 0
        address = base + offset + len(strings)
        strings.extend(text.encode("utf-16-le") + b"\x00\x00")
        return address

    for name, port, driver in printers:
        info = PRINTER_INFO_2W()
        info.pPrinterName = place(name)
        info.pPortName = place(port)
        info.pDriverName = place(driver)
        info.Attributes = 0x40
        headers.extend(bytes(info))
    return bytes(headers + strings)


@dataclass
class FakeSpooler:
    printers: list[PrinterFields] = field(default_factory=list)
    fail_sizing: bool = False
    fail_fill: bool = False
    report_zero_count: bool = False
    error_text: Optional[str] = "5: Access is denied."
    calls: list[tuple[int, int, bool, int]] = field(default_factory=list)

    def enum_printers(self, flags, level, buffer, size) -> EnumResult:
        self.calls.append((flags, level, buffer is not None, size))
        needed = len(build_printer_buffer(self.printers, 0))
        if self.fail_sizing:
            return EnumResult(ok=False, bytes_needed=0, returned=0)
        if needed == 0:
            return EnumResult(ok=True, bytes_needed=0, returned=0)
        if buffer is None or size < needed:
            return EnumResult(ok=False, bytes_needed=needed, returned=0)
        if self.fail_fill:
            return EnumResult(ok=False, bytes_needed=needed, returned=0)
        data = build_printer_buffer(self.printers, C.addressof(buffer))
        C.memmove(buffer, data, len(data))
        returned = 0 if self.report_zero_count else len(self.printers)
        return EnumResult(ok=True, bytes_needed=needed, returned=returned)

    def last_error(self) -> Optional[str]:
        return self.error_text


@pytest.fixture()
def make_spooler() -> Callable[..., FakeSpooler]:
    def factory(printers: Sequence[PrinterFields] = (), **options) -> FakeSpooler:
        return FakeSpooler(printers=list(printers), **options)

    return factory


@pytest.fixture()
def packed() -> Callable[[Sequence[PrinterFields], int], bytes]:
    return build_printer_buffer


# Created by Dr. Z. Bakhtiyorov
