# Program: WSD Printers Enumerator
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Enumerate local printers through the two-call EnumPrintersW protocol.

The first call asks for the required buffer size with an empty buffer, the
second fills a raw buffer of exactly that size. The buffer holds ``count``
``PRINTER_INFO_2W`` headers followed by the UTF-16 strings they point at.
Every pointer is checked against the buffer bounds before it is read.
"""

from __future__ import annotations

import ctypes as C
import logging
from typing import Optional

from .models import PrinterRecord
from .winspool import (
    PRINTER_ENUM_LOCAL,
    PRINTER_INFO_2W,
    PRINTER_INFO_LEVEL,
    SpoolerApi,
    SpoolerError,
    load_spooler,
)

logger = logging.getLogger(__name__)


def read_wide_string(raw: bytes, base: int, address: Optional[int]) -> str:
    """Decode the NUL-terminated UTF-16 string at ``address`` inside ``raw``.

    ``base`` is the address ``raw`` was copied from. Returns an empty string
    for a null pointer, a pointer outside the buffer, a missing terminator or
    undecodable data.
    """
    if not address:
        return ""
    start = address - base
    if start < 0 or start >= len(raw):
        logger.warning("Pointer 0x%x lies outside the %d byte buffer", address, len(raw))
        return ""

    end = start
    limit = len(raw) - 1
    while end < limit:
        if raw[end] == 0 and raw[end + 1] == 0:
            break
        end += 2
    else:
        logger.warning("String at offset %d has no terminator before the buffer end", start)
        return ""

    try:
        return raw[start:end].decode("utf-16-le")
    except UnicodeDecodeError as exc:
        logger.warning("String at offset %d is not valid UTF-16: %s", start, exc)
        return ""


def decode_printer_info(raw: bytes, base: int, count: int) -> list[PrinterRecord]:
    """Turn ``count`` PRINTER_INFO_2W headers at the start of ``raw`` into records."""
    record_size = C.sizeof(PRINTER_INFO_2W)
    if count * record_size > len(raw):
        raise ValueError(
            f"{count} records of {record_size} bytes do not fit in a {len(raw)} byte buffer"
        )

    records = []
    for index in range(count):
        info = PRINTER_INFO_2W.from_buffer_copy(raw, index * record_size)
        records.append(
            PrinterRecord(
                printer_name=read_wide_string(raw, base, info.pPrinterName),
                port_name=read_wide_string(raw, base, info.pPortName),
                driver_name=read_wide_string(raw, base, info.pDriverName),
            )
        )
    return records


def _log_os_failure(api: SpoolerApi, message: str) -> None:
    logger.error(message)
    win_error = api.last_error()
    if win_error is not None:
        logger.error("EnumPrintersW failed with error code: %s", win_error)


def enumerate_local_printers(api: Optional[SpoolerApi] = None) -> list[PrinterRecord]:
    """Return every printer registered locally, in spooler order.

    Never raises: any failure is logged and an empty list is returned.
    """
    if api is None:
        try:
            api = load_spooler()
        except SpoolerError as exc:
            logger.error("Print spooler unavailable: %s", exc)
            return []

    logger.info("First call to EnumPrintersW to determine bytes_needed")
    sizing = api.enum_printers(PRINTER_ENUM_LOCAL, PRINTER_INFO_LEVEL, None, 0)
    if not sizing.ok and sizing.bytes_needed == 0:
        _log_os_failure(api, "EnumPrintersW failed to set bytes_needed")
        return []
    if sizing.bytes_needed == 0:
        logger.warning("No printers registered with the spooler")
        return []
    logger.info("Bytes needed: %d", sizing.bytes_needed)

    buffer = C.create_string_buffer(sizing.bytes_needed)

    logger.info("Second call to EnumPrintersW to populate buffer with PRINTER_INFO_2W structs")
    filled = api.enum_printers(PRINTER_ENUM_LOCAL, PRINTER_INFO_LEVEL, buffer, len(buffer))
    if not filled.ok or filled.bytes_needed == 0:
        _log_os_failure(api, "EnumPrintersW failed to populate buffer with PRINTER_INFO_2W structs")
        return []
    logger.info("Successfully filled %d byte buffer", len(buffer))

    if filled.returned == 0:
        logger.warning("No printers found")
        return []

    try:
        printers = decode_printer_info(buffer.raw, C.addressof(buffer), filled.returned)
    except ValueError as exc:
        logger.error("Could not decode PRINTER_INFO_2W structs: %s", exc)
        return []

    logger.info("Decoded %d PRINTER_INFO_2W structs", len(printers))
    return printers


# Created by Dr. Z. Bakhtiyorov
