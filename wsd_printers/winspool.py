# Program: WSD Printers Winspool Bindings
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""ctypes bindings for the Windows print spooler enumeration API."""

from __future__ import annotations

import ctypes as C
import os
from ctypes import POINTER, Structure, byref, c_int, c_uint32, c_void_p, c_wchar_p
from dataclasses import dataclass
from typing import Optional, Protocol

# ------ Constants ------
PRINTER_ENUM_LOCAL = 0x00000002
PRINTER_INFO_LEVEL = 2


class SpoolerError(RuntimeError):
    """Raised when the print spooler library cannot be used."""


# ------ Types/structures ------
BOOL = c_int
DWORD = c_uint32
LPCWSTR = c_wchar_p


# String fields are kept as raw addresses; they point into the caller's buffer.
class PRINTER_INFO_2W(Structure):
    _fields_ = [
        ("pServerName", c_void_p),
        ("pPrinterName", c_void_p),
        ("pShareName", c_void_p),
        ("pPortName", c_void_p),
        ("pDriverName", c_void_p),
        ("pComment", c_void_p),
        ("pLocation", c_void_p),
        ("pDevMode", c_void_p),
        ("pSepFile", c_void_p),
        ("pPrintProcessor", c_void_p),
        ("pDatatype", c_void_p),
        ("pParameters", c_void_p),
        ("pSecurityDescriptor", c_void_p),
        ("Attributes", DWORD),
        ("Priority", DWORD),
        ("DefaultPriority", DWORD),
        ("StartTime", DWORD),
        ("UntilTime", DWORD),
        ("Status", DWORD),
        ("cJobs", DWORD),
        ("AveragePPM", DWORD),
    ]


@dataclass(frozen=True)
class EnumResult:
    """Outcome of one EnumPrintersW call."""

    ok: bool
    bytes_needed: int
    returned: int


class SpoolerApi(Protocol):
    def enum_printers(
        self, flags: int, level: int, buffer: Optional[C.Array], size: int
    ) -> EnumResult:
        ...

    def last_error(self) -> Optional[str]:
        ...


# ------ DLL loading ------
def _load_lib():
    if os.name != "nt":
        raise SpoolerError("The print spooler API is only available on Windows")
    try:
        return C.WinDLL("winspool.drv", use_last_error=True)
    except OSError as exc:
        raise SpoolerError(f"Failed to load winspool.drv: {exc}") from exc


def _proto(lib, fn, restype, *argtypes):
    f = getattr(lib, fn)
    f.restype = restype
    f.argtypes = list(argtypes)
    return f


class WinSpooler:
    """Thin wrapper over EnumPrintersW that reports raw call outcomes."""

    def __init__(self, lib=None) -> None:
        self._lib = lib if lib is not None else _load_lib()
        self._enum = _proto(
            self._lib,
            "EnumPrintersW",
            BOOL,
            DWORD,
            LPCWSTR,
            DWORD,
            c_void_p,
            DWORD,
            POINTER(DWORD),
            POINTER(DWORD),
        )

    def enum_printers(
        self, flags: int, level: int, buffer: Optional[C.Array], size: int
    ) -> EnumResult:
        needed = DWORD(0)
        returned = DWORD(0)
        ok = self._enum(flags, None, level, buffer, size, byref(needed), byref(returned))
        return EnumResult(ok=bool(ok), bytes_needed=needed.value, returned=returned.value)

    def last_error(self) -> Optional[str]:
        code = C.get_last_error()
        if code == 0:
            return None
        return f"{code}: {C.FormatError(code).strip()}"


def load_spooler() -> WinSpooler:
    return WinSpooler()


# Created by Dr. Z. Bakhtiyorov
