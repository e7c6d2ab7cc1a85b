"""
Bundled test ROMs.

ROM images ship inside the package (nes_conformance/roms/) and are read
through importlib.resources, so they work from a wheel or a source checkout.
The bytes are handed to the implementation untouched; the only check made
here is the iNES magic, to catch a damaged or missing bundle early.
"""

from __future__ import annotations

import logging
from importlib import resources

from .config import INES_MAGIC

__all__ = ['RomError', 'load_rom', 'check_ines_header']

log = logging.getLogger(__name__)

ROM_PACKAGE = __package__
ROM_DIR = "roms"


class RomError(Exception):
    """Raised when a bundled ROM is missing or is not an iNES image."""
    def __init__(self, message: str, name: str = ""):
        self.name = name
        super().__init__(f"ROM {name}: {message}" if name else message)


def check_ines_header(data: bytes, name: str = "") -> None:
    """Raise RomError unless `data` starts with the iNES magic."""
    if data[:len(INES_MAGIC)] != INES_MAGIC:
        raise RomError(f"not an iNES image (header {data[:4].hex() or 'empty'})", name)


def load_rom(name: str) -> bytes:
    """Read a bundled ROM image by file name."""
    resource = resources.files(ROM_PACKAGE).joinpath(ROM_DIR).joinpath(name)
    try:
        data = resource.read_bytes()
    except FileNotFoundError:
        raise RomError(f"not bundled (expected {ROM_DIR}/{name} in {ROM_PACKAGE})", name) from None

    check_ines_header(data, name)
    log.debug("Loaded ROM %s: %d bytes", name, len(data))
    return data
