"""
Conformance test registry and fixed constants.

Every test program bundled with the oracle is described by a
ConformanceTest entry in CONFORMANCE_TESTS. Registry order is run order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .diagnostics import NESTEST_DIAGNOSTICS, DiagnosticEntry

# nestest leaves its result codes in zero page: $02 (official), $03 (unofficial)
STATUS_ADDRESSES: Tuple[int, int] = (0x0002, 0x0003)

# Enough CPU cycles for nestest to finish its automated run
NESTEST_CYCLES = 10000

# Reported when a crash carries no readable message
NO_PANIC_INFO = "<no information>"

# Reported when a status pair is not in the test's table
UNKNOWN_FAILURE = "unknown failure"

# iNES file magic: "NES" followed by MS-DOS EOF
INES_MAGIC = b"NES\x1a"


@dataclass(frozen=True)
class ConformanceTest:
    """A bundled test program and how to read its verdict."""
    name: str
    rom: str                 # file name under nes_conformance/roms/
    cycles: int
    status_addresses: Tuple[int, int] = STATUS_ADDRESSES
    diagnostics: Tuple[DiagnosticEntry, ...] = NESTEST_DIAGNOSTICS
    description: str = ""


NESTEST = ConformanceTest(
    name="nestest",
    rom="nestest.nes",
    cycles=NESTEST_CYCLES,
    description="kevtris nestest, automation mode (official + unofficial opcodes)",
)

CONFORMANCE_TESTS: Dict[str, ConformanceTest] = {
    NESTEST.name: NESTEST,
}
