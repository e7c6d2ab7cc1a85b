"""
Outcome decoder — maps the two nestest status bytes to a verdict.

Decoding rules, in priority order:
  1. Either byte still zero        → Passed
  2. First table row that matches  → Diagnosed(row text)
  3. Nothing matched               → Diagnosed("unknown failure")

The decoder is a pure function and never raises: an unrecognized code is
itself a reportable diagnosis.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .config import UNKNOWN_FAILURE
from .diagnostics import ANY, NESTEST_DIAGNOSTICS, DiagnosticEntry
from .outcome import Diagnosed, Passed, RunOutcome

__all__ = ['decode_status', 'find_entry', 'entry_matches']


def _pattern_matches(pattern: Optional[int], value: int) -> bool:
    return pattern is ANY or pattern == value


def entry_matches(entry: DiagnosticEntry, first: int, second: int) -> bool:
    """True if both patterns of `entry` accept the status pair."""
    return _pattern_matches(entry.first, first) and _pattern_matches(entry.second, second)


def find_entry(first: int, second: int,
               table: Sequence[DiagnosticEntry] = NESTEST_DIAGNOSTICS) -> Optional[DiagnosticEntry]:
    """Return the first row of `table` matching (first, second), or None.

    Row order decides which diagnosis wins when a first-byte row and a
    second-byte row both match.
    """
    for entry in table:
        if entry_matches(entry, first, second):
            return entry
    return None


def decode_status(first: int, second: int,
                  table: Sequence[DiagnosticEntry] = NESTEST_DIAGNOSTICS) -> RunOutcome:
    """Decode a status pair read from $02/$03 after a run.

    Args:
        first: byte at the first status address ($02 for nestest).
        second: byte at the second status address ($03 for nestest).
        table: ordered diagnostic rows to match against.

    Returns:
        Passed() if either byte is zero, otherwise Diagnosed(...).
    """
    # A zero byte means that group of tests has not recorded a failure
    if first == 0 or second == 0:
        return Passed()

    entry = find_entry(first, second, table)
    if entry is None:
        return Diagnosed(UNKNOWN_FAILURE)
    return Diagnosed(entry.text)
