"""
Run outcomes — the result of one conformance run.

A run either passes, is diagnosed with a specific defect, or faults before
the status bytes could be judged. Faults record where they came from: the
implementation refusing to start (CpuError) or crashing while it ran.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

__all__ = ['FaultOrigin', 'Passed', 'Diagnosed', 'Faulted', 'RunOutcome']


class FaultOrigin(Enum):
    IMPLEMENTATION_ERROR = 'IMPLEMENTATION_ERROR'
    IMPLEMENTATION_PANIC = 'IMPLEMENTATION_PANIC'


@dataclass(frozen=True)
class Passed:
    """No defect detected."""

    @property
    def passed(self) -> bool:
        return True

    def failure_message(self, test_name: str) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Diagnosed:
    """The implementation ran to completion but misbehaved."""
    message: str

    @property
    def passed(self) -> bool:
        return False

    def failure_message(self, test_name: str) -> Optional[str]:
        return f"cpu didn't pass test {test_name}: {self.message}"


@dataclass(frozen=True)
class Faulted:
    """The implementation could not be evaluated."""
    origin: FaultOrigin
    detail: str

    @property
    def passed(self) -> bool:
        return False

    def failure_message(self, test_name: str) -> Optional[str]:
        if self.origin is FaultOrigin.IMPLEMENTATION_ERROR:
            return (f"cpu failed while running test {test_name} "
                    f"with custom error message {self.detail}")
        return f"cpu implementation panicked while running test {test_name}: {self.detail}"


RunOutcome = Union[Passed, Diagnosed, Faulted]
