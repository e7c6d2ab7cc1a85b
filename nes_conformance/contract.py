"""
Execution contract for CPU implementations under test.

An implementation is a class with two capabilities:

    class MyCpu:
        @classmethod
        def run_ines_rom(cls, rom: bytes, num_cycles: int) -> "MyCpu":
            ...   # load the iNES image, reset, run num_cycles CPU cycles

        def memory_read(self, address: int) -> int:
            ...   # CPU-visible byte at a 16-bit address

To refuse a ROM or report an initialization problem, raise CpuError (or a
subclass) from run_ines_rom. Any other exception is treated as a crash of
the implementation.
"""

from __future__ import annotations

from typing import Protocol, Type, TypeVar

__all__ = ['CpuError', 'TestableCpu']

CpuT = TypeVar('CpuT', bound='TestableCpu')


class CpuError(Exception):
    """Raised by an implementation that cannot load or start a ROM."""


class TestableCpu(Protocol):
    """Capability the oracle consumes: run a ROM, then read memory."""

    @classmethod
    def run_ines_rom(cls: Type[CpuT], rom: bytes, num_cycles: int) -> CpuT:
        ...

    def memory_read(self, address: int) -> int:
        ...
