"""
Isolated runner — executes an implementation under test on a worker thread.

Execution model:
  1. Submit run-and-decode to a single-worker thread pool
  2. Worker: run_ines_rom(rom, cycles) → read status bytes → decode
  3. Caller blocks on the future
  4. Worker raised CpuError  → Faulted(IMPLEMENTATION_ERROR, text)
     Worker raised anything  → Faulted(IMPLEMENTATION_PANIC, text)
     Worker returned         → its decoded outcome

Only the worker ever calls into implementation code, so whatever the
implementation raises (SystemExit included) ends up on the future instead
of unwinding the caller.
"""

from __future__ import annotations

import logging
import operator
from concurrent.futures import ThreadPoolExecutor
from typing import Type

from .config import NO_PANIC_INFO, ConformanceTest
from .contract import CpuError, TestableCpu
from .decoder import decode_status
from .outcome import Faulted, FaultOrigin, RunOutcome

__all__ = ['run_isolated', 'panic_message']

log = logging.getLogger(__name__)


def panic_message(exc: BaseException) -> str:
    """Text carried by a crash, or a fixed placeholder if it has none.

    A lone string argument is used as-is (KeyError would otherwise quote it).
    An exception whose text cannot be produced gets the placeholder.
    """
    try:
        if len(exc.args) == 1 and isinstance(exc.args[0], str):
            text = exc.args[0]
        else:
            text = str(exc)
    except Exception:
        text = ""
    return text if text else NO_PANIC_INFO


def _cpu_name(cpu_cls) -> str:
    return getattr(cpu_cls, '__qualname__', None) or repr(cpu_cls)


def _read_status(cpu: TestableCpu, address: int) -> int:
    value = cpu.memory_read(address)
    # Anything usable as an index counts (numpy.uint8 RAM), bool does not
    try:
        byte = None if isinstance(value, bool) else operator.index(value)
    except TypeError:
        byte = None
    if byte is None or not 0 <= byte <= 0xFF:
        raise CpuError(f"memory_read(${address:04X}) returned {value!r}, expected a byte")
    return byte


def _run_and_decode(cpu_cls: Type[TestableCpu], rom: bytes,
                    test: ConformanceTest) -> RunOutcome:
    """Worker body. Runs on the pool thread, never on the caller's."""
    try:
        cpu = cpu_cls.run_ines_rom(rom, test.cycles)
        first, second = (_read_status(cpu, addr) for addr in test.status_addresses)
    except CpuError as e:
        return Faulted(FaultOrigin.IMPLEMENTATION_ERROR, str(e))

    log.debug("%s status bytes: $%02X $%02X", test.name, first, second)
    return decode_status(first, second, test.diagnostics)


def run_isolated(cpu_cls: Type[TestableCpu], rom: bytes,
                 test: ConformanceTest) -> RunOutcome:
    """Run one test program against `cpu_cls` and return its outcome.

    Never raises on behalf of the implementation. Blocks until the
    implementation returns; there is no timeout beyond test.cycles.
    """
    name = _cpu_name(cpu_cls)
    log.debug("Running %s on %s (%d cycles)", test.name, name, test.cycles)

    with ThreadPoolExecutor(max_workers=1,
                            thread_name_prefix=f"conformance-{test.name}") as pool:
        future = pool.submit(_run_and_decode, cpu_cls, rom, test)
        # exception() waits for the worker and hands back what it raised
        crash = future.exception()

    if crash is not None:
        detail = panic_message(crash)
        log.warning("%s crashed during %s: %s", name, test.name, detail)
        log.debug("%s traceback", name, exc_info=crash)
        return Faulted(FaultOrigin.IMPLEMENTATION_PANIC, detail)

    outcome = future.result()
    log.debug("%s on %s → %s", test.name, name, outcome)
    return outcome
