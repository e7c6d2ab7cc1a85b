"""
Conformance suite — the caller-facing entry points.

    from nes_conformance import run_all_tests

    run_all_tests(MyCpu)     # returns None, or raises ConformanceFailure

Tests run one after another in CONFORMANCE_TESTS order and the first
failure stops the suite. Each test gets a fresh ROM load and its own
isolated run; nothing carries over between tests.
"""

from __future__ import annotations

import logging
from typing import Type, Union

from .config import CONFORMANCE_TESTS, NESTEST, ConformanceTest
from .contract import TestableCpu
from .outcome import RunOutcome
from .rom import load_rom
from .runner import run_isolated

__all__ = ['ConformanceFailure', 'evaluate', 'run_test', 'nestest', 'run_all_tests']

log = logging.getLogger(__name__)


class ConformanceFailure(Exception):
    """A conformance test did not pass. str() is the full report line."""
    def __init__(self, test_name: str, outcome: RunOutcome):
        self.test_name = test_name
        self.outcome = outcome
        super().__init__(outcome.failure_message(test_name))


def _resolve(test: Union[str, ConformanceTest]) -> ConformanceTest:
    if isinstance(test, ConformanceTest):
        return test
    try:
        return CONFORMANCE_TESTS[test]
    except KeyError:
        known = ", ".join(CONFORMANCE_TESTS)
        raise ValueError(f"Unknown conformance test {test!r} (known: {known})") from None


def evaluate(cpu_cls: Type[TestableCpu], test: Union[str, ConformanceTest]) -> RunOutcome:
    """Run one test and return its raw outcome without raising on failure."""
    test = _resolve(test)
    rom = load_rom(test.rom)
    return run_isolated(cpu_cls, rom, test)


def run_test(cpu_cls: Type[TestableCpu], test: Union[str, ConformanceTest]) -> None:
    """Run one test; raise ConformanceFailure unless it passes."""
    test = _resolve(test)
    outcome = evaluate(cpu_cls, test)
    if not outcome.passed:
        failure = ConformanceFailure(test.name, outcome)
        log.info("✗ %s", failure)
        raise failure
    log.info("✓ %s passed", test.name)


def nestest(cpu_cls: Type[TestableCpu]) -> None:
    """Run kevtris' nestest against `cpu_cls`."""
    run_test(cpu_cls, NESTEST)


def run_all_tests(cpu_cls: Type[TestableCpu]) -> None:
    """Run every registered conformance test, stopping at the first failure."""
    for test in CONFORMANCE_TESTS.values():
        run_test(cpu_cls, test)
