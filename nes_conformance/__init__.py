"""
NES CPU Conformance Oracle
==========================
Runs bundled self-checking test ROMs against a 6502 (2A03) CPU
implementation and turns the status codes they leave in RAM into a
specific diagnosis: which instruction, addressing mode or flag is wrong.

Architecture:
    ┌──────────┐    ┌────────────┐    ┌──────────────┐    ┌──────────┐    ┌─────────────┐
    │ Registry │───>│ ROM loader │───>│   Isolated   │───>│ Decoder  │───>│   Verdict   │
    │ (tests)  │    │ (bundled)  │    │ runner (thr) │    │ ($02/$03)│    │ (or raise)  │
    └──────────┘    └────────────┘    └──────────────┘    └──────────┘    └─────────────┘

    - config.py:      ConformanceTest registry, status addresses, cycle budgets
    - rom.py:         Bundled iNES images via importlib.resources
    - contract.py:    TestableCpu protocol the implementation provides
    - runner.py:      Worker-thread execution, crash → Faulted outcome
    - decoder.py:     First-match-wins status pair lookup
    - diagnostics.py: nestest error code table
    - outcome.py:     Passed / Diagnosed / Faulted
    - suite.py:       run_all_tests(), nestest(), ConformanceFailure

Usage:
    from nes_conformance import run_all_tests

    def test_cpu_conformance():
        run_all_tests(MyCpu)
"""

__version__ = "0.1.0"

from .contract import CpuError, TestableCpu
from .outcome import FaultOrigin, Passed, Diagnosed, Faulted, RunOutcome
from .diagnostics import ANY, DiagnosticEntry, NESTEST_DIAGNOSTICS
from .decoder import decode_status, find_entry
from .config import CONFORMANCE_TESTS, ConformanceTest, NESTEST
from .rom import RomError, load_rom
from .runner import run_isolated, panic_message
from .suite import ConformanceFailure, evaluate, run_test, nestest, run_all_tests
