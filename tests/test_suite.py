"""
End-to-end suite tests: registry → ROM → isolated run → verdict.

The bundled ROM is replaced by FAKE_ROM through the fake_rom fixture;
the stub CPUs never look at it.
"""

import pytest

from nes_conformance import suite
from nes_conformance.config import NESTEST, ConformanceTest
from nes_conformance.outcome import Diagnosed, Faulted, FaultOrigin, Passed
from nes_conformance.rom import RomError
from nes_conformance.suite import ConformanceFailure, evaluate, nestest, run_all_tests, run_test

from stub_cpus import (
    BeqCpu,
    BeqOnlyCpu,
    BoundsPanicCpu,
    PassingCpu,
    RefusingCpu,
    SilentPanicCpu,
    StatusCpu,
    status_cpu,
)


class TestRunAllTests:
    def test_correct_implementation_passes(self, fake_rom):
        assert run_all_tests(PassingCpu) is None
        assert fake_rom == ["nestest.nes"]

    def test_diagnosed_defect(self, fake_rom):
        with pytest.raises(ConformanceFailure) as info:
            run_all_tests(BeqCpu)
        assert str(info.value) == "cpu didn't pass test nestest: BEQ failed to branch"
        assert info.value.test_name == "nestest"
        assert info.value.outcome == Diagnosed("BEQ failed to branch")

    def test_zero_second_byte_passes(self, fake_rom):
        """$02 = 05 with $03 still zero: the zero rule wins."""
        run_all_tests(BeqOnlyCpu)

    def test_construction_error(self, fake_rom):
        with pytest.raises(ConformanceFailure) as info:
            run_all_tests(RefusingCpu)
        assert str(info.value) == ("cpu failed while running test nestest "
                                   "with custom error message mapper 4 not supported")

    def test_panic(self, fake_rom):
        with pytest.raises(ConformanceFailure) as info:
            run_all_tests(BoundsPanicCpu)
        message = str(info.value)
        assert "implementation panicked" in message
        assert message == "cpu implementation panicked while running test nestest: index out of bounds"

    def test_panic_without_message(self, fake_rom):
        with pytest.raises(ConformanceFailure, match="<no information>"):
            run_all_tests(SilentPanicCpu)

    def test_unknown_failure(self, fake_rom):
        with pytest.raises(ConformanceFailure, match="unknown failure$"):
            run_all_tests(status_cpu(0xFF, 0xFE))


class TestSequencing:
    @pytest.fixture
    def two_tests(self, monkeypatch):
        tests = {
            "first": ConformanceTest(name="first", rom="first.nes", cycles=100),
            "second": ConformanceTest(name="second", rom="second.nes", cycles=200,
                                      status_addresses=(0x0010, 0x0011)),
        }
        monkeypatch.setattr(suite, "CONFORMANCE_TESTS", tests)
        return tests

    def test_runs_in_registry_order(self, fake_rom, two_tests):
        run_all_tests(PassingCpu)
        assert fake_rom == ["first.nes", "second.nes"]

    def test_stops_at_first_failure(self, fake_rom, two_tests):
        with pytest.raises(ConformanceFailure) as info:
            run_all_tests(BeqCpu)
        assert info.value.test_name == "first"
        assert fake_rom == ["first.nes"]

    def test_later_test_failure_named(self, fake_rom, two_tests):
        class SecondFails(StatusCpu):
            def __init__(self, rom, num_cycles):
                super().__init__(rom, num_cycles)
                if num_cycles == 200:
                    self.ram[0x10], self.ram[0x11] = 0x18, 0x01

        with pytest.raises(ConformanceFailure) as info:
            run_all_tests(SecondFails)
        assert str(info.value) == "cpu didn't pass test second: ORA # failure"


class TestSingleTest:
    def test_nestest_entry_point(self, fake_rom):
        nestest(PassingCpu)
        with pytest.raises(ConformanceFailure):
            nestest(BeqCpu)

    def test_run_test_by_name(self, fake_rom):
        run_test(PassingCpu, "nestest")

    def test_unknown_test_name(self, fake_rom):
        with pytest.raises(ValueError, match="nestest"):
            run_test(PassingCpu, "blargg")

    def test_evaluate_returns_outcome(self, fake_rom):
        assert evaluate(PassingCpu, NESTEST) == Passed()
        assert evaluate(RefusingCpu, "nestest") == Faulted(
            FaultOrigin.IMPLEMENTATION_ERROR, "mapper 4 not supported")

    def test_rom_problem_is_raised(self, monkeypatch):
        def missing(name):
            raise RomError("not bundled", name)

        monkeypatch.setattr(suite, "load_rom", missing)
        with pytest.raises(RomError, match="nestest.nes"):
            run_all_tests(PassingCpu)


class TestOutcomeMessages:
    def test_passed_has_no_message(self):
        assert Passed().passed
        assert Passed().failure_message("nestest") is None

    def test_faulted_error(self):
        outcome = Faulted(FaultOrigin.IMPLEMENTATION_ERROR, "bad header")
        assert not outcome.passed
        assert outcome.failure_message("t") == "cpu failed while running test t with custom error message bad header"
