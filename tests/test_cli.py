"""
nescheck command-line front end.
"""

import logging

import pytest

import nescheck
from nes_conformance import suite
from nes_conformance.log import LOGGER_NAME
from nes_conformance.rom import RomError


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestVerdicts:
    def test_pass(self, fake_rom, capsys):
        assert nescheck.main(["stub_cpus:PassingCpu"]) == 0
        assert "✓ nestest: passed" in capsys.readouterr().out

    def test_diagnosed(self, fake_rom, capsys):
        assert nescheck.main(["stub_cpus:BeqCpu"]) == 1
        out = capsys.readouterr().out
        assert "cpu didn't pass test nestest: BEQ failed to branch" in out

    def test_panic(self, fake_rom, capsys):
        assert nescheck.main(["stub_cpus:BoundsPanicCpu", "--test", "nestest"]) == 1
        assert "implementation panicked" in capsys.readouterr().out


class TestArguments:
    def test_list(self, capsys):
        assert nescheck.main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "nestest" in out
        assert "nestest.nes" in out

    def test_missing_implementation(self):
        with pytest.raises(SystemExit) as info:
            nescheck.main([])
        assert info.value.code == 2

    def test_unknown_test(self):
        with pytest.raises(SystemExit):
            nescheck.main(["stub_cpus:PassingCpu", "--test", "blargg"])


class TestLoadImplementation:
    def test_class(self):
        from stub_cpus import PassingCpu
        assert nescheck.load_implementation("stub_cpus:PassingCpu") is PassingCpu

    @pytest.mark.parametrize("target", [
        "stub_cpus",
        ":PassingCpu",
        "stub_cpus:",
        "no_such_module_anywhere:Cpu",
        "stub_cpus:NoSuchCpu",
    ])
    def test_bad_target(self, target):
        with pytest.raises(nescheck.ImplementationImportError):
            nescheck.load_implementation(target)

    def test_bad_target_exit_code(self, capsys):
        assert nescheck.main(["no_such_module_anywhere:Cpu"]) == 2
        assert "cannot import" in capsys.readouterr().err


class TestEnvironmentErrors:
    def test_rom_error_exit_code(self, monkeypatch, capsys):
        def missing(name):
            raise RomError("not bundled", name)

        monkeypatch.setattr(suite, "load_rom", missing)
        assert nescheck.main(["stub_cpus:PassingCpu"]) == 2
        assert "nestest.nes" in capsys.readouterr().err

    def test_log_file(self, fake_rom, tmp_path):
        log_file = tmp_path / "logs" / "nescheck.log"
        assert nescheck.main(["stub_cpus:BeqCpu", "--log-file", str(log_file)]) == 1
        text = log_file.read_text(encoding="utf-8")
        assert "nes_conformance.runner" in text
        assert "BEQ failed to branch" in text
