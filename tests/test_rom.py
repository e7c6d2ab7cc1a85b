"""
Bundled ROM loader tests.
"""

from importlib import resources

import pytest

from nes_conformance.config import INES_MAGIC
from nes_conformance.rom import RomError, check_ines_header, load_rom

NESTEST_BUNDLED = resources.files("nes_conformance").joinpath("roms").joinpath("nestest.nes").is_file()


class TestHeader:
    def test_valid_magic(self):
        check_ines_header(b"NES\x1a" + bytes(12))

    def test_wrong_magic(self):
        with pytest.raises(RomError, match="not an iNES image"):
            check_ines_header(b"\x7fELF" + bytes(12), "bogus.nes")

    def test_empty(self):
        with pytest.raises(RomError, match="empty"):
            check_ines_header(b"")

    def test_name_in_message(self):
        with pytest.raises(RomError) as info:
            check_ines_header(b"UNIF", "weird.unf")
        assert info.value.name == "weird.unf"
        assert str(info.value).startswith("ROM weird.unf:")


class TestLoad:
    def test_missing_rom(self):
        with pytest.raises(RomError, match="not bundled") as info:
            load_rom("no-such-rom.nes")
        assert info.value.name == "no-such-rom.nes"

    @pytest.mark.skipif(not NESTEST_BUNDLED, reason="nestest.nes not bundled in this checkout")
    def test_nestest_bundled(self):
        data = load_rom("nestest.nes")
        assert data[:4] == INES_MAGIC
        assert len(data) == 24592
