"""
Integrity checks on the nestest status-code table.
"""

from nes_conformance.diagnostics import ANY, NESTEST_DIAGNOSTICS, DiagnosticEntry


def _first_byte_rows():
    return [e for e in NESTEST_DIAGNOSTICS if e.first is not ANY]


def _second_byte_rows():
    return [e for e in NESTEST_DIAGNOSTICS if e.second is not ANY]


class TestShape:
    def test_row_count(self):
        assert len(NESTEST_DIAGNOSTICS) == 507
        assert len(_first_byte_rows()) == 254
        assert len(_second_byte_rows()) == 253

    def test_one_literal_per_row(self):
        for entry in NESTEST_DIAGNOSTICS:
            assert (entry.first is ANY) != (entry.second is ANY), entry

    def test_literals_are_nonzero_bytes(self):
        for entry in NESTEST_DIAGNOSTICS:
            literal = entry.first if entry.first is not ANY else entry.second
            assert 0x01 <= literal <= 0xFF, entry

    def test_no_duplicate_codes(self):
        patterns = [(e.first, e.second) for e in NESTEST_DIAGNOSTICS]
        assert len(patterns) == len(set(patterns))

    def test_first_byte_rows_come_first(self):
        kinds = [e.first is not ANY for e in NESTEST_DIAGNOSTICS]
        boundary = kinds.index(False)
        assert all(kinds[:boundary])
        assert not any(kinds[boundary:])

    def test_every_row_has_text(self):
        for entry in NESTEST_DIAGNOSTICS:
            assert entry.text and entry.text == entry.text.strip()


class TestContent:
    def test_branch_block(self):
        assert NESTEST_DIAGNOSTICS[0] == DiagnosticEntry(0x01, ANY, "BCS failed to branch")
        assert NESTEST_DIAGNOSTICS[15] == DiagnosticEntry(0x10, ANY, "BMI branched when it shouldn't have")

    def test_last_row(self):
        assert NESTEST_DIAGNOSTICS[-1] == DiagnosticEntry(ANY, 0xFD, "SRE abs,x failure")

    def test_sbc_immediate_listed_with_immediate_group(self):
        """$71-$75 sit right after $3D in the listing, ahead of the implied tests."""
        codes = [e.first for e in _first_byte_rows()]
        at = codes.index(0x3D)
        assert codes[at + 1:at + 6] == [0x71, 0x72, 0x73, 0x74, 0x75]
        assert codes[at + 6] == 0x3E

    def test_nop_codes_in_first_byte(self):
        texts = {e.first: e.text for e in _first_byte_rows()}
        assert texts[0x4F] == "implied NOPs affects regs/flags"
        assert texts[0x57] == "ZP NOPs less than 2 bytes long"

    def test_verbatim_spacing(self):
        texts = {e.first: e.text for e in _first_byte_rows()}
        assert texts[0x4A] == "LSR A  failed"

    def test_isb_rows_keep_listing_text(self):
        """The ISB group reuses the DCP wording from the listing."""
        texts = {e.second: e.text for e in _second_byte_rows()}
        assert texts[0xAA] == "DCP (indr,x) failure"

    def test_rra_rows_absent(self):
        assert not any(e.text.startswith("RRA") for e in NESTEST_DIAGNOSTICS)

    def test_wraparound_rows(self):
        texts = {e.first: e.text for e in _first_byte_rows()}
        assert texts[0xEB] == "read location should've wrapped around ffffh to 0000h"
        assert texts[0xEC] == "should've wrapped zeropage address"


class TestEntryStr:
    def test_first_byte(self):
        assert str(DiagnosticEntry(0x05, ANY, "BEQ failed to branch")) == "($05,   * ) BEQ failed to branch"

    def test_second_byte(self):
        assert str(DiagnosticEntry(ANY, 0x88, "SAX (indr,x) failure")) == "(  * , $88) SAX (indr,x) failure"
