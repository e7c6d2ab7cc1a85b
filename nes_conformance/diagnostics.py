"""
nestest status-code table.

nestest records failures in two zero-page bytes: $02 for the documented
instructions (and the NOP tests), $03 for the undocumented opcodes. A test
that has not failed leaves its byte at zero.

Each row is (first byte pattern, second byte pattern, description), where a
pattern is either a literal byte or ANY. Rows are tried top to bottom and the
first full match wins, so the order here is part of the table's meaning.

Source: nestest.txt error code listing (kevtris), byte 02h / 03h sections.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

__all__ = ['ANY', 'DiagnosticEntry', 'NESTEST_DIAGNOSTICS']

# Wildcard pattern: matches any status byte value
ANY = None


class DiagnosticEntry(NamedTuple):
    """One row of a status-code table."""
    first: Optional[int]
    second: Optional[int]
    text: str

    def __str__(self):
        def fmt(pattern):
            return '  * ' if pattern is ANY else f'${pattern:02X}'
        return f"({fmt(self.first)}, {fmt(self.second)}) {self.text}"


# ──────────────────────────────────────────────
# nestest error codes
# ──────────────────────────────────────────────
# Format: (byte $02, byte $03, description)

_NESTEST_ROWS = (
    # ── Branch tests ──
    (0x01, ANY, "BCS failed to branch"),
    (0x02, ANY, "BCS branched when it shouldn't have"),
    (0x03, ANY, "BCC branched when it shouldn't have"),
    (0x04, ANY, "BCC failed to branch"),
    (0x05, ANY, "BEQ failed to branch"),
    (0x06, ANY, "BEQ branched when it shouldn't have"),
    (0x07, ANY, "BNE failed to branch"),
    (0x08, ANY, "BNE branched when it shouldn't have"),
    (0x09, ANY, "BVS failed to branch"),
    (0x0A, ANY, "BVC branched when it shouldn't have"),
    (0x0B, ANY, "BVC failed to branch"),
    (0x0C, ANY, "BVS branched when it shouldn't have"),
    (0x0D, ANY, "BPL failed to branch"),
    (0x0E, ANY, "BPL branched when it shouldn't have"),
    (0x0F, ANY, "BMI failed to branch"),
    (0x10, ANY, "BMI branched when it shouldn't have"),

    # ── Flag tests ──
    (0x11, ANY, "PHP/flags failure (bits set)"),
    (0x12, ANY, "PHP/flags failure (bits clear)"),
    (0x13, ANY, "PHP/flags failure (misc bit states)"),
    (0x14, ANY, "PLP/flags failure (misc bit states)"),
    (0x15, ANY, "PLP/flags failure (misc bit states)"),
    (0x16, ANY, "PHA/PLA failure (PLA didn't affect Z and N properly)"),
    (0x17, ANY, "PHA/PLA failure (PLA didn't affect Z and N properly)"),

    # ── Immediate instruction tests ──
    (0x18, ANY, "ORA # failure"),
    (0x19, ANY, "ORA # failure"),
    (0x1A, ANY, "AND # failure"),
    (0x1B, ANY, "AND # failure"),
    (0x1C, ANY, "EOR # failure"),
    (0x1D, ANY, "EOR # failure"),
    (0x1E, ANY, "ADC # failure (overflow/carry problems)"),
    (0x1F, ANY, "ADC # failure (decimal mode was turned on)"),
    (0x20, ANY, "ADC # failure"),
    (0x21, ANY, "ADC # failure"),
    (0x22, ANY, "ADC # failure"),
    (0x23, ANY, "LDA # failure (didn't set N and Z correctly)"),
    (0x24, ANY, "LDA # failure (didn't set N and Z correctly)"),
    (0x25, ANY, "CMP # failure (messed up flags)"),
    (0x26, ANY, "CMP # failure (messed up flags)"),
    (0x27, ANY, "CMP # failure (messed up flags)"),
    (0x28, ANY, "CMP # failure (messed up flags)"),
    (0x29, ANY, "CMP # failure (messed up flags)"),
    (0x2A, ANY, "CMP # failure (messed up flags)"),
    (0x2B, ANY, "CPY # failure (messed up flags)"),
    (0x2C, ANY, "CPY # failure (messed up flags)"),
    (0x2D, ANY, "CPY # failure (messed up flags)"),
    (0x2E, ANY, "CPY # failure (messed up flags)"),
    (0x2F, ANY, "CPY # failure (messed up flags)"),
    (0x30, ANY, "CPY # failure (messed up flags)"),
    (0x31, ANY, "CPY # failure (messed up flags)"),
    (0x32, ANY, "CPX # failure (messed up flags)"),
    (0x33, ANY, "CPX # failure (messed up flags)"),
    (0x34, ANY, "CPX # failure (messed up flags)"),
    (0x35, ANY, "CPX # failure (messed up flags)"),
    (0x36, ANY, "CPX # failure (messed up flags)"),
    (0x37, ANY, "CPX # failure (messed up flags)"),
    (0x38, ANY, "CPX # failure (messed up flags)"),
    (0x39, ANY, "LDX # failure (didn't set N and Z correctly)"),
    (0x3A, ANY, "LDX # failure (didn't set N and Z correctly)"),
    (0x3B, ANY, "LDY # failure (didn't set N and Z correctly)"),
    (0x3C, ANY, "LDY # failure (didn't set N and Z correctly)"),
    (0x3D, ANY, "compare(s) stored the result in a register (whoops!)"),
    (0x71, ANY, "SBC # failure"),
    (0x72, ANY, "SBC # failure"),
    (0x73, ANY, "SBC # failure"),
    (0x74, ANY, "SBC # failure"),
    (0x75, ANY, "SBC # failure"),

    # ── Implied instruction tests ──
    (0x3E, ANY, "INX/DEX/INY/DEY did something bad"),
    (0x3F, ANY, "INY/DEY messed up overflow or carry"),
    (0x40, ANY, "INX/DEX messed up overflow or carry"),
    (0x41, ANY, "TAY did something bad (changed wrong regs, messed up flags)"),
    (0x42, ANY, "TAX did something bad (changed wrong regs, messed up flags)"),
    (0x43, ANY, "TYA did something bad (changed wrong regs, messed up flags)"),
    (0x44, ANY, "TXA did something bad (changed wrong regs, messed up flags)"),
    (0x45, ANY, "TXS didn't set flags right, or TSX touched flags and it shouldn't have"),

    # ── Stack tests ──
    (0x46, ANY, "wrong data popped, or data not in right location on stack"),
    (0x47, ANY, "JSR didn't work as expected"),
    (0x48, ANY, "RTS/JSR shouldn't have affected flags"),
    (0x49, ANY, "RTI/RTS didn't work right when return addys/data were manually pushed"),

    # ── Accumulator tests ──
    (0x4A, ANY, "LSR A  failed"),
    (0x4B, ANY, "ASL A  failed"),
    (0x4C, ANY, "ROR A  failed"),
    (0x4D, ANY, "ROL A  failed"),

    # ── (indirect,x) tests ──
    (0x58, ANY, "LDA didn't load the data it expected to load"),
    (0x59, ANY, "STA didn't store the data where it was supposed to"),
    (0x5A, ANY, "ORA failure"),
    (0x5B, ANY, "ORA failure"),
    (0x5C, ANY, "AND failure"),
    (0x5D, ANY, "AND failure"),
    (0x5E, ANY, "EOR failure"),
    (0x5F, ANY, "EOR failure"),
    (0x60, ANY, "ADC failure"),
    (0x61, ANY, "ADC failure"),
    (0x62, ANY, "ADC failure"),
    (0x63, ANY, "ADC failure"),
    (0x64, ANY, "ADC failure"),
    (0x65, ANY, "CMP failure"),
    (0x66, ANY, "CMP failure"),
    (0x67, ANY, "CMP failure"),
    (0x68, ANY, "CMP failure"),
    (0x69, ANY, "CMP failure"),
    (0x6A, ANY, "CMP failure"),
    (0x6B, ANY, "CMP failure"),
    (0x6C, ANY, "SBC failure"),
    (0x6D, ANY, "SBC failure"),
    (0x6E, ANY, "SBC failure"),
    (0x6F, ANY, "SBC failure"),
    (0x70, ANY, "SBC failure"),

    # ── Zeropage tests ──
    (0x76, ANY, "LDA didn't set the flags properly"),
    (0x77, ANY, "STA affected flags it shouldn't"),
    (0x78, ANY, "LDY didn't set the flags properly"),
    (0x79, ANY, "STY affected flags it shouldn't"),
    (0x7A, ANY, "LDX didn't set the flags properly"),
    (0x7B, ANY, "STX affected flags it shouldn't"),
    (0x7C, ANY, "BIT failure"),
    (0x7D, ANY, "BIT failure"),
    (0x7E, ANY, "ORA failure"),
    (0x7F, ANY, "ORA failure"),
    (0x80, ANY, "AND failure"),
    (0x81, ANY, "AND failure"),
    (0x82, ANY, "EOR failure"),
    (0x83, ANY, "EOR failure"),
    (0x84, ANY, "ADC failure"),
    (0x85, ANY, "ADC failure"),
    (0x86, ANY, "ADC failure"),
    (0x87, ANY, "ADC failure"),
    (0x88, ANY, "ADC failure"),
    (0x89, ANY, "CMP failure"),
    (0x8A, ANY, "CMP failure"),
    (0x8B, ANY, "CMP failure"),
    (0x8C, ANY, "CMP failure"),
    (0x8D, ANY, "CMP failure"),
    (0x8E, ANY, "CMP failure"),
    (0x8F, ANY, "CMP failure"),
    (0x90, ANY, "SBC failure"),
    (0x91, ANY, "SBC failure"),
    (0x92, ANY, "SBC failure"),
    (0x93, ANY, "SBC failure"),
    (0x94, ANY, "SBC failure"),
    (0x95, ANY, "CPX failure"),
    (0x96, ANY, "CPX failure"),
    (0x97, ANY, "CPX failure"),
    (0x98, ANY, "CPX failure"),
    (0x99, ANY, "CPX failure"),
    (0x9A, ANY, "CPX failure"),
    (0x9B, ANY, "CPX failure"),
    (0x9C, ANY, "CPY failure"),
    (0x9D, ANY, "CPY failure"),
    (0x9E, ANY, "CPY failure"),
    (0x9F, ANY, "CPY failure"),
    (0xA0, ANY, "CPY failure"),
    (0xA1, ANY, "CPY failure"),
    (0xA2, ANY, "CPY failure"),
    (0xA3, ANY, "LSR failure"),
    (0xA4, ANY, "LSR failure"),
    (0xA5, ANY, "ASL failure"),
    (0xA6, ANY, "ASL failure"),
    (0xA7, ANY, "ROL failure"),
    (0xA8, ANY, "ROL failure"),
    (0xA9, ANY, "ROR failure"),
    (0xAA, ANY, "ROR failure"),
    (0xAB, ANY, "INC failure"),
    (0xAC, ANY, "INC failure"),
    (0xAD, ANY, "DEC failure"),
    (0xAE, ANY, "DEC failure"),
    (0xAF, ANY, "DEC failure"),

    # ── Absolute tests ──
    (0xB0, ANY, "LDA didn't set the flags properly"),
    (0xB1, ANY, "STA affected flags it shouldn't"),
    (0xB2, ANY, "LDY didn't set the flags properly"),
    (0xB3, ANY, "STY affected flags it shouldn't"),
    (0xB4, ANY, "LDX didn't set the flags properly"),
    (0xB5, ANY, "STX affected flags it shouldn't"),
    (0xB6, ANY, "BIT failure"),
    (0xB7, ANY, "BIT failure"),
    (0xB8, ANY, "ORA failure"),
    (0xB9, ANY, "ORA failure"),
    (0xBA, ANY, "AND failure"),
    (0xBB, ANY, "AND failure"),
    (0xBC, ANY, "EOR failure"),
    (0xBD, ANY, "EOR failure"),
    (0xBE, ANY, "ADC failure"),
    (0xBF, ANY, "ADC failure"),
    (0xC0, ANY, "ADC failure"),
    (0xC1, ANY, "ADC failure"),
    (0xC2, ANY, "ADC failure"),
    (0xC3, ANY, "CMP failure"),
    (0xC4, ANY, "CMP failure"),
    (0xC5, ANY, "CMP failure"),
    (0xC6, ANY, "CMP failure"),
    (0xC7, ANY, "CMP failure"),
    (0xC8, ANY, "CMP failure"),
    (0xC9, ANY, "CMP failure"),
    (0xCA, ANY, "SBC failure"),
    (0xCB, ANY, "SBC failure"),
    (0xCC, ANY, "SBC failure"),
    (0xCD, ANY, "SBC failure"),
    (0xCE, ANY, "SBC failure"),
    (0xCF, ANY, "CPX failure"),
    (0xD0, ANY, "CPX failure"),
    (0xD1, ANY, "CPX failure"),
    (0xD2, ANY, "CPX failure"),
    (0xD3, ANY, "CPX failure"),
    (0xD4, ANY, "CPX failure"),
    (0xD5, ANY, "CPX failure"),
    (0xD6, ANY, "CPY failure"),
    (0xD7, ANY, "CPY failure"),
    (0xD8, ANY, "CPY failure"),
    (0xD9, ANY, "CPY failure"),
    (0xDA, ANY, "CPY failure"),
    (0xDB, ANY, "CPY failure"),
    (0xDC, ANY, "CPY failure"),
    (0xDD, ANY, "LSR failure"),
    (0xDE, ANY, "LSR failure"),
    (0xDF, ANY, "ASL failure"),
    (0xE0, ANY, "ASL failure"),
    (0xE1, ANY, "ROR failure"),
    (0xE2, ANY, "ROR failure"),
    (0xE3, ANY, "ROL failure"),
    (0xE4, ANY, "ROL failure"),
    (0xE5, ANY, "INC failure"),
    (0xE6, ANY, "INC failure"),
    (0xE7, ANY, "DEC failure"),
    (0xE8, ANY, "DEC failure"),
    (0xE9, ANY, "DEC failure"),

    # ── (indirect),y tests ──
    (0xEA, ANY, "LDA didn't load what it was supposed to"),
    (0xEB, ANY, "read location should've wrapped around ffffh to 0000h"),
    (0xEC, ANY, "should've wrapped zeropage address"),
    (0xED, ANY, "ORA failure"),
    (0xEE, ANY, "ORA failure"),
    (0xEF, ANY, "AND failure"),
    (0xF0, ANY, "AND failure"),
    (0xF1, ANY, "EOR failure"),
    (0xF2, ANY, "EOR failure"),
    (0xF3, ANY, "ADC failure"),
    (0xF4, ANY, "ADC failure"),
    (0xF5, ANY, "ADC failure"),
    (0xF6, ANY, "ADC failure"),
    (0xF7, ANY, "ADC failure"),
    (0xF8, ANY, "CMP failure"),
    (0xF9, ANY, "CMP failure"),
    (0xFA, ANY, "CMP failure"),
    (0xFB, ANY, "CMP failure"),
    (0xFC, ANY, "CMP failure"),
    (0xFD, ANY, "CMP failure"),
    (0xFE, ANY, "CMP failure"),

    # First byte is used up; the rest report in $03
    (ANY, 0x01, "SBC failure"),
    (ANY, 0x02, "SBC failure"),
    (ANY, 0x03, "SBC failure"),
    (ANY, 0x04, "SBC failure"),
    (ANY, 0x05, "SBC failure"),
    (ANY, 0x06, "STA failure"),
    (ANY, 0x07, "JMP () data reading didn't wrap properly (this fails on a 65C02)"),

    # ── Zeropage,x tests ──
    (ANY, 0x08, "LDY,X failure"),
    (ANY, 0x09, "LDY,X failure"),
    (ANY, 0x0A, "STY,X failure"),
    (ANY, 0x0B, "ORA failure"),
    (ANY, 0x0C, "ORA failure"),
    (ANY, 0x0D, "AND failure"),
    (ANY, 0x0E, "AND failure"),
    (ANY, 0x0F, "EOR failure"),
    (ANY, 0x10, "EOR failure"),
    (ANY, 0x11, "ADC failure"),
    (ANY, 0x12, "ADC failure"),
    (ANY, 0x13, "ADC failure"),
    (ANY, 0x14, "ADC failure"),
    (ANY, 0x15, "ADC failure"),
    (ANY, 0x16, "CMP failure"),
    (ANY, 0x17, "CMP failure"),
    (ANY, 0x18, "CMP failure"),
    (ANY, 0x19, "CMP failure"),
    (ANY, 0x1A, "CMP failure"),
    (ANY, 0x1B, "CMP failure"),
    (ANY, 0x1C, "CMP failure"),
    (ANY, 0x1D, "SBC failure"),
    (ANY, 0x1E, "SBC failure"),
    (ANY, 0x1F, "SBC failure"),
    (ANY, 0x20, "SBC failure"),
    (ANY, 0x21, "SBC failure"),
    (ANY, 0x22, "LDA failure"),
    (ANY, 0x23, "LDA failure"),
    (ANY, 0x24, "STA failure"),
    (ANY, 0x25, "LSR failure"),
    (ANY, 0x26, "LSR failure"),
    (ANY, 0x27, "ASL failure"),
    (ANY, 0x28, "ASL failure"),
    (ANY, 0x29, "ROR failure"),
    (ANY, 0x2A, "ROR failure"),
    (ANY, 0x2B, "ROL failure"),
    (ANY, 0x2C, "ROL failure"),
    (ANY, 0x2D, "INC failure"),
    (ANY, 0x2E, "INC failure"),
    (ANY, 0x2F, "DEC failure"),
    (ANY, 0x30, "DEC failure"),
    (ANY, 0x31, "DEC failure"),
    (ANY, 0x32, "LDX,Y failure"),
    (ANY, 0x33, "LDX,Y failure"),
    (ANY, 0x34, "STX,Y failure"),
    (ANY, 0x35, "STX,Y failure"),

    # ── Absolute,y tests ──
    (ANY, 0x36, "LDA failure"),
    (ANY, 0x37, "LDA failure to wrap properly from ffffh to 0000h"),
    (ANY, 0x38, "LDA failure, page cross"),
    (ANY, 0x39, "ORA failure"),
    (ANY, 0x3A, "ORA failure"),
    (ANY, 0x3B, "AND failure"),
    (ANY, 0x3C, "AND failure"),
    (ANY, 0x3D, "EOR failure"),
    (ANY, 0x3E, "EOR failure"),
    (ANY, 0x3F, "ADC failure"),
    (ANY, 0x40, "ADC failure"),
    (ANY, 0x41, "ADC failure"),
    (ANY, 0x42, "ADC failure"),
    (ANY, 0x43, "ADC failure"),
    (ANY, 0x44, "CMP failure"),
    (ANY, 0x45, "CMP failure"),
    (ANY, 0x46, "CMP failure"),
    (ANY, 0x47, "CMP failure"),
    (ANY, 0x48, "CMP failure"),
    (ANY, 0x49, "CMP failure"),
    (ANY, 0x4A, "CMP failure"),
    (ANY, 0x4B, "SBC failure"),
    (ANY, 0x4C, "SBC failure"),
    (ANY, 0x4D, "SBC failure"),
    (ANY, 0x4E, "SBC failure"),
    (ANY, 0x4F, "SBC failure"),
    (ANY, 0x50, "STA failure"),

    # ── Absolute,x tests ──
    (ANY, 0x51, "LDY,X failure"),
    (ANY, 0x52, "LDY,X failure (didn't page cross)"),
    (ANY, 0x53, "ORA failure"),
    (ANY, 0x54, "ORA failure"),
    (ANY, 0x55, "AND failure"),
    (ANY, 0x56, "AND failure"),
    (ANY, 0x57, "EOR failure"),
    (ANY, 0x58, "EOR failure"),
    (ANY, 0x59, "ADC failure"),
    (ANY, 0x5A, "ADC failure"),
    (ANY, 0x5B, "ADC failure"),
    (ANY, 0x5C, "ADC failure"),
    (ANY, 0x5D, "ADC failure"),
    (ANY, 0x5E, "CMP failure"),
    (ANY, 0x5F, "CMP failure"),
    (ANY, 0x60, "CMP failure"),
    (ANY, 0x61, "CMP failure"),
    (ANY, 0x62, "CMP failure"),
    (ANY, 0x63, "CMP failure"),
    (ANY, 0x64, "CMP failure"),
    (ANY, 0x65, "SBC failure"),
    (ANY, 0x66, "SBC failure"),
    (ANY, 0x67, "SBC failure"),
    (ANY, 0x68, "SBC failure"),
    (ANY, 0x69, "SBC failure"),
    (ANY, 0x6A, "LDA failure"),
    (ANY, 0x6B, "LDA failure (didn't page cross)"),
    (ANY, 0x6C, "STA failure"),
    (ANY, 0x6D, "LSR failure"),
    (ANY, 0x6E, "LSR failure"),
    (ANY, 0x6F, "ASL failure"),
    (ANY, 0x70, "ASL failure"),
    (ANY, 0x71, "ROR failure"),
    (ANY, 0x72, "ROR failure"),
    (ANY, 0x73, "ROL failure"),
    (ANY, 0x74, "ROL failure"),
    (ANY, 0x75, "INC failure"),
    (ANY, 0x76, "INC failure"),
    (ANY, 0x77, "DEC failure"),
    (ANY, 0x78, "DEC failure"),
    (ANY, 0x79, "DEC failure"),
    (ANY, 0x7A, "LDX,Y failure"),
    (ANY, 0x7B, "LDX,Y failure"),

    # Undocumented opcode tests. Failures land in the second status byte
    # unless noted otherwise.
    # ── NOP - "invalid" opcode tests (error byte 02h) ──
    (0x4E, ANY, "absolute,X NOPs less than 3 bytes long"),
    (0x4F, ANY, "implied NOPs affects regs/flags"),
    (0x50, ANY, "ZP,X NOPs less than 2 bytes long"),
    (0x51, ANY, "absolute NOP less than 3 bytes long"),
    (0x52, ANY, "ZP NOPs less than 2 bytes long"),
    (0x53, ANY, "absolute,X NOPs less than 3 bytes long"),
    (0x54, ANY, "implied NOPs affects regs/flags"),
    (0x55, ANY, "ZP,X NOPs less than 2 bytes long"),
    (0x56, ANY, "absolute NOP less than 3 bytes long"),
    (0x57, ANY, "ZP NOPs less than 2 bytes long"),

    # ── LAX - "invalid" opcode tests ──
    (ANY, 0x7C, "LAX (indr,x) failure"),
    (ANY, 0x7D, "LAX (indr,x) failure"),
    (ANY, 0x7E, "LAX zeropage failure"),
    (ANY, 0x7F, "LAX zeropage failure"),
    (ANY, 0x80, "LAX absolute failure"),
    (ANY, 0x81, "LAX absolute failure"),
    (ANY, 0x82, "LAX (indr),y failure"),
    (ANY, 0x83, "LAX (indr),y failure"),
    (ANY, 0x84, "LAX zp,y failure"),
    (ANY, 0x85, "LAX zp,y failure"),
    (ANY, 0x86, "LAX abs,y failure"),
    (ANY, 0x87, "LAX abs,y failure"),

    # ── SAX - "invalid" opcode tests ──
    (ANY, 0x88, "SAX (indr,x) failure"),
    (ANY, 0x89, "SAX (indr,x) failure"),
    (ANY, 0x8A, "SAX zeropage failure"),
    (ANY, 0x8B, "SAX zeropage failure"),
    (ANY, 0x8C, "SAX absolute failure"),
    (ANY, 0x8D, "SAX absolute failure"),
    (ANY, 0x8E, "SAX zp,y failure"),
    (ANY, 0x8F, "SAX zp,y failure"),

    # ── SBC - "invalid" opcode test ──
    (ANY, 0x90, "SBC failure"),
    (ANY, 0x91, "SBC failure"),
    (ANY, 0x92, "SBC failure"),
    (ANY, 0x93, "SBC failure"),
    (ANY, 0x94, "SBC failure"),

    # ── DCP - "invalid" opcode tests ──
    (ANY, 0x95, "DCP (indr,x) failure"),
    (ANY, 0x96, "DCP (indr,x) failure"),
    (ANY, 0x97, "DCP (indr,x) failure"),
    (ANY, 0x98, "DCP zeropage failure"),
    (ANY, 0x99, "DCP zeropage failure"),
    (ANY, 0x9A, "DCP zeropage failure"),
    (ANY, 0x9B, "DCP absolute failure"),
    (ANY, 0x9C, "DCP absolute failure"),
    (ANY, 0x9D, "DCP absolute failure"),
    (ANY, 0x9E, "DCP (indr),y failure"),
    (ANY, 0x9F, "DCP (indr),y failure"),
    (ANY, 0xA0, "DCP (indr),y failure"),
    (ANY, 0xA1, "DCP zp,x failure"),
    (ANY, 0xA2, "DCP zp,x failure"),
    (ANY, 0xA3, "DCP zp,x failure"),
    (ANY, 0xA4, "DCP abs,y failure"),
    (ANY, 0xA5, "DCP abs,y failure"),
    (ANY, 0xA6, "DCP abs,y failure"),
    (ANY, 0xA7, "DCP abs,x failure"),
    (ANY, 0xA8, "DCP abs,x failure"),
    (ANY, 0xA9, "DCP abs,x failure"),

    # ── ISB - "invalid" opcode tests ──
    (ANY, 0xAA, "DCP (indr,x) failure"),
    (ANY, 0xAB, "DCP (indr,x) failure"),
    (ANY, 0xAC, "DCP (indr,x) failure"),
    (ANY, 0xAD, "DCP zeropage failure"),
    (ANY, 0xAE, "DCP zeropage failure"),
    (ANY, 0xAF, "DCP zeropage failure"),
    (ANY, 0xB0, "DCP absolute failure"),
    (ANY, 0xB1, "DCP absolute failure"),
    (ANY, 0xB2, "DCP absolute failure"),
    (ANY, 0xB3, "DCP (indr),y failure"),
    (ANY, 0xB4, "DCP (indr),y failure"),
    (ANY, 0xB5, "DCP (indr),y failure"),
    (ANY, 0xB6, "DCP zp,x failure"),
    (ANY, 0xB7, "DCP zp,x failure"),
    (ANY, 0xB8, "DCP zp,x failure"),
    (ANY, 0xB9, "DCP abs,y failure"),
    (ANY, 0xBA, "DCP abs,y failure"),
    (ANY, 0xBB, "DCP abs,y failure"),
    (ANY, 0xBC, "DCP abs,x failure"),
    (ANY, 0xBD, "DCP abs,x failure"),
    (ANY, 0xBE, "DCP abs,x failure"),

    # ── SLO - "invalid" opcode tests ──
    (ANY, 0xBF, "SLO (indr,x) failure"),
    (ANY, 0xC0, "SLO (indr,x) failure"),
    (ANY, 0xC1, "SLO (indr,x) failure"),
    (ANY, 0xC2, "SLO zeropage failure"),
    (ANY, 0xC3, "SLO zeropage failure"),
    (ANY, 0xC4, "SLO zeropage failure"),
    (ANY, 0xC5, "SLO absolute failure"),
    (ANY, 0xC6, "SLO absolute failure"),
    (ANY, 0xC7, "SLO absolute failure"),
    (ANY, 0xC8, "SLO (indr),y failure"),
    (ANY, 0xC9, "SLO (indr),y failure"),
    (ANY, 0xCA, "SLO (indr),y failure"),
    (ANY, 0xCB, "SLO zp,x failure"),
    (ANY, 0xCC, "SLO zp,x failure"),
    (ANY, 0xCD, "SLO zp,x failure"),
    (ANY, 0xCE, "SLO abs,y failure"),
    (ANY, 0xCF, "SLO abs,y failure"),
    (ANY, 0xD0, "SLO abs,y failure"),
    (ANY, 0xD1, "SLO abs,x failure"),
    (ANY, 0xD2, "SLO abs,x failure"),
    (ANY, 0xD3, "SLO abs,x failure"),

    # ── RLA - "invalid" opcode tests ──
    (ANY, 0xD4, "RLA (indr,x) failure"),
    (ANY, 0xD5, "RLA (indr,x) failure"),
    (ANY, 0xD6, "RLA (indr,x) failure"),
    (ANY, 0xD7, "RLA zeropage failure"),
    (ANY, 0xD8, "RLA zeropage failure"),
    (ANY, 0xD9, "RLA zeropage failure"),
    (ANY, 0xDA, "RLA absolute failure"),
    (ANY, 0xDB, "RLA absolute failure"),
    (ANY, 0xDC, "RLA absolute failure"),
    (ANY, 0xDD, "RLA (indr),y failure"),
    (ANY, 0xDE, "RLA (indr),y failure"),
    (ANY, 0xDF, "RLA (indr),y failure"),
    (ANY, 0xE0, "RLA zp,x failure"),
    (ANY, 0xE1, "RLA zp,x failure"),
    (ANY, 0xE2, "RLA zp,x failure"),
    (ANY, 0xE3, "RLA abs,y failure"),
    (ANY, 0xE4, "RLA abs,y failure"),
    (ANY, 0xE5, "RLA abs,y failure"),
    (ANY, 0xE6, "RLA abs,x failure"),
    (ANY, 0xE7, "RLA abs,x failure"),
    (ANY, 0xE8, "RLA abs,x failure"),

    # ── SRE - "invalid" opcode tests ──
    (ANY, 0xE9, "SRE (indr,x) failure"),
    (ANY, 0xEA, "SRE (indr,x) failure"),
    (ANY, 0xEB, "SRE (indr,x) failure"),
    (ANY, 0xEC, "SRE zeropage failure"),
    (ANY, 0xED, "SRE zeropage failure"),
    (ANY, 0xEE, "SRE zeropage failure"),
    (ANY, 0xEF, "SRE absolute failure"),
    (ANY, 0xF0, "SRE absolute failure"),
    (ANY, 0xF1, "SRE absolute failure"),
    (ANY, 0xF2, "SRE (indr),y failure"),
    (ANY, 0xF3, "SRE (indr),y failure"),
    (ANY, 0xF4, "SRE (indr),y failure"),
    (ANY, 0xF5, "SRE zp,x failure"),
    (ANY, 0xF6, "SRE zp,x failure"),
    (ANY, 0xF7, "SRE zp,x failure"),
    (ANY, 0xF8, "SRE abs,y failure"),
    (ANY, 0xF9, "SRE abs,y failure"),
    (ANY, 0xFA, "SRE abs,y failure"),
    (ANY, 0xFB, "SRE abs,x failure"),
    (ANY, 0xFC, "SRE abs,x failure"),
    (ANY, 0xFD, "SRE abs,x failure"),

    # RRA codes share $03 values 01h-15h with the rows above and are never
    # reachable, so they are left out.
)

NESTEST_DIAGNOSTICS: Tuple[DiagnosticEntry, ...] = tuple(
    DiagnosticEntry(*row) for row in _NESTEST_ROWS
)
