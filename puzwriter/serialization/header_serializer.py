#!/usr/bin/env python3
"""
Puz Header Builder

Creates the fixed 0x34-byte header of a .puz file.
"""

from ..constants import (
    PUZ_LAYOUT, PuzLayout, PUZ_MAGIC, PUZ_VERSION, CHEAT_KEY, COMPATIBILITY_BITMASK,
)
from ..puzzle import Puzzle
from ..utils import write_uint16_le, logDebug
from .checksum_aggregator import compute_checksums
from .cheat_checksum import write_cheat_checksum


def _write_literal(header: bytearray, offset: int, length: int, text: str):
    """Write an ASCII literal, NUL-padded to its field width."""
    data = text.encode('ascii')
    if len(data) >= length:
        raise ValueError(f"Literal {text!r} does not fit a {length}-byte field")
    header[offset:offset + length] = data.ljust(length, b'\x00')


def build_header(puzzle: Puzzle, layout: PuzLayout = PUZ_LAYOUT) -> bytes:
    """
    Create the .puz header.

    Structure (see PuzLayout):
    - u16 file checksum
    - char[12] "ACROSS&DOWN"
    - u16 header (CIB) checksum
    - u8[8] masked checksums
    - char[4] version
    - reserved / scrambled fields (zero)
    - u8 width, u8 height
    - u16 clue count
    - u16 bitmask (always 1)
    - u16 scrambled tag (zero)

    Checksums are computed after the dimension fields are written, since
    the header checksum covers them.
    """
    header = bytearray(layout.header_length)

    # Metadata
    _write_literal(header, layout.magic, layout.magic_length, PUZ_MAGIC)
    _write_literal(header, layout.version, layout.version_length, PUZ_VERSION)

    # Dimensions
    header[layout.width] = puzzle.width
    header[layout.height] = puzzle.height
    write_uint16_le(header, layout.num_clues, len(puzzle.clues))

    write_uint16_le(header, layout.compatibility_bitmask, COMPATIBILITY_BITMASK)

    # Checksums
    checksums = compute_checksums(puzzle, header, layout)
    write_uint16_le(header, layout.file_checksum, checksums.file)
    write_uint16_le(header, layout.header_checksum, checksums.header)
    write_cheat_checksum(header, layout.cheat_checksum, checksums.cheat_order(), CHEAT_KEY)

    logDebug(f"Header: {len(header)} bytes, {puzzle.width}x{puzzle.height}, {len(puzzle.clues)} clues")
    return bytes(header)
