"""
Constants used across the writer modules.

Byte layout of the Across Lite .puz format. The layout tables are frozen
dataclasses so builders can take them as a parameter and tests can swap in
fixture layouts without touching the encoding logic.
"""

from dataclasses import dataclass


# Fixed literals
PUZ_MAGIC = "ACROSS&DOWN"
PUZ_VERSION = "1.3"
CHEAT_KEY = "ICHEATED"

# Default character set for puzzle text
DEFAULT_ENCODING = "latin-1"

# Solution/state grid markers
BLOCK_CELL = "."
EMPTY_CELL = "-"

# Across Lite crashes when this bitmask is zero
COMPATIBILITY_BITMASK = 0x0001

# GEXT markup bits
MARKUP_PREVIOUSLY_INCORRECT = 0x10
MARKUP_INCORRECT = 0x20
MARKUP_REVEALED = 0x40
MARKUP_CIRCLED = 0x80

# Rebus indices are written as two space-padded digits
MAX_REBUS_ENTRIES = 99


@dataclass(frozen=True)
class PuzLayout:
    """Offsets and lengths of the fixed .puz header."""
    file_checksum: int = 0x00
    magic: int = 0x02
    header_checksum: int = 0x0E
    cheat_checksum: int = 0x10
    version: int = 0x18
    reserved_1c: int = 0x1C
    scrambled_checksum: int = 0x1E
    reserved_20: int = 0x20
    width: int = 0x2C
    height: int = 0x2D
    num_clues: int = 0x2E
    compatibility_bitmask: int = 0x30
    scrambled_tag: int = 0x32

    header_length: int = 0x34
    magic_length: int = 0x0C    # "ACROSS&DOWN" + NUL
    version_length: int = 0x04  # "1.3" + NUL
    cheat_length: int = 0x08


@dataclass(frozen=True)
class ExtrasLayout:
    """Layout of a single extras section header and its titles."""
    title: int = 0
    length: int = 4
    checksum: int = 6
    data: int = 8

    header_length: int = 8

    markup_title: str = "GEXT"
    rebus_locations_title: str = "GRBS"
    rebus_solutions_title: str = "RTBL"


PUZ_LAYOUT = PuzLayout()
EXTRAS_LAYOUT = ExtrasLayout()
