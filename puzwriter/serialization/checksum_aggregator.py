"""
Checksum Aggregator

Derives the five checksums the header carries.
"""

from dataclasses import dataclass
from typing import Tuple

from ..constants import PUZ_LAYOUT, PuzLayout
from ..puzzle import Puzzle, puz_state
from ..utils import puz_encode, logDebug
from .checksum import checksum
from .strings_serializer import strings_checksum


@dataclass(frozen=True)
class PuzChecksums:
    header: int
    solution: int
    state: int
    strings: int
    file: int

    def cheat_order(self) -> Tuple[int, int, int, int]:
        """Checksums in the order the cheat field masks them."""
        return (self.header, self.solution, self.state, self.strings)


def compute_checksums(puzzle: Puzzle, header: bytes,
                      layout: PuzLayout = PUZ_LAYOUT) -> PuzChecksums:
    """
    Compute all checksums for a puzzle.

    Args:
        puzzle: Puzzle being written
        header: Header bytes with dimensions, clue count and bitmask already set
        layout: Header layout table

    Returns:
        PuzChecksums
    """
    solution = puz_encode(puzzle.solution, False, puzzle.encoding)
    state = puz_encode(puz_state(puzzle), False, puzzle.encoding)

    # CIB: width through the end of the header
    h = checksum(bytes(header[layout.width:layout.header_length]))

    c = checksum(solution, h)
    c = checksum(state, c)

    checksums = PuzChecksums(
        header=h,
        solution=checksum(solution),
        state=checksum(state),
        strings=strings_checksum(puzzle),
        file=strings_checksum(puzzle, c),
    )
    logDebug(f"Checksums: header=0x{checksums.header:04X} solution=0x{checksums.solution:04X} "
             f"state=0x{checksums.state:04X} strings=0x{checksums.strings:04X} "
             f"file=0x{checksums.file:04X}")
    return checksums
