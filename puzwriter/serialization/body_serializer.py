"""
Puz Body Builder

Solution grid, state grid and string block, back to back. The reader finds
the boundaries from the header dimensions and the string terminators.
"""

from ..puzzle import Puzzle, puz_state
from ..utils import puz_encode, concat_bytes
from .strings_serializer import build_strings


def build_body(puzzle: Puzzle) -> bytes:
    """Build the .puz body for a puzzle."""
    return concat_bytes(
        puz_encode(puzzle.solution, False, puzzle.encoding),
        puz_encode(puz_state(puzzle), False, puzzle.encoding),
        build_strings(puzzle),
    )
