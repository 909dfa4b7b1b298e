"""
String Block Builder

Builds the null-delimited string region at the end of the .puz body, and the
chained checksum over the same fields.

Structure:
- title, author, copyright (each NUL-terminated)
- clues in numbering order (each NUL-terminated)
- note, if present
- NUL (terminates the note, present or not)
"""

from ..puzzle import Puzzle
from ..utils import puz_encode, concat_bytes
from .checksum import checksum

STRING_FIELDS = ('title', 'author', 'copyright')


def build_strings(puzzle: Puzzle) -> bytes:
    """Build the string block for a puzzle."""
    enc = puzzle.encoding
    strings = [puz_encode(getattr(puzzle, name), True, enc) for name in STRING_FIELDS]
    strings.extend(puz_encode(clue, True, enc) for clue in puzzle.clues)

    if puzzle.has_note:
        strings.append(puz_encode(puzzle.note, False, enc))

    strings.append(b'\x00')
    return concat_bytes(*strings)


def strings_checksum(puzzle: Puzzle, seed: int = 0x0000) -> int:
    """
    Chain the checksum over the string fields, one field per call.

    Title, author, copyright and note include their terminator; clues do not.
    """
    enc = puzzle.encoding
    c = seed
    for name in STRING_FIELDS:
        c = checksum(puz_encode(getattr(puzzle, name), True, enc), c)
    for clue in puzzle.clues:
        c = checksum(puz_encode(clue, False, enc), c)

    if puzzle.has_note:
        c = checksum(puz_encode(puzzle.note, True, enc), c)

    return c
