"""
Puzzle validation.

The serializers assume a consistent puzzle and will happily write a file that
Across Lite rejects. validate_puzzle() checks the fields the byte layout
depends on and raises ValidationError on the first mismatch.
"""

import numpy as np

from ..constants import MAX_REBUS_ENTRIES
from ..utils import logDebug, is_known_encoding
from .data_types import Puzzle
from .exceptions import ValidationError

TEXT_FIELDS = ('solution', 'title', 'author', 'copyright')
OPTIONAL_TEXT_FIELDS = ('note', 'state')


def _check_dimension(name: str, value):
    if not isinstance(value, int) or not 1 <= value <= 255:
        raise ValidationError(name, "integer in 1-255", value)


def _check_grid_length(name: str, grid, cells: int):
    if grid is not None and len(grid) != cells:
        raise ValidationError(f"{name} length", cells, len(grid))


def _check_text(name: str, value, optional: bool = False):
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise ValidationError(name, "str", type(value).__name__)


def validate_puzzle(puzzle: Puzzle) -> Puzzle:
    """
    Check that a puzzle can be encoded.

    Returns:
        The puzzle, unchanged

    Raises:
        ValidationError: naming the field, the expected value and the actual one
    """
    _check_dimension("width", puzzle.width)
    _check_dimension("height", puzzle.height)

    for name in TEXT_FIELDS:
        _check_text(name, getattr(puzzle, name))
    for name in OPTIONAL_TEXT_FIELDS:
        _check_text(name, getattr(puzzle, name), optional=True)
    if not is_known_encoding(puzzle.encoding):
        raise ValidationError("encoding", "known codec", puzzle.encoding)

    cells = puzzle.cell_count
    _check_grid_length("solution", puzzle.solution, cells)
    _check_grid_length("state", puzzle.state, cells)
    _check_grid_length("markup", puzzle.markup, cells)
    _check_grid_length("rebus", puzzle.rebus, cells)

    if puzzle.markup is not None:
        markup = np.asarray(puzzle.markup)
        if markup.size and (markup.min() < 0 or markup.max() > 255):
            bad = markup[(markup < 0) | (markup > 255)].reshape(-1)[0].item()
            raise ValidationError("markup", "values in 0-255", bad)

    if len(puzzle.clues) > 0xFFFF:
        raise ValidationError("clue count", "at most 65535", len(puzzle.clues))
    for i, clue in enumerate(puzzle.clues):
        if not isinstance(clue, str):
            raise ValidationError(f"clues[{i}]", "str", type(clue).__name__)

    if puzzle.rebus_count > MAX_REBUS_ENTRIES:
        raise ValidationError("rebus count", f"at most {MAX_REBUS_ENTRIES}", puzzle.rebus_count)

    logDebug(f"Validated {puzzle.width}x{puzzle.height} puzzle, {len(puzzle.clues)} clues")
    return puzzle
