"""
Player state grid.

The state grid has the shape of the solution: blocks stay '.', every other
cell holds the player's fill or '-' when empty.
"""

from ..constants import BLOCK_CELL, EMPTY_CELL
from .data_types import Puzzle


def puz_state(puzzle: Puzzle) -> str:
    """Return the puzzle's state grid, deriving an empty one when unset."""
    if puzzle.state is not None:
        return puzzle.state
    return "".join(BLOCK_CELL if cell == BLOCK_CELL else EMPTY_CELL
                   for cell in puzzle.solution)
