"""
Data types for crossword puzzles.

Contains the puzzle description consumed by the serialization package.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..constants import DEFAULT_ENCODING
from .exceptions import ValidationError


@dataclass
class Puzzle:
    """
    Crossword puzzle description.

    Grids are flat, row-major strings of width * height cells. Optional
    fields are None when absent; an absent markup or rebus grid produces no
    extras section at all.
    """
    width: int
    height: int
    solution: str  # '.' marks a block
    title: str = ""
    author: str = ""
    copyright: str = ""
    clues: List[str] = field(default_factory=list)  # Puzzle numbering order
    note: Optional[str] = None
    # Player fill; derived from the solution when None
    state: Optional[str] = None
    # One GEXT bitmask byte per cell
    markup: Optional[np.ndarray] = None
    # One entry per cell, None for cells without a rebus
    rebus: Optional[List[Optional[str]]] = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self):
        if self.markup is not None:
            raw = np.asarray(self.markup)
            # uint8 casting wraps silently, so range-check first
            if raw.size and (raw.min() < 0 or raw.max() > 255):
                bad = raw[(raw < 0) | (raw > 255)].reshape(-1)[0].item()
                raise ValidationError("markup", "values in 0-255", bad)
            # Accept (height, width) grids; stored flat, row-major
            self.markup = raw.astype(np.uint8).reshape(-1)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def has_note(self) -> bool:
        return bool(self.note)

    @property
    def rebus_count(self) -> int:
        if self.rebus is None:
            return 0
        return sum(1 for entry in self.rebus if entry)
