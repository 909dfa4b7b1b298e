#!/usr/bin/env python3
"""
Extras Builder

Builds the optional sections that follow the body. Each builder is a pure
function returning its section bytes, or nothing when the puzzle has no data
for it.

Sections written:
- GEXT: per-cell markup bitmask (circled, revealed, ...)
- GRBS: per-cell rebus location (0 = none, otherwise index + 2)
- RTBL: rebus solution table, " 1:CAT; 2:DOG;"
"""

from typing import List, Optional, Tuple

import numpy as np

from ..constants import EXTRAS_LAYOUT, ExtrasLayout
from ..puzzle import Puzzle
from ..utils import puz_encode, concat_bytes, write_section, logDebug
from .checksum import checksum


def _section(title: str, data: bytes, layout: ExtrasLayout) -> bytes:
    c = checksum(data)
    logDebug(f"{title}: {len(data)} data bytes, checksum 0x{c:04X}")
    return write_section(title, data, c, layout)


def build_markup_section(puzzle: Puzzle, layout: ExtrasLayout = EXTRAS_LAYOUT) -> Optional[bytes]:
    """Build the GEXT section, or None if the puzzle has no markup."""
    if puzzle.markup is None:
        return None

    data = np.asarray(puzzle.markup, dtype=np.uint8).tobytes()
    return _section(layout.markup_title, data, layout)


def rebus_tables(rebus: List[Optional[str]]) -> Tuple[np.ndarray, str]:
    """
    Number the rebus cells in scan order.

    Returns:
        Tuple of (location bytes, one per cell, solution table text)
    """
    locations = np.zeros(len(rebus), dtype=np.uint8)
    entries = []

    for cell, answer in enumerate(rebus):
        if not answer:
            continue
        index = len(entries)
        locations[cell] = index + 2
        # 1-based, left padded to two characters
        entries.append(f"{index + 1:>2}:{answer};")

    return locations, "".join(entries)


def build_rebus_sections(puzzle: Puzzle, layout: ExtrasLayout = EXTRAS_LAYOUT) -> List[bytes]:
    """Build the GRBS and RTBL sections, or an empty list if the puzzle has no rebus grid."""
    if puzzle.rebus is None:
        return []

    locations, table = rebus_tables(puzzle.rebus)
    return [
        _section(layout.rebus_locations_title, locations.tobytes(), layout),
        _section(layout.rebus_solutions_title, puz_encode(table, False, puzzle.encoding), layout),
    ]


def build_extras(puzzle: Puzzle, layout: ExtrasLayout = EXTRAS_LAYOUT) -> bytes:
    """Build all extras sections present in the puzzle, in file order."""
    sections = [build_markup_section(puzzle, layout)]
    sections.extend(build_rebus_sections(puzzle, layout))
    return concat_bytes(*sections)
