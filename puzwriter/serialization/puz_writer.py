#!/usr/bin/env python3
"""
Puz Writer

Assembles header, body and extras into a complete .puz file.

Strategy:
1. Validate the puzzle (optional)
2. Build header (computes all checksums)
3. Build body (solution, state, strings)
4. Build extras (GEXT, GRBS, RTBL as present)
5. Concatenate, and write to disk when asked
"""

from pathlib import Path

from ..constants import PUZ_LAYOUT, EXTRAS_LAYOUT, PuzLayout, ExtrasLayout
from ..puzzle import Puzzle, validate_puzzle
from ..utils import log, logDebug, concat_bytes
from .header_serializer import build_header
from .body_serializer import build_body
from .extras_serializer import build_extras


def write_puz(puzzle: Puzzle,
              layout: PuzLayout = PUZ_LAYOUT,
              extras_layout: ExtrasLayout = EXTRAS_LAYOUT,
              validate: bool = True) -> bytes:
    """
    Encode a puzzle as .puz bytes.

    Args:
        puzzle: Puzzle to encode
        layout: Header layout table
        extras_layout: Extras section layout table
        validate: Reject puzzles whose fields don't match the byte layout

    Returns:
        Complete .puz file contents

    Raises:
        ValidationError: if validate is set and the puzzle is inconsistent
    """
    if validate:
        validate_puzzle(puzzle)

    header = build_header(puzzle, layout)
    body = build_body(puzzle)
    extras = build_extras(puzzle, extras_layout)

    logDebug(f"Header {len(header)} + body {len(body)} + extras {len(extras)} bytes")
    return concat_bytes(header, body, extras)


def write_puz_file(puzzle: Puzzle, output_path: Path,
                   layout: PuzLayout = PUZ_LAYOUT,
                   extras_layout: ExtrasLayout = EXTRAS_LAYOUT,
                   validate: bool = True) -> int:
    """
    Encode a puzzle and write it to output_path.

    Returns:
        Number of bytes written
    """
    output_path = Path(output_path)
    data = write_puz(puzzle, layout, extras_layout, validate)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(data)

    log(f"  {puzzle.width}x{puzzle.height} grid, {len(puzzle.clues)} clues")
    if puzzle.markup is not None:
        log("  Markup: GEXT")
    if puzzle.rebus is not None:
        log(f"  Rebus: {puzzle.rebus_count} cell(s)")
    log(f"Wrote {output_path}: {len(data):,} bytes")
    return len(data)
