"""
Puzzle Loader

Reads puzzle descriptions from JSON.

JSON Format:
    {
        "width": 3, "height": 3,
        "solution": "CAT.O.DOG",
        "title": "...", "author": "...", "copyright": "...",
        "clues": ["...", "..."],
        "note": "...",                 optional
        "state": "C--.-.---",          optional
        "markup": [0, 128, ...],       optional, one int per cell
        "rebus": [null, "HEART", ...]  optional, one entry per cell
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..constants import DEFAULT_ENCODING
from ..utils import logDebug, is_known_encoding
from .data_types import Puzzle
from .exceptions import PuzzleLoadError

REQUIRED_KEYS = ('width', 'height', 'solution')
TEXT_KEYS = ('title', 'author', 'copyright', 'note', 'state')


def _parse_markup(values) -> Optional[np.ndarray]:
    if values is None:
        return None
    try:
        ints = [int(v) for v in values]
    except (TypeError, ValueError) as e:
        raise PuzzleLoadError(f"Invalid markup: {e}") from e
    bad = [v for v in ints if not 0 <= v <= 255]
    if bad:
        raise PuzzleLoadError(f"Markup values must be bytes (0-255), got {bad[0]}")
    return np.array(ints, dtype=np.uint8)


def _parse_rebus(values):
    if values is None:
        return None
    if not isinstance(values, list):
        raise PuzzleLoadError("Rebus must be a list with one entry per cell")
    return [str(v) if v else None for v in values]


def puzzle_from_dict(data: Dict[str, Any], encoding: Optional[str] = None) -> Puzzle:
    """
    Build a Puzzle from its dict representation.

    Args:
        data: Parsed JSON object
        encoding: Character set override; falls back to data['encoding'], then latin-1

    Returns:
        Puzzle instance
    """
    if not isinstance(data, dict):
        raise PuzzleLoadError(f"Puzzle must be a JSON object, got {type(data).__name__}")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise PuzzleLoadError(f"Missing required field(s): {', '.join(missing)}")

    try:
        width = int(data['width'])
        height = int(data['height'])
    except (TypeError, ValueError) as e:
        raise PuzzleLoadError(f"Invalid dimensions: {e}") from e

    if not isinstance(data['solution'], str):
        raise PuzzleLoadError("Solution must be a string")

    clues = data.get('clues', [])
    if not isinstance(clues, list):
        raise PuzzleLoadError("Clues must be a list")
    bad_clues = [i for i, clue in enumerate(clues) if not isinstance(clue, str)]
    if bad_clues:
        raise PuzzleLoadError(f"Clue {bad_clues[0]} must be a string")

    for key in TEXT_KEYS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise PuzzleLoadError(f"Field '{key}' must be a string, got {type(value).__name__}")

    encoding = encoding or data.get('encoding') or DEFAULT_ENCODING
    if not is_known_encoding(encoding):
        raise PuzzleLoadError(f"Unknown encoding: {encoding}")

    return Puzzle(
        width=width,
        height=height,
        solution=data['solution'],
        title=data.get('title') or "",
        author=data.get('author') or "",
        copyright=data.get('copyright') or "",
        clues=clues,
        note=data.get('note'),
        state=data.get('state'),
        markup=_parse_markup(data.get('markup')),
        rebus=_parse_rebus(data.get('rebus')),
        encoding=encoding,
    )


def load_puzzle(path: Path, encoding: Optional[str] = None) -> Puzzle:
    """
    Load a puzzle from a JSON file.

    Raises:
        PuzzleLoadError: if the file is missing, malformed or incomplete
    """
    path = Path(path)
    if not path.exists():
        raise PuzzleLoadError(f"Puzzle file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PuzzleLoadError(f"Invalid JSON in {path}: {e}") from e

    puzzle = puzzle_from_dict(data, encoding)
    logDebug(f"Loaded {path}: {puzzle.width}x{puzzle.height}, {len(puzzle.clues)} clues")
    return puzzle
