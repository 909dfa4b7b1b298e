"""
Puzzle Package

Puzzle description, state-grid derivation, validation and JSON loading.
"""

from .data_types import Puzzle
from .exceptions import PuzError, ValidationError, PuzzleLoadError, ConfigError
from .state import puz_state
from .validation import validate_puzzle
from .loader import load_puzzle, puzzle_from_dict
