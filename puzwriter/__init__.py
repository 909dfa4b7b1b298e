"""
puzwriter

Encodes crossword puzzles into the Across Lite .puz binary format.
"""

from .puzzle import Puzzle, PuzError, ValidationError, PuzzleLoadError, ConfigError, load_puzzle, validate_puzzle
from .serialization import checksum, write_puz, write_puz_file

__version__ = "0.1.0"
