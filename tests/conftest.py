import numpy as np
import pytest

from puzwriter import Puzzle


@pytest.fixture
def tiny_puzzle():
    """1x1 puzzle, solution 'A', no clues, empty strings."""
    return Puzzle(width=1, height=1, solution="A")


@pytest.fixture
def mini_puzzle():
    """3x3 puzzle with a center block and two clue directions."""
    return Puzzle(
        width=3,
        height=3,
        solution="CAT" "A.O" "BOW",
        title="Mini",
        author="Ann Author",
        copyright="(c) 2024",
        clues=["Pet", "Taxi", "Tow", "Bend at the waist"],
        note="Have fun",
    )


@pytest.fixture
def rebus_puzzle():
    """3x4 puzzle with rebus cells at 0, 5 and 9."""
    rebus = [None] * 12
    rebus[0] = "CAT"
    rebus[5] = "DOG"
    rebus[9] = "OWL"
    return Puzzle(
        width=3,
        height=4,
        solution="CXXXXDXXXOXX",
        clues=["a", "b"],
        markup=np.array([0x80] + [0] * 11, dtype=np.uint8),
        rebus=rebus,
    )


@pytest.fixture
def tiny_header():
    """Hand-computed header for tiny_puzzle."""
    return (
        b"\x39\xb1"                                  # file checksum 0xB139
        b"ACROSS&DOWN\x00"
        b"\x00\x26"                                  # header checksum 0x2600
        b"\x49\x02\x65\x45\x67\x54\x45\x44"          # masked checksums
        b"1.3\x00"
        b"\x00\x00\x00\x00"
        + b"\x00" * 12 +
        b"\x01\x01\x00\x00\x01\x00\x00\x00"
    )
