import struct

import numpy as np

from puzwriter import Puzzle
from puzwriter.constants import MARKUP_CIRCLED
from puzwriter.serialization import (
    build_extras, build_markup_section, build_rebus_sections, checksum, rebus_tables,
)


def parse_sections(data):
    """Split extras bytes into (title, length, checksum, payload) tuples."""
    sections = []
    offset = 0
    while offset < len(data):
        title = data[offset:offset + 4].decode("ascii")
        length, c = struct.unpack_from("<HH", data, offset + 4)
        payload = data[offset + 8:offset + 8 + length]
        assert data[offset + 8 + length] == 0
        sections.append((title, length, c, payload))
        offset += 8 + length + 1
    return sections


def test_rebus_tables_numbering():
    rebus = [None] * 12
    rebus[0], rebus[5], rebus[9] = "CAT", "DOG", "OWL"
    locations, table = rebus_tables(rebus)
    assert table == " 1:CAT; 2:DOG; 3:OWL;"
    assert locations.tolist() == [2, 0, 0, 0, 0, 3, 0, 0, 0, 4, 0, 0]


def test_rebus_index_padding_to_two_digits():
    rebus = ["X%d" % i for i in range(12)]
    _, table = rebus_tables(rebus)
    assert table.startswith(" 1:X0; 2:X1;")
    assert table.endswith("10:X9;11:X10;12:X11;")


def test_empty_string_is_not_a_rebus():
    locations, table = rebus_tables(["", "AB", None])
    assert locations.tolist() == [0, 2, 0]
    assert table == " 1:AB;"


def test_markup_section(rebus_puzzle):
    section = build_markup_section(rebus_puzzle)
    data = bytes([MARKUP_CIRCLED] + [0] * 11)
    assert section == b"GEXT" + struct.pack("<HH", 12, checksum(data)) + data + b"\x00"


def test_markup_from_plain_list():
    puzzle = Puzzle(width=2, height=1, solution="AB", markup=[0, 0x80])
    assert isinstance(puzzle.markup, np.ndarray)
    assert build_markup_section(puzzle)[8:10] == b"\x00\x80"


def test_sections_in_file_order(rebus_puzzle):
    sections = parse_sections(build_extras(rebus_puzzle))
    assert [s[0] for s in sections] == ["GEXT", "GRBS", "RTBL"]
    for title, length, c, payload in sections:
        assert length == len(payload)
        assert c == checksum(payload)


def test_rebus_section_contents(rebus_puzzle):
    grbs, rtbl = build_rebus_sections(rebus_puzzle)
    locations = bytes([2, 0, 0, 0, 0, 3, 0, 0, 0, 4, 0, 0])
    assert grbs == b"GRBS" + struct.pack("<HH", 12, checksum(locations)) + locations + b"\x00"
    table = b" 1:CAT; 2:DOG; 3:OWL;"
    assert rtbl == b"RTBL" + struct.pack("<HH", len(table), checksum(table)) + table + b"\x00"


def test_absent_extras_write_nothing(mini_puzzle):
    assert build_markup_section(mini_puzzle) is None
    assert build_rebus_sections(mini_puzzle) == []
    assert build_extras(mini_puzzle) == b""


def test_markup_only(rebus_puzzle):
    rebus_puzzle.rebus = None
    assert [s[0] for s in parse_sections(build_extras(rebus_puzzle))] == ["GEXT"]


def test_present_rebus_without_entries_still_emitted():
    puzzle = Puzzle(width=2, height=1, solution="AB", rebus=[None, None])
    grbs, rtbl = build_rebus_sections(puzzle)
    assert grbs == b"GRBS\x02\x00\x00\x00\x00\x00\x00"
    assert rtbl == b"RTBL\x00\x00\x00\x00\x00"


def test_markup_grid_is_flattened_row_major():
    grid = np.array([[0, 0x80], [0x80, 0]], dtype=np.uint8)
    puzzle = Puzzle(width=2, height=2, solution="ABCD", markup=grid)
    assert puzzle.markup.tolist() == [0, 0x80, 0x80, 0]
    assert build_markup_section(puzzle)[8:12] == b"\x00\x80\x80\x00"


def test_rebus_table_uses_puzzle_charset():
    puzzle = Puzzle(width=2, height=1, solution="CE", rebus=[None, "CAFÉ"])
    _, rtbl = build_rebus_sections(puzzle)
    table = b" 1:CAF\xc9;"
    assert rtbl == b"RTBL" + struct.pack("<HH", len(table), checksum(table)) + table + b"\x00"
