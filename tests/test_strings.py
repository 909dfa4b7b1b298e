from puzwriter import Puzzle
from puzwriter.serialization import build_strings, strings_checksum, checksum


def test_string_block_layout(mini_puzzle):
    assert build_strings(mini_puzzle) == (
        b"Mini\x00Ann Author\x00(c) 2024\x00"
        b"Pet\x00Taxi\x00Tow\x00Bend at the waist\x00"
        b"Have fun\x00"
    )


def test_empty_strings_still_terminated(tiny_puzzle):
    assert build_strings(tiny_puzzle) == b"\x00\x00\x00\x00"


def test_single_trailing_null_without_note(mini_puzzle):
    mini_puzzle.note = None
    block = build_strings(mini_puzzle)
    assert block.endswith(b"Bend at the waist\x00\x00")
    assert not block.endswith(b"\x00\x00\x00")


def test_empty_note_same_as_absent(mini_puzzle):
    mini_puzzle.note = None
    absent = build_strings(mini_puzzle), strings_checksum(mini_puzzle)
    mini_puzzle.note = ""
    assert (build_strings(mini_puzzle), strings_checksum(mini_puzzle)) == absent


def test_strings_checksum_skips_clue_terminators(mini_puzzle):
    stream = (
        b"Mini\x00Ann Author\x00(c) 2024\x00"
        b"PetTaxiTowBend at the waist"
        b"Have fun\x00"
    )
    assert strings_checksum(mini_puzzle) == checksum(stream)


def test_strings_checksum_continues_from_seed(mini_puzzle):
    seed = 0x1357
    stream = (
        b"Mini\x00Ann Author\x00(c) 2024\x00"
        b"PetTaxiTowBend at the waist"
        b"Have fun\x00"
    )
    assert strings_checksum(mini_puzzle, seed) == checksum(stream, seed)


def test_empty_fields_checksum_to_zero(tiny_puzzle):
    assert strings_checksum(tiny_puzzle) == 0


def test_latin1_text_is_single_byte():
    puzzle = Puzzle(width=1, height=1, solution="A", title="Café")
    assert build_strings(puzzle).startswith(b"Caf\xe9\x00")


def test_unencodable_characters_replaced():
    puzzle = Puzzle(width=1, height=1, solution="A", clues=["Snow ☃"])
    assert b"Snow ?\x00" in build_strings(puzzle)


def test_declared_encoding_is_used():
    puzzle = Puzzle(width=1, height=1, solution="A", title="Café", encoding="utf-8")
    assert build_strings(puzzle).startswith("Café".encode("utf-8") + b"\x00")
