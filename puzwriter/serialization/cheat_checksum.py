"""
Cheat Checksum

Across Lite's "ICHEATED" field: the low bytes of four checksums XORed with
the first half of the key, followed by the high bytes XORed with the second
half. Obfuscation only.
"""

from typing import Sequence

from ..constants import CHEAT_KEY


def cheat_checksum(checksums: Sequence[int], key: str = CHEAT_KEY) -> bytes:
    """
    Mask checksums with key.

    Args:
        checksums: header, solution, state and strings checksums, in that order
        key: Mask key, twice as many characters as checksums

    Returns:
        len(key) masked bytes
    """
    n = len(checksums)
    if len(key) != 2 * n:
        raise ValueError(f"Cheat key must be {2 * n} characters, got {len(key)}")

    out = bytearray(2 * n)
    for shift in range(2):
        for i, c in enumerate(checksums):
            out[i + n * shift] = ord(key[i + n * shift]) ^ ((c >> (8 * shift)) & 0xFF)
    return bytes(out)


def write_cheat_checksum(buffer: bytearray, offset: int, checksums: Sequence[int],
                         key: str = CHEAT_KEY):
    """Write the masked checksums into buffer at offset."""
    masked = cheat_checksum(checksums, key)
    buffer[offset:offset + len(masked)] = masked
