"""
Binary File Utilities

Common helpers for writing .puz binary structures.
"""

import struct
from typing import Union

from ..constants import EXTRAS_LAYOUT, ExtrasLayout

BytesLike = Union[bytes, bytearray, memoryview]


def concat_bytes(*parts: BytesLike) -> bytes:
    """Concatenate byte buffers, skipping None entries."""
    return b"".join(bytes(p) for p in parts if p is not None)


def write_uint16_le(buffer: bytearray, offset: int, value: int):
    """Write an unsigned 16-bit little-endian value into buffer at offset."""
    struct.pack_into('<H', buffer, offset, value & 0xFFFF)


def write_section(title: str, data: bytes, checksum: int,
                  layout: ExtrasLayout = EXTRAS_LAYOUT) -> bytes:
    """
    Build one extras section.

    Extras section format:
    - char[4] title
    - u16 data length
    - u16 checksum of data
    - [length bytes of data]
    - NUL

    Args:
        title: 4-character ASCII section title
        data: Section data bytes
        checksum: Checksum of data
        layout: Extras section layout table

    Returns:
        Complete section bytes including the trailing null
    """
    title_bytes = title.encode('ascii')
    if len(title_bytes) != layout.length - layout.title:
        raise ValueError(f"Section title must be {layout.length - layout.title} bytes: {title!r}")

    section = bytearray(layout.header_length + len(data) + 1)
    section[layout.title:layout.title + len(title_bytes)] = title_bytes
    write_uint16_le(section, layout.length, len(data))
    write_uint16_le(section, layout.checksum, checksum)
    section[layout.data:layout.data + len(data)] = data
    # Trailing NUL is already zero
    return bytes(section)
