"""
Rolling Checksum

The 16-bit checksum used throughout the .puz format: rotate right by one,
then add the next byte. Not a CRC.
"""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def checksum(data: Optional[BytesLike], seed: int = 0x0000, length: Optional[int] = None) -> int:
    """
    Checksum the first length bytes of data, starting from seed.

    Feeding one call's result in as the next call's seed continues the same
    stream, so checksum(b, checksum(a)) == checksum(a + b).

    Args:
        data: Bytes to checksum; None returns seed unchanged
        seed: Running checksum to continue from
        length: Number of bytes to include (default: all)

    Returns:
        16-bit checksum
    """
    c = seed
    if data is None:
        return c

    if length is None:
        length = len(data)

    for byte in memoryview(data)[:length]:
        if c & 0x0001:
            c = ((c >> 1) + 0x8000) & 0xFFFF
        else:
            c = c >> 1
        c = (c + byte) & 0xFFFF
    return c
