"""
String utilities for puzzle text.

Encodes puzzle text into the character set declared by the puzzle. Across
Lite expects ISO-8859-1, so that is the default.
"""

import codecs

from ..constants import DEFAULT_ENCODING


def puz_encode(text: str, null_terminate: bool = False,
               encoding: str = DEFAULT_ENCODING) -> bytes:
    """
    Encode text for a .puz file.

    Characters the target encoding cannot represent are replaced with '?'.

    Args:
        text: Text to encode (None is treated as empty)
        null_terminate: Append a single NUL byte
        encoding: Target character set

    Returns:
        Encoded bytes
    """
    data = (text or "").encode(encoding, errors='replace')
    if null_terminate:
        data += b'\x00'
    return data


def is_known_encoding(encoding: str) -> bool:
    """Return True if Python has a codec registered under this name."""
    try:
        codecs.lookup(encoding)
    except LookupError:
        return False
    return True
