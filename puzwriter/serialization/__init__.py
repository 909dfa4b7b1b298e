"""
Serialization Package

Binary serialization of puzzles into the Across Lite .puz format.

Layout of a .puz file:
- Header: fixed 0x34 bytes, dimensions and checksums (header_serializer)
- Body: solution, state, strings (body_serializer, strings_serializer)
- Extras: GEXT / GRBS / RTBL sections (extras_serializer)
"""

from .checksum import checksum
from .strings_serializer import build_strings, strings_checksum
from .checksum_aggregator import PuzChecksums, compute_checksums
from .cheat_checksum import cheat_checksum, write_cheat_checksum
from .header_serializer import build_header
from .body_serializer import build_body
from .extras_serializer import build_markup_section, build_rebus_sections, build_extras, rebus_tables
from .puz_writer import write_puz, write_puz_file
