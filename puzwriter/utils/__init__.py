# Writer utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, print_summary, get_counts
from .binary import concat_bytes, write_uint16_le, write_section
from .encoding import puz_encode, is_known_encoding
