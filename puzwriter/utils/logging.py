"""
Unified logging for the writer.

Console output for the command line, plus an optional log file that also
receives debug records. Warnings and errors are counted for an end-of-run
summary.

Usage:
    from puzwriter.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    init_logging(Path("puzwriter.log"))    # file is optional

    log("Writing crossword.puz...")        # Info
    logWarning("config file not found")    # Output may not be what the user expects
    logError("puzzle failed validation")   # No output produced
    logDebug("GEXT: 225 bytes")            # Log file only

    print_summary()
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_log_file = None
_log_path: Optional[Path] = None
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Optional[Path] = None):
    """
    Reset warning/error tracking and optionally open a log file.

    Args:
        log_path: Path to log file. Console only when None.
    """
    global _log_file, _log_path, _warnings, _errors

    close_logging()
    _warnings = []
    _errors = []

    if log_path is None:
        return

    _log_path = Path(log_path)
    try:
        _log_path.parent.mkdir(parents=True, exist_ok=True)
        _log_file = open(_log_path, 'w', encoding='utf-8')
    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None
        return

    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    _log_file.write(f"Run started: {timestamp}\n")
    _log_file.write("=" * 70 + "\n\n")
    _log_file.flush()

    atexit.register(close_logging)


def close_logging():
    """Close the log file, if one is open."""
    global _log_file, _log_path

    if _log_file is not None:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"\n{'=' * 70}\n")
        _log_file.write(f"Run finished: {timestamp}\n")
        _log_file.close()
        _log_file = None
    _log_path = None


def print_summary():
    """Print warning and error counts, with details, at the end of a run."""
    if _errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")

    if _warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")

    errors = f"{len(_errors)} Error(s)" if _errors else "0 Errors"
    warnings = f"{len(_warnings)} Warning(s)" if _warnings else "0 Warnings"
    error_color = Colors.RED + Colors.BOLD if _errors else Colors.GREEN
    warning_color = Colors.YELLOW + Colors.BOLD if _warnings else Colors.GREEN
    print(f"{error_color}{errors}{Colors.RESET} | {warning_color}{warnings}{Colors.RESET}")

    _write_to_file(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)")


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    return len(_errors), len(_warnings)


def _write_to_file(msg: str, end: str = "\n"):
    if _log_file is not None:
        _log_file.write(msg + end)
        _log_file.flush()


def log(msg: str = "", end: str = "\n"):
    """Log an info message to the console and the log file."""
    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning. Displayed in yellow and counted for the summary.
    """
    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error. Displayed in red on stderr and counted for the summary.
    """
    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """Log a debug message. Only written to the log file."""
    _write_to_file(f"[DEBUG] {msg}", end)
