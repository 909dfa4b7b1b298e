#!/usr/bin/env python3
"""
Writer Configuration

Parser for puzwriter.ini.

INI Format:
    [puz]
    encoding = latin-1
    validate = true

    [logging]
    log_file = puzwriter.log
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..constants import DEFAULT_ENCODING
from ..puzzle import ConfigError
from ..utils import logWarning, logDebug, is_known_encoding

TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off')


@dataclass
class WriterConfig:
    """Settings for a puzzle writing run"""
    encoding: str = DEFAULT_ENCODING  # Character set for puzzle text
    validate: bool = True  # Reject inconsistent puzzles before encoding
    log_file: Optional[Path] = None  # Console only when unset

    def __post_init__(self):
        """Validate configuration"""
        if not is_known_encoding(self.encoding):
            raise ConfigError(f"Unknown encoding: {self.encoding}")


def _parse_bool(value: str, key: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for '{key}': {value}")


def load_config(config_path: Optional[Path] = None) -> WriterConfig:
    """
    Load writer configuration.

    Args:
        config_path: Path to puzwriter.ini. Defaults are used when None or missing.

    Returns:
        WriterConfig
    """
    if config_path is None:
        return WriterConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        logWarning(f"Config file not found: {config_path}, using defaults")
        return WriterConfig()

    parser = configparser.ConfigParser()
    try:
        parser.read(config_path, encoding='utf-8')
    except configparser.Error as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    puz = parser['puz'] if parser.has_section('puz') else {}
    log_section = parser['logging'] if parser.has_section('logging') else {}

    log_file = log_section.get('log_file')
    if log_file:
        # Relative to the config file
        log_file = config_path.parent / log_file.strip()

    config = WriterConfig(
        encoding=puz.get('encoding', DEFAULT_ENCODING).strip(),
        validate=_parse_bool(puz.get('validate', 'true'), 'validate'),
        log_file=log_file or None,
    )
    logDebug(f"Loaded config {config_path}: {config}")
    return config
