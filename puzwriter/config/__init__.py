"""
Config Package

Writer configuration loaded from puzwriter.ini.
"""

from .writer_config import WriterConfig, load_config
