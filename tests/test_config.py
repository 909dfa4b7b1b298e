import pytest

from puzwriter import ConfigError
from puzwriter.config import WriterConfig, load_config


def test_defaults():
    config = load_config(None)
    assert config.encoding == "latin-1"
    assert config.validate is True
    assert config.log_file is None


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "nope.ini") == WriterConfig()


def test_load_ini(tmp_path):
    path = tmp_path / "puzwriter.ini"
    path.write_text(
        "[puz]\n"
        "encoding = cp1252\n"
        "validate = no\n"
        "\n"
        "[logging]\n"
        "log_file = logs/run.log\n"
    )
    config = load_config(path)
    assert config.encoding == "cp1252"
    assert config.validate is False
    assert config.log_file == tmp_path / "logs" / "run.log"


def test_unknown_encoding(tmp_path):
    path = tmp_path / "puzwriter.ini"
    path.write_text("[puz]\nencoding = klingon\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_bad_boolean(tmp_path):
    path = tmp_path / "puzwriter.ini"
    path.write_text("[puz]\nvalidate = maybe\n")
    with pytest.raises(ConfigError):
        load_config(path)
