import json

import pytest

from config import WALLPAPER_PATHS, MailServerConfig, load_config, load_mail_config
from errors import ConfigError

SMTP = {"host": "smtp.example.com", "port": "587", "username": "bot@example.com", "password": "secret"}


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path
    return _write


def test_load_config_reads_smtp_section(write_config):
    config = load_config(write_config({"smtp_server": SMTP}))

    assert config.smtp_server == MailServerConfig(**SMTP)
    assert config.smtp_server.address == "smtp.example.com:587"
    assert config.wallpapers == WALLPAPER_PATHS


def test_load_config_reads_wallpaper_list(write_config):
    config = load_config(write_config({"smtp_server": SMTP, "wallpapers": ["a.png", "b.JPG"]}))
    assert config.wallpapers == ("a.png", "b.JPG")


def test_load_mail_config(write_config):
    assert load_mail_config(write_config({"smtp_server": SMTP})).host == "smtp.example.com"


def test_password_not_in_repr():
    assert "secret" not in repr(MailServerConfig(**SMTP))


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.json")


@pytest.mark.parametrize("data", [
    "{not json",
    [],
    {},
    {"smtp_server": "smtp.example.com"},
    {"smtp_server": {"host": "smtp.example.com", "port": "587"}},
    {"smtp_server": dict(SMTP, port=587)},
    {"smtp_server": dict(SMTP, port="smtp")},
    {"smtp_server": SMTP, "wallpapers": []},
    {"smtp_server": SMTP, "wallpapers": ["notes.txt"]},
])
def test_malformed_config_raises_config_error(write_config, data):
    with pytest.raises(ConfigError):
        load_config(write_config(data))
