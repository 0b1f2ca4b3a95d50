"""
Configuration settings for Wallpaper Changer
"""
import os
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from errors import ConfigError

# Base paths
APP_DIR = Path(__file__).parent.absolute()

load_dotenv(APP_DIR / ".env")

CONFIG_FILE = Path(os.getenv("WALLPAPER_CHANGER_CONFIG", APP_DIR / "config.json"))

# Bundled wallpapers, resolved against the working directory
WALLPAPER_PATHS = ("assets/001.jpg", "assets/002.jpeg")

# Supported image formats
SUPPORTED_FORMATS = ('.png', '.jpg', '.jpeg', '.bmp', '.webp')

# Window and preview sizes
WINDOW_TITLE = "Wallpaper Changer"
WINDOW_SIZE = (1000, 800)
PREVIEW_SIZE = (400, 400)

# Verification email
EMAIL_SUBJECT = "Wallpaper Changer Email Verification!"
EMAIL_BODY = "This is your unique verification code for Wallpaper Changer app. Code: {code}"

SMTP_FIELDS = ("host", "port", "username", "password")


@dataclass(frozen=True)
class MailServerConfig:
    host: str
    port: str
    username: str
    password: str

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def __repr__(self):
        return f"MailServerConfig(host={self.host!r}, port={self.port!r}, username={self.username!r})"


@dataclass(frozen=True)
class AppConfig:
    smtp_server: MailServerConfig
    wallpapers: Tuple[str, ...] = WALLPAPER_PATHS


def _parse_smtp(raw) -> MailServerConfig:
    if not isinstance(raw, dict):
        raise ConfigError("'smtp_server' must be an object")

    missing = [field for field in SMTP_FIELDS if field not in raw]
    if missing:
        raise ConfigError(f"'smtp_server' is missing: {', '.join(missing)}")

    for field in SMTP_FIELDS:
        if not isinstance(raw[field], str):
            raise ConfigError(f"'smtp_server.{field}' must be a string")

    if not raw["port"].isdigit():
        raise ConfigError(f"'smtp_server.port' is not a number: {raw['port']!r}")

    return MailServerConfig(**{field: raw[field] for field in SMTP_FIELDS})


def _parse_wallpapers(raw) -> Tuple[str, ...]:
    if raw is None:
        return WALLPAPER_PATHS

    if not isinstance(raw, list) or not raw:
        raise ConfigError("'wallpapers' must be a non-empty list of paths")

    for path in raw:
        if not isinstance(path, str) or not path.lower().endswith(SUPPORTED_FORMATS):
            raise ConfigError(f"Unsupported wallpaper entry: {path!r}")

    return tuple(raw)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Load the application configuration from a JSON file

    Args:
        path: Config file location, defaults to CONFIG_FILE

    Raises:
        ConfigError: file unreadable, not JSON, or missing required fields
    """
    path = Path(path) if path else CONFIG_FILE

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e

    if not isinstance(data, dict) or "smtp_server" not in data:
        raise ConfigError(f"Config {path} has no 'smtp_server' section")

    return AppConfig(
        smtp_server=_parse_smtp(data["smtp_server"]),
        wallpapers=_parse_wallpapers(data.get("wallpapers")),
    )


def load_mail_config(path: Optional[Path] = None) -> MailServerConfig:
    """Load only the SMTP section of the configuration"""
    return load_config(path).smtp_server
