"""
Error types raised by the Wallpaper Changer leaves and caught by the UI flow
"""


class WallpaperChangerError(Exception):
    """Base class for all application errors"""


class ValidationError(WallpaperChangerError):
    """Sign-up form input was rejected"""


class NotifyError(WallpaperChangerError):
    """The verification email could not be sent"""


class ConfigError(NotifyError):
    """Configuration file is missing or malformed"""


class TransportError(NotifyError):
    """The mail relay refused the message or could not be reached"""


class WallpaperError(WallpaperChangerError):
    """The desktop background could not be changed"""
