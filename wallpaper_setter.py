"""
macOS Wallpaper Setter - Sets desktop wallpaper using AppleScript
"""
import logging
import subprocess
from abc import ABC, abstractmethod

from errors import WallpaperError

logger = logging.getLogger(__name__)

APPLESCRIPT_TEMPLATE = '''
set wallpaperImage to "{path}"
tell application "System Events"
    set picture of every desktop to wallpaperImage
end tell
'''


class WallpaperBackend(ABC):
    """Platform mechanism that applies an image as the desktop background"""

    @abstractmethod
    def set_wallpaper(self, image_path: str) -> None:
        """
        Set the desktop wallpaper

        Args:
            image_path: Absolute path to the image file

        Raises:
            WallpaperError: the platform call failed
        """


class AppleScriptBackend(WallpaperBackend):
    """Sets the picture of every attached display through System Events"""

    def __init__(self, osascript: str = "osascript"):
        self.osascript = osascript

    def build_script(self, image_path: str) -> str:
        escaped = image_path.replace("\\", "\\\\").replace('"', '\\"')
        return APPLESCRIPT_TEMPLATE.format(path=escaped)

    def set_wallpaper(self, image_path: str) -> None:
        script = self.build_script(image_path)
        logger.debug("AppleScript command: %s", script)

        try:
            result = subprocess.run(
                [self.osascript, "-e", script],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise WallpaperError(f"Could not run {self.osascript}: {e}") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise WallpaperError(f"osascript failed: {detail}")


def default_backend() -> WallpaperBackend:
    return AppleScriptBackend()
