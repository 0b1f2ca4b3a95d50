"""
Wallpaper catalog browsing and applying
"""
import logging
import os
from pathlib import Path
from typing import Sequence

from errors import WallpaperError
from wallpaper_setter import WallpaperBackend

logger = logging.getLogger(__name__)


class WallpaperController:
    """Fixed list of wallpapers with a wrap-around cursor"""

    def __init__(self, catalog: Sequence[str], backend: WallpaperBackend):
        if not catalog:
            raise ValueError("Wallpaper catalog must not be empty")

        self.catalog = tuple(catalog)
        self.backend = backend
        self.cursor = 0

    def reset(self):
        self.cursor = 0

    def current(self) -> str:
        return self.catalog[self.cursor]

    def next(self) -> str:
        self.cursor = (self.cursor + 1) % len(self.catalog)
        return self.current()

    def previous(self) -> str:
        self.cursor = (self.cursor - 1 + len(self.catalog)) % len(self.catalog)
        return self.current()

    @staticmethod
    def resolve(path: str) -> Path:
        """Absolute location of a catalog entry, relative to the working directory"""
        try:
            return Path(os.getcwd()) / path
        except OSError as e:
            raise WallpaperError(f"Could not resolve {path}: {e}") from e

    def commit(self, path: str) -> None:
        """
        Apply an image as the desktop background

        Raises:
            WallpaperError: path could not be resolved, file is missing,
                or the platform call failed
        """
        try:
            abs_path = self.resolve(path)
            if not abs_path.exists():
                raise WallpaperError(f"Wallpaper file not found: {abs_path}")
            self.backend.set_wallpaper(str(abs_path))
        except WallpaperError as e:
            logger.error("Error setting wallpaper: %s", e)
            raise

        logger.info("Wallpaper set to %s", abs_path)
