"""
Wallpaper Changer - Main Entry Point

A desktop application that verifies your email address, then lets you
browse a few bundled images and set one as your macOS desktop background.

Usage:
    python main.py
"""
import logging
import os
import sys
from pathlib import Path

# Ensure we're in the right directory for imports
sys.path.insert(0, str(Path(__file__).parent))

LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)

from gui.app import run_app


def main():
    run_app()


if __name__ == "__main__":
    main()
