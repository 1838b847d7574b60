"""
Font Locator
============

Finds the font files an installation run works on, either in a source
directory or among the fonts bundled with the installer itself.
"""

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from ..core.exceptions import (
    MissingSourceDirectoryError,
    NoEmbeddedFontsFoundError,
    NoFontFilesFoundError,
)
from .models import FontFile
from .utils import is_font_file

logger = logging.getLogger(__name__)


def locate_font_files(source_dir: Path, extensions: Iterable[str] | None = None) -> list[FontFile]:
    """
    List the font files directly inside a directory.

    Args:
        source_dir: Directory to scan (not recursive)
        extensions: Accepted extensions, defaults to .ttf/.otf/.ttc

    Returns:
        Font files sorted by name

    Raises:
        MissingSourceDirectoryError: If ``source_dir`` is not a directory
        NoFontFilesFoundError: If no file matches, including an empty directory
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise MissingSourceDirectoryError(str(source_dir))

    font_files = [
        FontFile(path)
        for path in sorted(source_dir.iterdir())
        if path.is_file() and is_font_file(path, extensions)
    ]

    if not font_files:
        raise NoFontFilesFoundError(str(source_dir))

    logger.debug(f"Found {len(font_files)} font files in {source_dir}")
    return font_files


def get_embedded_fonts_dir() -> Path:
    """Get the embedded fonts directory, handling frozen builds vs an installed package."""
    if getattr(sys, "frozen", False):
        # Running as bundled app (PyInstaller)
        return Path(sys._MEIPASS) / "fontinstaller" / "embedded"
    return Path(__file__).parent.parent / "embedded"


class EmbeddedFontSource:
    """
    Read-only view of the fonts bundled with the installer.

    Resources are addressed by their path relative to the bundle root,
    e.g. ``Fonts/Inter-Regular.ttf``.
    """

    def __init__(self, root: Path | None = None, extensions: Iterable[str] | None = None):
        self.root = Path(root) if root else get_embedded_fonts_dir()
        self.extensions = list(extensions) if extensions is not None else None

    def resource_names(self) -> list[str]:
        """List bundled font resources."""
        if not self.root.is_dir():
            logger.debug(f"Embedded fonts directory missing: {self.root}")
            return []

        return sorted(
            path.relative_to(self.root).as_posix()
            for path in self.root.rglob("*")
            if path.is_file() and is_font_file(path, self.extensions)
        )

    def read_bytes(self, resource_name: str) -> bytes:
        return (self.root / resource_name).read_bytes()

    def require_resources(self) -> list[str]:
        """
        List bundled font resources, failing when there are none.

        Raises:
            NoEmbeddedFontsFoundError: If the installer ships no fonts
        """
        names = self.resource_names()
        if not names:
            raise NoEmbeddedFontsFoundError()
        return names
