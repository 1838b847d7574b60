"""
Font Utilities
==============

Filename helpers shared by the locator and the installer.
"""

from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from ..core.config import DEFAULT_FONT_EXTENSIONS

# Extensions Windows registers with the " (TrueType)" suffix
TRUETYPE_EXTENSIONS = {".ttf", ".ttc", ".otf"}


def get_font_name_from_file_name(file_name: str) -> str:
    """
    Derive a display name from a font file name.

    The extension is dropped and hyphens/underscores become spaces, so
    ``My-Font_Bold.otf`` reads ``My Font Bold``. Dots inside the stem are kept.

    Args:
        file_name: Font file name (a full path is accepted too)

    Returns:
        Human readable font name
    """
    stem = Path(file_name).stem
    return stem.replace("-", " ").replace("_", " ")


def get_registry_value_name(file_name: str) -> str:
    """Get the name Windows lists a font under in the registry."""
    name = get_font_name_from_file_name(file_name)
    if Path(file_name).suffix.lower() in TRUETYPE_EXTENSIONS:
        name += " (TrueType)"
    return name


def is_font_file(path: str | Path, extensions: Iterable[str] | None = None) -> bool:
    """Check whether a path carries an installable font extension (case-insensitive)."""
    if extensions is None:
        extensions = DEFAULT_FONT_EXTENSIONS
    allowed = {ext.lower() for ext in extensions}
    return Path(path).suffix.lower() in allowed


def strip_resource_prefix(resource_name: str) -> str:
    """Turn an embedded resource name into the file name it is extracted as."""
    return PurePosixPath(resource_name.replace("\\", "/")).name
