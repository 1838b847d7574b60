"""Font Installation Module
========================

Locating, copying, registering and announcing font files per platform.
"""

from .installer import FontInstaller
from .locator import EmbeddedFontSource, get_embedded_fonts_dir, locate_font_files
from .models import FontFile, InstallReport
from .platforms import PLATFORM_STRATEGIES, detect_platform, get_system_fonts_directory
from .privileges import is_administrator
from .utils import get_font_name_from_file_name, get_registry_value_name, is_font_file

__all__ = [
    "PLATFORM_STRATEGIES",
    "EmbeddedFontSource",
    "FontFile",
    "FontInstaller",
    "InstallReport",
    "detect_platform",
    "get_embedded_fonts_dir",
    "get_font_name_from_file_name",
    "get_registry_value_name",
    "get_system_fonts_directory",
    "is_administrator",
    "is_font_file",
    "locate_font_files",
]
