"""
Platform Strategies
===================

Per-operating-system behaviour for installing fonts: where fonts live,
how a copied font is registered, and how the OS learns that fonts changed.
Every supported platform is one entry in ``PLATFORM_STRATEGIES``.
"""

import ctypes
import logging
import os
import platform
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..core.config import InstallerConfig
from ..core.exceptions import NotificationError, RegistrationError, UnsupportedPlatformError
from ..core.models import Platform
from .utils import get_registry_value_name

# Optional Windows dependency
try:
    import winreg
except ImportError:
    winreg = None

logger = logging.getLogger(__name__)

WM_FONTCHANGE = 0x001D
HWND_BROADCAST = 0xFFFF


@dataclass(frozen=True)
class PlatformStrategy:
    """Font handling hooks for one operating system."""

    fonts_dir: Callable[[], Path]
    register: Callable[[Path, InstallerConfig], None]
    notify: Callable[[InstallerConfig], None]
    requires_registration: bool = False


def detect_platform(system: str | None = None) -> Platform:
    """
    Map ``platform.system()`` onto a supported platform.

    Raises:
        UnsupportedPlatformError: If fonts cannot be installed on this OS
    """
    system = (system or platform.system()).lower()
    try:
        return Platform(system)
    except ValueError:
        raise UnsupportedPlatformError(system) from None


# Fonts directories


def _windows_fonts_dir() -> Path:
    return Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts"


def _macos_fonts_dir() -> Path:
    # System-wide location; ~/Library/Fonts would not need admin rights
    return Path("/Library/Fonts/")


def _linux_fonts_dir() -> Path:
    return Path("/usr/share/fonts/")


# Registration


def _register_windows_font(font_path: Path, config: InstallerConfig) -> None:
    """Record the font in the registry and load it into the GDI font table."""
    value_name = get_registry_value_name(font_path.name)
    errors = []

    if winreg is None:
        errors.append("Windows registry (winreg) not available")
    else:
        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE,
                config.windows_fonts_registry_key,
                0,
                winreg.KEY_SET_VALUE,
            ) as fonts_key:
                winreg.SetValueEx(fonts_key, value_name, 0, winreg.REG_SZ, font_path.name)
            logger.debug(f"Registered {value_name} -> {font_path.name}")
        except OSError as e:
            errors.append(f"registry write failed: {e}")

    try:
        gdi32 = ctypes.WinDLL("gdi32")
        if gdi32.AddFontResourceW(str(font_path)) == 0:
            errors.append("AddFontResourceW loaded no fonts")
    except (AttributeError, OSError) as e:
        errors.append(f"AddFontResourceW failed: {e}")

    if errors:
        raise RegistrationError(value_name, "; ".join(errors))


def _no_registration(font_path: Path, _config: InstallerConfig) -> None:
    # fontconfig and CoreText pick fonts up from the directory itself
    logger.debug(f"No registration needed for {font_path.name}")


# Notification


def _notify_windows(_config: InstallerConfig) -> None:
    try:
        user32 = ctypes.WinDLL("user32")
        user32.SendMessageW(HWND_BROADCAST, WM_FONTCHANGE, 0, 0)
    except (AttributeError, OSError) as e:
        raise NotificationError(str(e)) from e
    logger.info("Broadcast WM_FONTCHANGE")


def _notify_linux(config: InstallerConfig) -> None:
    fc_cache_path = shutil.which(config.fc_cache_command)
    if not fc_cache_path:
        raise NotificationError(f"{config.fc_cache_command} not found in PATH")

    try:
        subprocess.run(
            [fc_cache_path, *config.fc_cache_args],
            timeout=config.fc_cache_timeout,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise NotificationError(str(e)) from e
    logger.info("Refreshed fontconfig cache")


def _notify_macos(_config: InstallerConfig) -> None:
    # macOS watches the font directories itself
    logger.debug("macOS detects font changes automatically")


PLATFORM_STRATEGIES: dict[Platform, PlatformStrategy] = {
    Platform.WINDOWS: PlatformStrategy(
        fonts_dir=_windows_fonts_dir,
        register=_register_windows_font,
        notify=_notify_windows,
        requires_registration=True,
    ),
    Platform.MACOS: PlatformStrategy(
        fonts_dir=_macos_fonts_dir,
        register=_no_registration,
        notify=_notify_macos,
    ),
    Platform.LINUX: PlatformStrategy(
        fonts_dir=_linux_fonts_dir,
        register=_no_registration,
        notify=_notify_linux,
    ),
}


def get_strategy(target: Platform | None = None) -> PlatformStrategy:
    """Get the strategy for ``target``, detecting the running platform by default."""
    return PLATFORM_STRATEGIES[target or detect_platform()]


def get_system_fonts_directory(target: Platform | None = None) -> Path:
    """
    Get the default fonts directory of the platform.

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    return get_strategy(target).fonts_dir()
