"""Font Installer
==============

Installs font files into the operating system's fonts directory, registers
them where the OS requires it (Windows registry) and notifies the OS that
its fonts changed. Fonts come from a directory or are bundled with the
installer.
"""

__version__ = "1.0.0"
__author__ = "Font Installer Team"

from .core.config import InstallerConfig
from .core.exceptions import FontInstallerError
from .core.models import InstallationRequest, Platform
from .fonts import FontFile, FontInstaller, InstallReport

__all__ = [
    "FontFile",
    "FontInstaller",
    "FontInstallerError",
    "InstallReport",
    "InstallationRequest",
    "InstallerConfig",
    "Platform",
]
