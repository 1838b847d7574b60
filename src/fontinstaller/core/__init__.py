"""Core components for the font installer."""

from .config import InstallerConfig
from .exceptions import (
    ConfigurationError,
    FontInstallerError,
    InstallationError,
    ValidationError,
)
from .models import InstallationRequest, Platform

__all__ = [
    "ConfigurationError",
    "FontInstallerError",
    "InstallationError",
    "InstallationRequest",
    "InstallerConfig",
    "Platform",
    "ValidationError",
]
