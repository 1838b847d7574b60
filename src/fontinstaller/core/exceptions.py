"""Custom exceptions for the font installer."""

from typing import Any


class FontInstallerError(Exception):
    """Base exception for all font installer errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(FontInstallerError):
    """Exception raised for input validation errors."""


class InstallationError(FontInstallerError):
    """Exception raised while copying fonts into place."""


class ConfigurationError(FontInstallerError):
    """Exception raised for configuration errors."""


class BestEffortError(FontInstallerError):
    """Exception raised by steps whose failure never aborts an install."""


class RegistrationError(BestEffortError):
    """Exception raised when a font cannot be registered with the OS."""

    def __init__(self, font_name: str, error: str):
        super().__init__(f"Failed to register font {font_name}: {error}")


class NotificationError(BestEffortError):
    """Exception raised when the OS cannot be notified of font changes."""

    def __init__(self, error: str):
        super().__init__(f"Failed to notify system of font changes: {error}")


class MissingSourceDirectoryError(ValidationError):
    """Exception raised when the font source directory does not exist."""

    def __init__(self, directory: str):
        super().__init__(f"Source directory does not exist: {directory}")


class MissingDestinationDirectoryError(ValidationError):
    """Exception raised when the destination directory does not exist."""

    def __init__(self, directory: str):
        super().__init__(f"Destination directory does not exist: {directory}")


class MissingFontFileError(ValidationError):
    """Exception raised when a font file to install does not exist."""

    def __init__(self, file_path: str):
        super().__init__(f"Font file does not exist: {file_path}")


class NoFontFilesFoundError(ValidationError):
    """Exception raised when a source directory holds no font files."""

    def __init__(self, directory: str):
        super().__init__("No font files found in the source directory.", details=directory)


class NoEmbeddedFontsFoundError(ValidationError):
    """Exception raised when the installer ships without embedded fonts."""

    def __init__(self):
        super().__init__("No embedded font resources found in the application.")


class DuplicateEmbeddedFontError(ValidationError):
    """Exception raised when embedded fonts would be extracted under the same file name."""

    def __init__(self, resource_names: list[str]):
        super().__init__(
            f"Embedded fonts share a file name: {', '.join(resource_names)}",
            details="Each bundled font must have a unique file name.",
        )


class UnsupportedPlatformError(FontInstallerError):
    """Exception raised on an operating system we cannot install fonts on."""

    def __init__(self, system: str):
        super().__init__(
            "Unsupported operating system for font installation.", details=system
        )


class UnauthorizedAccessError(InstallationError):
    """Exception raised when copying a font is denied by the OS."""

    def __init__(self, destination: str, error: str):
        super().__init__(f"Access denied while copying font to {destination}: {error}")


class FontCopyError(InstallationError):
    """Exception raised when copying a font fails for any other reason."""

    def __init__(self, source: str, destination: str, error: str):
        super().__init__(f"Failed to copy {source} to {destination}: {error}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidFontExtensionError(ValueError):
    """Exception raised for malformed font extensions in configuration."""

    def __init__(self, extension: str):
        super().__init__(f"Font extension must start with '.': {extension}")


class AmbiguousRequestError(ValueError):
    """Exception raised when a request names both a source and embedded fonts."""

    def __init__(self):
        super().__init__("Specify either a source directory or embedded fonts, not both")


class EmptyRequestError(ValueError):
    """Exception raised when a request names neither a source nor embedded fonts."""

    def __init__(self):
        super().__init__("Specify a source directory or embedded fonts")
