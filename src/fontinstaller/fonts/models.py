"""
Font data models and types.
"""

from dataclasses import dataclass, field
from pathlib import Path

from .utils import get_font_name_from_file_name, get_registry_value_name


@dataclass
class FontFile:
    """A font file on disk waiting to be installed."""

    path: Path

    @property
    def filename(self) -> str:
        """Get the font filename."""
        return self.path.name

    @property
    def extension(self) -> str:
        """Get the font file extension."""
        return self.path.suffix.lower()

    @property
    def display_name(self) -> str:
        return get_font_name_from_file_name(self.filename)

    @property
    def registry_value_name(self) -> str:
        return get_registry_value_name(self.filename)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.filename})"


@dataclass
class InstallReport:
    """Outcome of an installation run."""

    destination_dir: Path
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def total_fonts(self) -> int:
        return len(self.installed) + len(self.skipped)

    def merge(self, other: "InstallReport") -> None:
        """Fold a single-font report into this one."""
        self.installed.extend(other.installed)
        self.skipped.extend(other.skipped)
        self.warnings.extend(other.warnings)

    def summary(self) -> str:
        return (
            f"{len(self.installed)} installed, {len(self.skipped)} already present, "
            f"{len(self.warnings)} warnings"
        )
