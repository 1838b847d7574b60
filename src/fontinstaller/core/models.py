"""Pydantic models for type-safe data structures."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from .exceptions import AmbiguousRequestError, EmptyRequestError


class Platform(str, Enum):
    """Operating systems the installer knows how to install fonts on."""

    WINDOWS = "windows"
    MACOS = "darwin"
    LINUX = "linux"

    @property
    def display_name(self) -> str:
        return {
            Platform.WINDOWS: "Windows",
            Platform.MACOS: "macOS",
            Platform.LINUX: "Unix/Linux",
        }[self]


class InstallationRequest(BaseModel):
    """A single installer run: where fonts come from and where they go."""

    source_dir: Path | None = Field(None, description="Directory holding font files")
    embedded: bool = Field(False, description="Install fonts bundled with the installer")
    destination_dir: Path = Field(..., description="Directory fonts are copied into")

    @model_validator(mode="after")
    def check_single_source(self) -> "InstallationRequest":
        if self.embedded and self.source_dir is not None:
            raise AmbiguousRequestError()
        if not self.embedded and self.source_dir is None:
            raise EmptyRequestError()
        return self

    @classmethod
    def from_directory(cls, source_dir: Path, destination_dir: Path) -> "InstallationRequest":
        return cls(source_dir=source_dir, destination_dir=destination_dir)

    @classmethod
    def from_embedded(cls, destination_dir: Path) -> "InstallationRequest":
        return cls(embedded=True, destination_dir=destination_dir)
