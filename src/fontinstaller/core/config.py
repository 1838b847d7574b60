"""Configuration management for the font installer."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidFontExtensionError,
    InvalidYamlError,
)

DEFAULT_FONT_EXTENSIONS = [".ttf", ".otf", ".ttc"]
WINDOWS_FONTS_REGISTRY_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts"


class InstallerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTINSTALLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font installer configuration."""

    log_level: str = Field("INFO", description="Application log level")

    # Discovery
    font_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FONT_EXTENSIONS),
        description="File extensions treated as installable fonts",
    )
    embedded_fonts_dir: Path | None = Field(
        None, description="Override for the embedded font resource directory"
    )

    # Installation
    require_admin: bool = Field(True, description="Refuse to run without admin rights")
    temp_dir_prefix: str = Field(
        "FontInstaller_", description="Prefix for the embedded font extraction directory"
    )
    windows_fonts_registry_key: str = Field(
        WINDOWS_FONTS_REGISTRY_KEY, description="HKLM key holding registered fonts"
    )

    # Font cache refresh (Linux)
    fc_cache_command: str = Field("fc-cache", description="Font cache refresh utility")
    fc_cache_args: list[str] = Field(
        default_factory=lambda: ["-fv"], description="Arguments for the refresh utility"
    )
    fc_cache_timeout: float | None = Field(
        None, gt=0.0, description="Seconds to wait for the refresh utility (None waits forever)"
    )

    @field_validator("font_extensions")
    @classmethod
    def normalize_font_extensions(cls, v):
        """Lower-case extensions and make sure each carries its leading dot."""
        normalized = []
        for extension in v:
            if not extension.startswith("."):
                raise InvalidFontExtensionError(extension)
            normalized.append(extension.lower())
        return normalized

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # YAML-based configs should not also pick up a stray .env file
        if issubclass(config_class, BaseSettings):

            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path:
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [InstallerConfig]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
