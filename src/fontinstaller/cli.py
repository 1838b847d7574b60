"""
Font Installer CLI
==================

Installs fonts from a directory, or the fonts bundled with the installer,
into the system fonts directory (or any directory given).

    fontinstaller                              # embedded fonts -> system fonts dir
    fontinstaller --embedded [DEST]            # embedded fonts -> DEST
    fontinstaller SOURCE_DIR [DEST]            # fonts from SOURCE_DIR -> DEST
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError as PydanticValidationError

from .core.config import InstallerConfig
from .core.exceptions import ConfigurationError, FontInstallerError
from .core.models import InstallationRequest, Platform
from .fonts.installer import FontInstaller

logger = logging.getLogger(__name__)

USAGE = """
Usage:
  fontinstaller [source_directory] [destination_directory]
  fontinstaller --embedded [destination_directory]
  If no arguments provided, installs embedded fonts to system Fonts directory"""


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def load_config(config_path: Path | None) -> InstallerConfig:
    try:
        return InstallerConfig.from_env_and_yaml(yaml_path=config_path)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def resolve_request(
    installer: FontInstaller, paths: tuple[Path, ...], embedded: bool
) -> InstallationRequest:
    """Turn the positional arguments into an installation request."""
    if embedded or not paths:
        destination = paths[0] if paths else installer.get_system_fonts_directory()
        return InstallationRequest.from_embedded(destination)

    destination = paths[1] if len(paths) > 1 else installer.get_system_fonts_directory()
    return InstallationRequest.from_directory(paths[0], destination)


def run_installer(
    paths: tuple[Path, ...],
    embedded: bool = False,
    config: InstallerConfig | None = None,
    require_admin: bool = True,
) -> bool:
    """
    Run one installation and print its progress.

    Returns:
        True when the fonts were installed, False on any failure
    """
    config = config or InstallerConfig()

    try:
        installer = FontInstaller(config)
    except FontInstallerError as e:
        click.echo(f"ERROR: {e}")
        return False

    click.echo(f"Font Installer for {installer.platform.display_name}")
    click.echo("================================")

    if require_admin and config.require_admin and not installer.is_administrator():
        click.echo("ERROR: This application requires administrator privileges.")
        if installer.platform is Platform.WINDOWS:
            click.echo("Please run as Administrator.")
        else:
            click.echo("Please run with sudo.")
        return False

    request = resolve_request(installer, paths, embedded)

    if not request.embedded and not request.source_dir.is_dir():
        click.echo(f"ERROR: Source directory does not exist: {request.source_dir}")
        click.echo(USAGE)
        return False

    if not request.destination_dir.is_dir():
        click.echo(f"ERROR: Destination directory does not exist: {request.destination_dir}")
        return False

    try:
        if request.embedded:
            click.echo(f"Installing embedded fonts to: {request.destination_dir}")
        else:
            click.echo(f"Installing fonts from: {request.source_dir}")
            click.echo(f"Installing to: {request.destination_dir}")

        report = installer.install(request)
    except FontInstallerError as e:
        logger.debug("Font installation failed", exc_info=True)
        click.echo(f"\nERROR: {e}")
        return False
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.echo(f"\nERROR: {e}")
        return False

    click.echo("\nFont installation completed successfully!")
    click.echo(f"Fonts: {report.summary()}")
    for warning in report.warnings:
        click.echo(f"WARNING: {warning}")
    return True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--embedded", is_flag=True, help="Install the fonts bundled with the installer")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration YAML file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--pause/--no-pause", default=False, help="Wait for a key press before exiting")
@click.option(
    "--skip-admin-check",
    is_flag=True,
    help="Do not require administrator privileges (for user-writable destinations)",
)
def cli(paths, embedded, config, verbose, pause, skip_admin_check):
    """Install fonts into the system fonts directory."""
    max_paths = 1 if embedded else 2
    if len(paths) > max_paths:
        raise click.UsageError(f"Expected at most {max_paths} path arguments, got {len(paths)}")

    try:
        installer_config = load_config(config)
    except ConfigurationError as e:
        click.echo(f"ERROR: {e}")
        succeeded = False
    else:
        setup_logging("DEBUG" if verbose else installer_config.log_level)
        succeeded = run_installer(
            paths,
            embedded=embedded,
            config=installer_config,
            require_admin=not skip_admin_check,
        )

    if pause:
        click.pause("\nPress any key to exit...")

    if not succeeded:
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
