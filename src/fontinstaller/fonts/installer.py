"""
Font Installer
==============

Copies font files into a fonts directory, registers them where the OS
requires it and tells the OS that its fonts changed.
"""

import logging
import shutil
import tempfile
from collections import defaultdict
from pathlib import Path

from ..core.config import InstallerConfig
from ..core.exceptions import (
    BestEffortError,
    DuplicateEmbeddedFontError,
    FontCopyError,
    MissingDestinationDirectoryError,
    MissingFontFileError,
    UnauthorizedAccessError,
)
from ..core.models import InstallationRequest, Platform
from .locator import EmbeddedFontSource, locate_font_files
from .models import FontFile, InstallReport
from .platforms import PLATFORM_STRATEGIES, detect_platform
from .privileges import is_administrator
from .utils import get_font_name_from_file_name, strip_resource_prefix

logger = logging.getLogger(__name__)


class FontInstaller:
    """
    Installs fonts on the running (or a given) platform.

    All platform specific work goes through the strategy table in
    ``platforms``; this class only sequences the steps. Registration and
    notification are best effort: their failures are logged and collected on
    the returned report, never raised.
    """

    def __init__(
        self,
        config: InstallerConfig | None = None,
        target: Platform | None = None,
        embedded_source: EmbeddedFontSource | None = None,
    ):
        """
        Initialize font installer.

        Args:
            config: Installer configuration, defaults to env/.env settings
            target: Platform to install for, detected when omitted
            embedded_source: Bundled fonts, defaults to the installer's own

        Raises:
            UnsupportedPlatformError: If the platform is not supported
        """
        self.config = config or InstallerConfig()
        self.platform = target or detect_platform()
        self.strategy = PLATFORM_STRATEGIES[self.platform]
        self.embedded_source = embedded_source or EmbeddedFontSource(
            self.config.embedded_fonts_dir, self.config.font_extensions
        )

        logger.debug(f"FontInstaller initialized for {self.platform.display_name}")

    def is_administrator(self) -> bool:
        return is_administrator(self.platform.value)

    def get_system_fonts_directory(self) -> Path:
        return self.strategy.fonts_dir()

    def get_font_name_from_file_name(self, file_name: str) -> str:
        return get_font_name_from_file_name(file_name)

    def install(self, request: InstallationRequest) -> InstallReport:
        """Run an installation request in whichever mode it asks for."""
        if request.embedded:
            return self.install_embedded_fonts(request.destination_dir)
        return self.install_fonts(request.source_dir, request.destination_dir)

    def install_fonts(self, source_dir: Path, destination_dir: Path) -> InstallReport:
        """
        Install every font file found in a directory.

        Any copy error aborts the remaining fonts. The OS is notified once,
        after the last font.

        Raises:
            MissingSourceDirectoryError: If ``source_dir`` does not exist
            NoFontFilesFoundError: If ``source_dir`` holds no font files
        """
        font_files = locate_font_files(source_dir, self.config.font_extensions)
        logger.info(f"Installing {len(font_files)} fonts from {source_dir}")

        report = InstallReport(destination_dir=Path(destination_dir))
        for font_file in font_files:
            report.merge(self.install_single_font(font_file.path, destination_dir))

        self.notify_font_change(report)
        return report

    def install_embedded_fonts(self, destination_dir: Path) -> InstallReport:
        """
        Install the fonts bundled with the installer.

        Each resource is extracted into a private temporary directory which is
        removed afterwards, whether or not the installation succeeded.

        Raises:
            NoEmbeddedFontsFoundError: If the installer ships no fonts
            DuplicateEmbeddedFontError: If two resources extract to the same file name
        """
        resource_names = self.embedded_source.require_resources()
        file_names = self._extracted_file_names(resource_names)
        logger.info(f"Installing {len(resource_names)} embedded fonts")

        report = InstallReport(destination_dir=Path(destination_dir))
        temp_dir = Path(tempfile.mkdtemp(prefix=self.config.temp_dir_prefix))
        try:
            for resource_name in resource_names:
                temp_font_path = temp_dir / file_names[resource_name]
                temp_font_path.write_bytes(self.embedded_source.read_bytes(resource_name))
                report.merge(self.install_single_font(temp_font_path, destination_dir))

            self.notify_font_change(report)
        finally:
            self._cleanup_temp_dir(temp_dir)

        return report

    def install_single_font(self, font_file_path: Path, destination_dir: Path) -> InstallReport:
        """
        Install one font file.

        The file is copied only when nothing of the same name exists at the
        destination; an existing file is never overwritten.

        Args:
            font_file_path: Font file to install
            destination_dir: Fonts directory to copy into

        Returns:
            Report for this single font

        Raises:
            MissingFontFileError: If the font file does not exist
            MissingDestinationDirectoryError: If the destination does not exist
            UnauthorizedAccessError: If the OS denies the copy
        """
        font_file = FontFile(Path(font_file_path))
        destination_dir = Path(destination_dir)

        if not font_file.path.is_file():
            raise MissingFontFileError(str(font_file.path))
        if not destination_dir.is_dir():
            raise MissingDestinationDirectoryError(str(destination_dir))

        report = InstallReport(destination_dir=destination_dir)
        destination_path = destination_dir / font_file.filename

        if destination_path.exists():
            logger.info(f"Skipping {font_file.filename}: already present in {destination_dir}")
            report.skipped.append(font_file.filename)
        else:
            self._copy_font(font_file.path, destination_path)
            logger.info(f"Installed {font_file}")
            report.installed.append(font_file.filename)

        if self.strategy.requires_registration:
            self.register_font(destination_path, report)

        return report

    def register_font(self, font_path: Path, report: InstallReport | None = None) -> None:
        """Register an installed font with the OS, logging instead of raising on failure."""
        try:
            self.strategy.register(Path(font_path), self.config)
        except BestEffortError as e:
            logger.warning(str(e))
            if report is not None:
                report.warnings.append(str(e))

    def notify_font_change(self, report: InstallReport | None = None) -> None:
        """Tell the OS that fonts changed, logging instead of raising on failure."""
        try:
            self.strategy.notify(self.config)
        except BestEffortError as e:
            logger.warning(f"{e} (fonts are still usable after the next login)")
            if report is not None:
                report.warnings.append(str(e))

    def _copy_font(self, source: Path, destination: Path) -> None:
        try:
            shutil.copy2(source, destination)
        except PermissionError as e:
            raise UnauthorizedAccessError(str(destination), str(e)) from e
        except OSError as e:
            raise FontCopyError(str(source), str(destination), str(e)) from e

    @staticmethod
    def _extracted_file_names(resource_names: list[str]) -> dict[str, str]:
        """Map each resource to its extracted file name, rejecting collisions."""
        by_file_name = defaultdict(list)
        for resource_name in resource_names:
            by_file_name[strip_resource_prefix(resource_name)].append(resource_name)

        duplicates = [
            name for names in by_file_name.values() if len(names) > 1 for name in names
        ]
        if duplicates:
            raise DuplicateEmbeddedFontError(duplicates)

        return {
            names[0]: file_name for file_name, names in by_file_name.items()
        }

    def _cleanup_temp_dir(self, temp_dir: Path) -> None:
        try:
            shutil.rmtree(temp_dir)
        except OSError as e:
            # Files may still be locked by the OS font loader
            logger.warning(f"Failed to remove temporary directory {temp_dir}: {e}")
