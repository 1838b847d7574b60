"""
Pytest configuration and fixtures for font installer tests.
"""

import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from fontinstaller.core.config import InstallerConfig
from fontinstaller.core.models import Platform
from fontinstaller.fonts.installer import FontInstaller
from fontinstaller.fonts.locator import EmbeddedFontSource
from fontinstaller.fonts.platforms import PlatformStrategy


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def source_dir(temp_dir):
    """Directory fonts are installed from."""
    path = temp_dir / "source"
    path.mkdir()
    return path


@pytest.fixture
def destination_dir(temp_dir):
    """Directory fonts are installed into."""
    path = temp_dir / "destination"
    path.mkdir()
    return path


@pytest.fixture
def embedded_dir(temp_dir):
    """Stand-in for the installer's bundled font directory."""
    path = temp_dir / "embedded"
    path.mkdir()
    return path


@pytest.fixture
def make_file():
    """Create a file with dummy content and return its path."""

    def _make_file(directory: Path, name: str, content: str = "dummy font content") -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _make_file


@pytest.fixture
def installer_config(monkeypatch, temp_dir):
    """Installer configuration isolated from the caller's environment."""
    monkeypatch.setattr(tempfile, "tempdir", str(temp_dir))
    return InstallerConfig(_env_file=None)


@pytest.fixture
def mock_strategy():
    """Platform strategy whose OS hooks are mocks."""
    return PlatformStrategy(
        fonts_dir=Mock(return_value=Path("/fonts")),
        register=Mock(),
        notify=Mock(),
        requires_registration=True,
    )


@pytest.fixture
def installer(installer_config, embedded_dir, mock_strategy):
    """FontInstaller with mocked OS hooks and a temporary embedded font bundle."""
    font_installer = FontInstaller(
        installer_config,
        target=Platform.LINUX,
        embedded_source=EmbeddedFontSource(embedded_dir),
    )
    font_installer.strategy = mock_strategy
    return font_installer


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
