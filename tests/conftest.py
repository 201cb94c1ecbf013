"""
Global fixtures live here

This tells pytest how to prepare Directories for tests without touching the
real home directory.
"""
import pytest
from pathlib import Path

from parity_dir.core.directories import Directories
from parity_dir.core.platforms import UNIX, WINDOWS


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """A throwaway home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def unix_dirs(tmp_path: Path) -> Directories:
    """
    Directories with the Unix profile, rooted in tmp_path
    """
    data_path = str(tmp_path / "data")
    return Directories.default(data_path=data_path, local_path=data_path, platform=UNIX)


@pytest.fixture
def windows_dirs(tmp_path: Path) -> Directories:
    """
    Directories with the Windows profile, data and local roots kept apart
    """
    return Directories.default(
        data_path=str(tmp_path / "roaming"),
        local_path=str(tmp_path / "local"),
        platform=WINDOWS,
    )
