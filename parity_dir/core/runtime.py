"""
Startup assembly of Parity's Directories.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from parity_dir.core import paths
from parity_dir.core.directories import Directories
from parity_dir.core.helpers import HOME_TOKEN
from parity_dir.core.platforms import PLATFORM, PlatformPaths
from parity_dir.core.settings import load_settings

BASE_PATH_ENV = "PARITY_BASE_PATH"


def default_settings_dir(platform: PlatformPaths | None = None) -> Path:
    """Get the default settings directory for Parity."""
    platform = platform or PLATFORM
    return Path(user_config_dir(platform.product, platform.author)).expanduser()


def build_directories(
    *,
    base_path: str | None = None,
    settings_dir: Path | None = None,
    verbose: bool = False,
    home: str | os.PathLike | None = None,
    platform: PlatformPaths | None = None,
) -> Directories:
    """
    Builds the Directories for this process. Does not touch the filesystem
    beyond reading settings; call `create_dirs` on the result for that.

    Base path precedence: `base_path` argument, $PARITY_BASE_PATH, the
    `base_path` setting, then the OS default. An explicit base path also
    stands in for the machine-local root, and a leading `~` in it is expanded.
    """
    platform = platform or PLATFORM
    # 1. Logging
    logger = logging.getLogger("parity_dir")
    if not logging.getLogger().hasHandlers():
        # leave the host application's logging alone
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    # 2. Settings
    settings_dir = settings_dir if settings_dir is not None else default_settings_dir(platform)
    settings = load_settings(settings_dir)
    logger.setLevel(logging.DEBUG if verbose or settings.verbose else logging.INFO)
    # 3. Roots
    if base_path is None:
        base_path = os.getenv(BASE_PATH_ENV) or settings.base_path
    if base_path is not None:
        if HOME_TOKEN not in base_path:
            base_path = str(Path(base_path).expanduser())
        data_path = local_path = base_path
        logger.debug("Using base path override: %s", base_path)
    else:
        data_path = paths.default_data_path(platform)
        local_path = paths.default_local_path(platform)
    # 4. Directories
    dirs = Directories.from_templates(
        settings.templates(),
        data_path=data_path,
        local_path=local_path,
        home=home,
        platform=platform,
    )
    logger.debug("Resolved directories: %s", dirs.to_dict())
    return dirs
