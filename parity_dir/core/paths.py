"""
Default roots for Parity data, plus legacy keystore locations.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from platformdirs import user_cache_dir, user_data_dir

from parity_dir.core.helpers import home_dir
from parity_dir.core.platforms import PLATFORM, PlatformPaths

logger = logging.getLogger("parity_dir.paths")

FALLBACK_DATA_PATH = "$HOME/.parity"
FALLBACK_HYPERVISOR_PATH = "$HOME/.parity-hypervisor"


def _app_root(query: Callable[[], str], fallback: str) -> str:
    """Ask the OS for an app root, or hand back the `$HOME` fallback template."""
    try:
        return query()
    except Exception as e:  # pylint: disable=broad-except
        logger.warning("Could not query application directory (%s); using %s", e, fallback)
        return fallback


def default_data_path(platform: PlatformPaths | None = None) -> str:
    """Get the default (roaming) data directory for Parity."""
    platform = platform or PLATFORM
    return _app_root(
        lambda: user_data_dir(platform.product, platform.author, roaming=True),
        FALLBACK_DATA_PATH,
    )


def default_local_path(platform: PlatformPaths | None = None) -> str:
    """Get the default machine-local directory for Parity."""
    platform = platform or PLATFORM
    # opinion=False: no trailing "Cache" folder on Windows
    return _app_root(
        lambda: user_cache_dir(platform.product, platform.author, opinion=False),
        FALLBACK_DATA_PATH,
    )


def default_hypervisor_path(platform: PlatformPaths | None = None) -> str:
    """Get the default data directory for the updater (hypervisor)."""
    platform = platform or PLATFORM
    return _app_root(
        lambda: user_data_dir(platform.product_hypervisor, platform.author, roaming=True),
        FALLBACK_HYPERVISOR_PATH,
    )


def geth(
    testnet: bool,
    home: str | os.PathLike | None = None,
    platform: PlatformPaths | None = None,
) -> Path:
    """Path to a geth keystore, for importing its keys."""
    platform = platform or PLATFORM
    base = platform.geth_root(home if home is not None else home_dir())
    if testnet:
        base = base / "testnet"
    return base / "keystore"


def parity(
    chain: str,
    home: str | os.PathLike | None = None,
    platform: PlatformPaths | None = None,
) -> Path:
    """Pre-migration Parity keystore for `chain`."""
    platform = platform or PLATFORM
    return platform.legacy_keystore_root(home if home is not None else home_dir()) / chain
