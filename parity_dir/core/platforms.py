"""
Per-OS identity and legacy layout.

Exactly one profile is active per process (`PLATFORM`), picked once from
`sys.platform` at import time.

Folders on most macOS systems:
    data     = ~/Library/Application Support/io.parity.ethereum
    geth     = ~/Library/Ethereum

Folders on most Windows systems:
    data     = %APPDATA%\\Parity\\Ethereum
    local    = %LOCALAPPDATA%\\Parity\\Ethereum
    geth     = %APPDATA%\\Ethereum

Folders on most Linux systems:
    data     = ~/.local/share/io.parity.ethereum
    geth     = ~/.ethereum
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import sys


@dataclass(frozen=True)
class PlatformPaths:
    """Identity strings and legacy roots for one operating system."""
    name: str
    author: str
    product: str
    product_hypervisor: str
    legacy_keystore_parts: tuple[str, ...]
    geth_parts: tuple[str, ...]
    chains_template: str = "$BASE/chains"
    cache_template: str = "$BASE/cache"

    def legacy_keystore_root(self, home: str | os.PathLike) -> Path:
        """Keystore root used by Parity before keys were split per chain."""
        return Path(home).joinpath(*self.legacy_keystore_parts)

    def geth_root(self, home: str | os.PathLike) -> Path:
        """Root of a geth installation, where its keystore lives."""
        return Path(home).joinpath(*self.geth_parts)


MACOS = PlatformPaths(
    name="macos",
    author="Parity",
    product="io.parity.ethereum",
    product_hypervisor="io.parity.ethereum-updates",
    legacy_keystore_parts=("Library", "Application Support", "io.parity.ethereum", "keys"),
    geth_parts=("Library", "Ethereum"),
)

WINDOWS = PlatformPaths(
    name="windows",
    author="Parity",
    product="Ethereum",
    product_hypervisor="EthereumUpdates",
    legacy_keystore_parts=("AppData", "Roaming", "Parity", "Ethereum", "keys"),
    geth_parts=("AppData", "Roaming", "Ethereum"),
    # chain data and caches stay machine-local, only keys etc. roam
    chains_template="$LOCAL/chains",
    cache_template="$LOCAL/cache",
)

UNIX = PlatformPaths(
    name="unix",
    author="parity",
    product="io.parity.ethereum",
    product_hypervisor="io.parity.ethereum-updates",
    legacy_keystore_parts=(".local", "share", "io.parity.ethereum", "keys"),
    geth_parts=(".ethereum",),
)


def detect_platform(sys_platform: str | None = None) -> PlatformPaths:
    """Pick the profile for `sys_platform` (defaults to the running interpreter's)."""
    sys_platform = sys_platform or sys.platform
    if sys_platform == "darwin":
        return MACOS
    if sys_platform in ("win32", "cygwin"):
        return WINDOWS
    return UNIX


PLATFORM = detect_platform()
