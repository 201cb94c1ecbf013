"""
parity-dir: platform-specific directories for the Parity Ethereum client.

Resolves where Parity keeps its base data, chain databases, caches, keys,
signer, dapps and secret-store state, and where older layouts (and geth)
kept their keystores.
"""
from importlib.metadata import version, PackageNotFoundError

from parity_dir.core.directories import Directories
from parity_dir.core.errors import DirectoryCreationError, HomeDirectoryError
from parity_dir.core.paths import (
    default_data_path,
    default_hypervisor_path,
    default_local_path,
    geth,
    parity,
)
from parity_dir.core.runtime import build_directories

try:
    __version__ = version("parity-dir")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Directories",
    "DirectoryCreationError",
    "HomeDirectoryError",
    "build_directories",
    "default_data_path",
    "default_hypervisor_path",
    "default_local_path",
    "geth",
    "parity",
]
