"""
Per-chain database layout under the `db` directory.

    <db>/<spec_name>/db/<short genesis hash>/<pruning>
    <db>/<spec_name>/db/<short genesis hash>/snapshot
    <db>/<spec_name>/user_defaults

The legacy layout (before chains were split by spec name) kept everything in
<base>/<short genesis hash>[-<fork name>]/.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# the legacy layout embedded this DB version in directory names
LEGACY_CLIENT_DB_VER_STR = "5.3"

GENESIS_HASH_LEN = 32


class Pruning(Enum):
    """State pruning algorithms, valued by their on-disk directory name."""
    ARCHIVE = "archive"
    EARLY_MERGE = "earlymerge"
    OVERLAY_RECENT = "overlayrecent"
    REF_COUNTED = "refcounted"


def parse_genesis_hash(value: bytes | str) -> bytes:
    """Accept raw bytes or a hex string (with or without 0x) of a 32-byte hash."""
    if isinstance(value, str):
        text = value[2:] if value.lower().startswith("0x") else value
        try:
            value = bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Genesis hash is not valid hex: {text!r}") from e
    if len(value) != GENESIS_HASH_LEN:
        raise ValueError(
            f"Genesis hash must be {GENESIS_HASH_LEN} bytes, got {len(value)}."
        )
    return bytes(value)


@dataclass(frozen=True)
class DatabaseDirectories:
    """Database paths for one chain."""
    path: str
    legacy_path: str
    genesis_hash: bytes
    spec_name: str
    fork_name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "genesis_hash", parse_genesis_hash(self.genesis_hash))

    @property
    def short_hash(self) -> str:
        """8-byte slice of the genesis hash that names DB directories."""
        return self.genesis_hash[20:28].hex()

    def spec_root_path(self) -> Path:
        """Root of everything stored for this chain spec."""
        return Path(self.path) / self.spec_name

    def db_root_path(self) -> Path:
        """DB root, named after the genesis hash."""
        return self.spec_root_path() / "db" / self.short_hash

    def db_path(self, pruning: Pruning) -> Path:
        """Client database for a given pruning algorithm."""
        return self.db_root_path() / pruning.value

    def user_defaults_path(self) -> Path:
        return self.spec_root_path() / "user_defaults"

    def snapshot_path(self) -> Path:
        return self.db_root_path() / "snapshot"

    # --- Legacy layout ---

    def legacy_fork_path(self) -> Path:
        """Base DB directory for the given fork in the legacy layout."""
        name = self.short_hash
        if self.fork_name:
            name = f"{name}-{self.fork_name}"
        return Path(self.legacy_path) / name

    def legacy_version_path(self, pruning: Pruning) -> Path:
        return self.legacy_fork_path() / f"v{LEGACY_CLIENT_DB_VER_STR}-sec-{pruning.value}"

    def legacy_snapshot_path(self) -> Path:
        return self.legacy_fork_path() / "snapshot"

    def legacy_user_defaults_path(self) -> Path:
        return self.legacy_fork_path() / "user_defaults"
