"""
Parity local data directories.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import os
from pathlib import Path
from typing import Mapping

from parity_dir.core.database import DatabaseDirectories
from parity_dir.core.errors import DirectoryCreationError
from parity_dir.core.helpers import replace_home, replace_home_and_local
from parity_dir.core.paths import default_data_path, default_local_path
from parity_dir.core.platforms import PLATFORM, PlatformPaths

logger = logging.getLogger("parity_dir.directories")

# only these may live under the machine-local root
LOCAL_FIELDS = ("db", "cache")


def default_templates(platform: PlatformPaths | None = None) -> dict[str, str]:
    """Field name -> template, before any user overrides."""
    platform = platform or PLATFORM
    return {
        "base": "$BASE",
        "db": platform.chains_template,
        "cache": platform.cache_template,
        "keys": "$BASE/keys",
        "signer": "$BASE/signer",
        "dapps": "$BASE/dapps",
        "secretstore": "$BASE/secretstore",
    }


@dataclass(frozen=True)
class Directories:
    """Resolved absolute paths for all of Parity's persistent state."""
    base: str
    db: str
    cache: str
    keys: str
    signer: str
    dapps: str
    secretstore: str

    @classmethod
    def default(
        cls,
        *,
        data_path: str | None = None,
        local_path: str | None = None,
        home: str | os.PathLike | None = None,
        platform: PlatformPaths | None = None,
    ) -> 'Directories':
        """Directories under the OS-recommended roots."""
        return cls.from_templates(
            data_path=data_path,
            local_path=local_path,
            home=home,
            platform=platform,
        )

    @classmethod
    def from_templates(
        cls,
        overrides: Mapping[str, str] | None = None,
        *,
        data_path: str | None = None,
        local_path: str | None = None,
        home: str | os.PathLike | None = None,
        platform: PlatformPaths | None = None,
    ) -> 'Directories':
        """
        Resolve every field from a template. `overrides` maps field names to
        templates that replace the platform defaults; unknown names are rejected.
        `$BASE` in the other fields is the resolved `base`, overridden or not.
        Results are normalised, so sub-paths join with a single separator.
        """
        platform = platform or PLATFORM
        if data_path is None:
            data_path = default_data_path(platform)
        if local_path is None:
            local_path = default_local_path(platform)
        templates = default_templates(platform)
        for name, template in (overrides or {}).items():
            if name not in templates:
                raise ValueError(f"Unknown directory '{name}'. Valid options: {list(templates)}")
            templates[name] = template
        # base is resolved first: every other $BASE means the resolved base
        base = os.path.normpath(replace_home(data_path, templates.pop("base"), home=home))
        resolved = {"base": base}
        for name, template in templates.items():
            if name in LOCAL_FIELDS:
                value = replace_home_and_local(base, local_path, template, home=home)
            else:
                value = replace_home(base, template, home=home)
            resolved[name] = os.path.normpath(value)
        return cls(**resolved)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def create_dirs(self, dapps_enabled: bool, signer_enabled: bool, secretstore_enabled: bool) -> None:
        """
        Create local directories. base, db, cache and keys are always created;
        the rest only when their feature is enabled. Stops at the first failure
        and leaves already created directories in place.
        """
        wanted = [self.base, self.db, self.cache, self.keys]
        if signer_enabled:
            wanted.append(self.signer)
        if dapps_enabled:
            wanted.append(self.dapps)
        if secretstore_enabled:
            wanted.append(self.secretstore)
        for path in wanted:
            try:
                Path(path).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(str(e), path) from e
            logger.debug("Ensured directory exists: %s", path)

    def ipc_path(self) -> Path:
        """Get the ipc sockets path."""
        return Path(self.base) / "ipc"

    # TODO: drop once no supported release still reads keys from the old layout
    def legacy_keys_path(self, testnet: bool) -> Path:
        """Keys path from before keys were split per chain."""
        return Path(self.base) / ("testnet_keys" if testnet else "keys")

    def keys_path(self, spec_name: str) -> Path:
        """Get the keys path for a chain spec. `spec_name` is used as-is."""
        return Path(self.keys) / spec_name

    def database(
        self,
        genesis_hash: bytes | str,
        spec_name: str,
        fork_name: str | None = None,
    ) -> DatabaseDirectories:
        """Database layout for one chain, under `db` (legacy layout under `base`)."""
        return DatabaseDirectories(
            path=self.db,
            legacy_path=self.base,
            genesis_hash=genesis_hash,
            spec_name=spec_name,
            fork_name=fork_name,
        )
