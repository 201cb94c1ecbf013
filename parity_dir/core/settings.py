"""
User overrides for Parity's directories, persisted as JSON.

Every `*_path` value is a template and may use $HOME, $BASE and (for db and
cache) $LOCAL.
"""
from dataclasses import asdict, dataclass, fields
import json
import logging
from pathlib import Path
from typing import Any

SETTINGS_FILE = "settings.json"

logger = logging.getLogger("parity_dir.settings")

@dataclass
class DirectorySettings:
    """Directory overrides for Parity. Unset fields keep the platform default."""
    base_path: str | None = None
    db_path: str | None = None
    cache_path: str | None = None
    keys_path: str | None = None
    signer_path: str | None = None
    dapps_path: str | None = None
    secretstore_path: str | None = None
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'DirectorySettings':
        """Hydrate DirectorySettings from a dictionary."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        for key, value in filtered_data.items():
            if key.endswith("_path") and value is not None:
                filtered_data[key] = str(value)
        return cls(**filtered_data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize DirectorySettings to a dictionary."""
        return asdict(self)

    def templates(self) -> dict[str, str]:
        """Overrides keyed by Directories field name (base_path is handled separately)."""
        return {
            f.name[:-len("_path")]: getattr(self, f.name)
            for f in fields(self)
            if f.name.endswith("_path")
            and f.name != "base_path"
            and getattr(self, f.name) is not None
        }

# --- Persistence functions ---

def load_settings(settings_dir: Path) -> DirectorySettings:
    """
    Load overrides from settings.json. A missing file means no overrides; an
    unreadable or malformed one is logged and ignored so startup can proceed.
    """
    path = settings_dir / SETTINGS_FILE
    if not path.exists():
        return DirectorySettings()
    try:
        data = json.loads(path.read_bytes().decode("utf-8"))
        return DirectorySettings.from_dict(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, TypeError, AttributeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return DirectorySettings()

def save_settings(settings_dir: Path, settings: DirectorySettings) -> Path:
    """Write the overrides that are set to settings.json, creating settings_dir."""
    settings_dir.mkdir(parents=True, exist_ok=True)
    path = settings_dir / SETTINGS_FILE
    data = {k: v for k, v in settings.to_dict().items() if v is not None}
    path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.debug("Saved directory settings to %s", path)
    return path
