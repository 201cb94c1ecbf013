"""
Placeholder substitution for path templates.

Templates may reference three tokens:
    $HOME   the user's home directory
    $BASE   the base data directory (persistent, roamed)
    $LOCAL  the machine-local directory (caches)

Replacement is literal text substitution; anything else that looks like a
token (e.g. `$FOO`) is left as-is.
"""
from __future__ import annotations

import os
from pathlib import Path

from parity_dir.core.errors import HomeDirectoryError

HOME_TOKEN = "$HOME"
BASE_TOKEN = "$BASE"
LOCAL_TOKEN = "$LOCAL"


def home_dir() -> Path:
    """Get the home directory of the current user."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError("Failed to get home dir") from e


def substitute(template: str, replacements: list[tuple[str, str]]) -> str:
    """Apply (token, value) pairs to `template` in order."""
    for token, value in replacements:
        template = template.replace(token, value)
    return template


def _resolve(arg: str, replacements: list[tuple[str, str]], home) -> str:
    # $HOME goes last: the fallback roots are themselves "$HOME/..." templates
    resolved = substitute(arg, replacements)
    if HOME_TOKEN in resolved:
        if home is None:
            home = home_dir()
        resolved = substitute(resolved, [(HOME_TOKEN, str(home))])
    return resolved.replace("/", os.sep)


def replace_home(base: str, arg: str, home: str | os.PathLike | None = None) -> str:
    """
    Resolve `$BASE` and `$HOME` in `arg`.
    The home directory is only looked up when the template actually uses it.
    """
    return _resolve(arg, [(BASE_TOKEN, base)], home)


def replace_home_and_local(
    base: str,
    local: str,
    arg: str,
    home: str | os.PathLike | None = None,
) -> str:
    """Resolve `$BASE`, `$LOCAL` and `$HOME` in `arg`."""
    return _resolve(arg, [(BASE_TOKEN, base), (LOCAL_TOKEN, local)], home)
