"""Locating the wedbook.toml that applies to an invocation.

A file named on the command line wins, then ``WEDBOOK_CONFIG``, then the
nearest ``wedbook.toml`` in the working directory or one of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "wedbook.toml"
CONFIG_ENV_VAR = "WEDBOOK_CONFIG"


class ConfigFileError(ValueError):
    """A config file was named but is missing, or could not be parsed."""


def resolve_config_path(
    explicit: str | Path | None = None, start: Path | None = None
) -> Path | None:
    """Return the config file to read, or None to run on defaults.

    A file named by *explicit* or by ``WEDBOOK_CONFIG`` must exist; naming a
    missing file raises :class:`ConfigFileError` instead of silently falling
    back to defaults. Walk-up discovery from *start* (default: cwd) finding
    nothing is not an error.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            raise ConfigFileError(f"Config file not found: {path}")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
