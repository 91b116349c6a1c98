"""Pydantic configuration models with code-baked defaults.

Defaults live here; a wedbook.toml only lists the keys it changes.
"""

from __future__ import annotations

from pydantic import BaseModel


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = 100


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    json_lines: bool = False

