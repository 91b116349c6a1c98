"""WedbookSettings: the resolved configuration of one CLI invocation.

Values are layered, later layers winning:

  defaults (section models) < wedbook.toml < ``WEDBOOK_*`` env < CLI flags

:meth:`WedbookSettings.from_cli` reads the file and environment layers
through pydantic-settings sources and merges them; constructing the class
directly only applies keyword arguments over the defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from wedbook.config.discovery import ConfigFileError, resolve_config_path
from wedbook.config.models import LoggingConfig, OutputConfig


def _merge(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Overlay *layer* on *base*, merging TOML sections key by key."""
    merged = dict(base)
    for key, value in layer.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class WedbookSettings(BaseSettings):
    """Frozen settings for the wedbook CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        json_output: Render results as JSON.
        quiet: Print only the parsed value.
        verbose: Debug logging and the value's type in human output.
        log_json: JSON lines on stderr instead of console logs.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="WEDBOOK_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> WedbookSettings:
        """Build settings for a CLI invocation.

        Args:
            config_path: File given with ``--config``; see
                :func:`~wedbook.config.discovery.resolve_config_path`.
            start: Directory discovery walks up from (default: cwd).
            **cli_flags: Flags the user actually passed. A value of None
                means "not given" and leaves lower layers in effect.

        Raises:
            ConfigFileError: The named file is missing or is not valid TOML.
        """
        toml_path = resolve_config_path(config_path, start)
        file_layer: dict[str, Any] = {}
        if toml_path is not None:
            try:
                file_layer = TomlConfigSettingsSource(cls, toml_file=toml_path)()
            except tomllib.TOMLDecodeError as exc:
                raise ConfigFileError(f"Invalid TOML in {toml_path}: {exc}") from exc

        flag_layer = {name: value for name, value in cli_flags.items() if value is not None}
        values = _merge(_merge(file_layer, EnvSettingsSource(cls)()), flag_layer)
        values["config_path"] = toml_path
        return cls(**values)

    @property
    def use_json_logs(self) -> bool:
        """True when ``--log-json``, its env var, or ``[logging] json_lines`` asks for it."""
        return self.log_json or self.logging.json_lines
