"""Configuration loader that parses and validates user-provided TOML."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from .datatypes import AppConfig, CLIConfig, LayoutConfig, RenderConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the configuration file is malformed or fails validation."""


_BOOLEAN_WORDS = {"1": True, "true": True, "0": False, "false": False}


def _coerce_value(value: Any, dotted_key: str, field_type: Any) -> Any:
    """
    Convert a raw TOML value to the type a config field declares.

    Booleans accept TOML booleans, ``0``/``1`` and the strings ``"true"``,
    ``"false"``, ``"0"`` and ``"1"``. Enum fields accept their member values in
    any case. Other field types pass through unchanged and are checked by
    ``_validate``.
    """
    if field_type is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.strip().lower() in _BOOLEAN_WORDS:
            return _BOOLEAN_WORDS[value.strip().lower()]
        raise ConfigError(f"{dotted_key} must be a boolean (use true/false).")
    if isinstance(field_type, type) and issubclass(field_type, Enum):
        if isinstance(value, str):
            try:
                return field_type(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(str(member.value) for member in field_type)
        raise ConfigError(f"{dotted_key} must be one of: {choices}")
    if is_dataclass(field_type):
        raise ConfigError(f"[{dotted_key}] nested tables are not supported")
    return value


def _sanitize_section(raw: Any, name: str, cls):
    """
    Build the ``cls`` section dataclass from a raw TOML table.

    Parameters:
        raw (Any): Raw TOML section data.
        name (str): Section name used when reporting validation errors.
        cls: Dataclass type used to construct the section object.

    Returns:
        Any: Instantiated dataclass populated with values from ``raw``.

    Raises:
        ConfigError: If the section is not a table or contains unknown keys or invalid values.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    field_types = {field.name: field.type for field in fields(cls)}
    unknown = sorted(key for key in raw if key not in field_types)
    if unknown:
        raise ConfigError(f"Unknown keys in [{name}]: {', '.join(unknown)}")
    cleaned: Dict[str, Any] = {
        key: _coerce_value(value, f"{name}.{key}", field_types[key])
        for key, value in raw.items()
    }
    return cls(**cleaned)


def _validate(app: AppConfig) -> None:
    if not isinstance(app.render.ellipsis, str):
        raise ConfigError("render.ellipsis must be a string")
    width = app.cli.width
    if width is not None:
        if isinstance(width, bool) or not isinstance(width, int):
            raise ConfigError("cli.width must be an integer")
        if width < 0:
            raise ConfigError("cli.width must be >= 0")


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Load and validate an application configuration from a TOML file.

    Reads the file at `path`, parses it as UTF-8 TOML (BOM is accepted), coerces the `[layout]`, `[render]` and `[cli]` sections and returns a fully populated AppConfig. Missing sections keep their defaults.

    Returns:
        AppConfig: The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8, TOML parsing fails, or any validation rule is violated.
    """

    try:
        with open(path, "rb") as handle:
            raw_bytes = handle.read()
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration: {exc}") from exc
    if raw_bytes.startswith(b"\xef\xbb\xbf"):
        raw_bytes = raw_bytes[3:]
    try:
        raw = tomllib.loads(raw_bytes.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError("Configuration file must be UTF-8 encoded") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML: {exc}") from exc

    unknown_sections = sorted(key for key in raw if key not in {"layout", "render", "cli"})
    if unknown_sections:
        raise ConfigError(f"Unknown sections: {', '.join(unknown_sections)}")

    app = AppConfig(
        layout=_sanitize_section(raw.get("layout", {}), "layout", LayoutConfig),
        render=_sanitize_section(raw.get("render", {}), "render", RenderConfig),
        cli=_sanitize_section(raw.get("cli", {}), "cli", CLIConfig),
    )
    _validate(app)
    logger.debug("Loaded configuration from %s: %s", path, app)
    return app


__all__ = ["ConfigError", "load_config"]
