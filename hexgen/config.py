"""hexgen configuration.

Typed, immutable configuration for the generation pipeline.  A resolved
:class:`HexConfig` is always fully populated: :func:`resolve_config`
deep-merges a partial override mapping (usually read from a
``hexgen.config.*`` file) onto :data:`DEFAULT_CONFIG` and validates every
field before any generator sees it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("hexgen.config.json", "hexgen.config.yaml", "hexgen.config.yml")

FILE_CASES = ("kebab", "camel", "pascal")
INDENTS = ("tab", 2, 4)
QUOTES = ("single", "double")

# Template identifiers that may be overridden with a caller-supplied file.
TEMPLATE_IDS = (
    "port/token",
    "port/port",
    "port/service",
    "port/module",
    "port/index",
    "adapter/adapter",
    "adapter/service",
    "adapter/types",
    "adapter/index",
    "service/service",
    "service/index",
)


class ConfigValidationError(ValueError):
    """Raised when a configuration value is missing, mistyped or not allowed."""

    def __init__(
        self,
        field: str,
        value: Any,
        accepted: tuple[Any, ...] | str | None = None,
        message: str | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.accepted = accepted
        if message is None:
            if isinstance(accepted, tuple):
                allowed = ", ".join(repr(a) for a in accepted)
                message = f"Invalid configuration: {field} must be one of {allowed}. Got: {value!r}"
            else:
                message = (
                    f"Invalid configuration: {field} must be {accepted or 'valid'}. "
                    f"Got: {type(value).__name__} {value!r}"
                )
        super().__init__(message)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class OutputConfig(BaseModel):
    """Where each generator kind writes by default, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    ports_dir: str = Field(default="src/ports")
    adapters_dir: str = Field(default="src/adapters")
    services_dir: str = Field(default="src/services")


class NamingConfig(BaseModel):
    """Suffixes and the casing used for generated file names."""

    model_config = ConfigDict(frozen=True)

    port_suffix: str = Field(default="PORT", description="Appended to port tokens")
    adapter_suffix: str = Field(default="Adapter", description="Appended to adapter classes")
    file_case: Literal["kebab", "camel", "pascal"] = Field(default="kebab")


class StyleConfig(BaseModel):
    """Textual style applied to every rendered artifact."""

    model_config = ConfigDict(frozen=True)

    indent: Literal["tab", 2, 4] = Field(default="tab")
    quotes: Literal["single", "double"] = Field(default="single")
    semicolons: bool = Field(default=True)

    @property
    def indent_unit(self) -> str:
        """The literal string for one indentation level."""
        return "\t" if self.indent == "tab" else " " * self.indent

    @property
    def quote_char(self) -> str:
        return '"' if self.quotes == "double" else "'"


class HexConfig(BaseModel):
    """Fully resolved configuration threaded through every generator."""

    model_config = ConfigDict(frozen=True)

    output: OutputConfig = Field(default_factory=OutputConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    templates: dict[str, str] = Field(
        default_factory=dict,
        description="Template identifier -> path of a replacement template file",
    )


DEFAULT_CONFIG = HexConfig()


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge *override* onto *base*, recursing into nested mappings.

    Keys whose override value is ``None`` keep the base value.
    """
    merged = dict(base)
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(raw: dict[str, Any]) -> None:
    """Validate a merged configuration mapping.

    Raises:
        ConfigValidationError: naming the first offending field.
    """
    groups = {
        "output": ("ports_dir", "adapters_dir", "services_dir"),
        "naming": ("port_suffix", "adapter_suffix", "file_case"),
        "style": ("indent", "quotes", "semicolons"),
    }
    for key, value in raw.items():
        if key not in (*groups, "templates"):
            raise ConfigValidationError(key, value, message=f"Invalid configuration: unknown key {key!r}")
    for group, fields in groups.items():
        section = raw.get(group, {})
        if not isinstance(section, dict):
            raise ConfigValidationError(group, section, "a mapping")
        for key in section:
            if key not in fields:
                raise ConfigValidationError(
                    f"{group}.{key}",
                    section[key],
                    message=f"Invalid configuration: unknown key {group}.{key!r}",
                )

    output = raw.get("output", {})
    for key in groups["output"]:
        _check_string(f"output.{key}", output.get(key))

    naming = raw.get("naming", {})
    _check_string("naming.port_suffix", naming.get("port_suffix"))
    _check_string("naming.adapter_suffix", naming.get("adapter_suffix"))
    _check_choice("naming.file_case", naming.get("file_case"), FILE_CASES)

    style = raw.get("style", {})
    _check_choice("style.indent", style.get("indent"), INDENTS)
    _check_choice("style.quotes", style.get("quotes"), QUOTES)
    semicolons = style.get("semicolons")
    if semicolons is not None and not isinstance(semicolons, bool):
        raise ConfigValidationError("style.semicolons", semicolons, "a boolean")

    templates = raw.get("templates", {})
    if not isinstance(templates, dict):
        raise ConfigValidationError("templates", templates, "a mapping")
    for template_id, path in templates.items():
        _check_choice("templates", template_id, TEMPLATE_IDS)
        _check_string(f"templates.{template_id}", path)


def resolve_config(overrides: dict[str, Any] | HexConfig | None = None) -> HexConfig:
    """Merge *overrides* onto the defaults and return a validated config.

    Args:
        overrides: Partial configuration mapping (any group or field may be
            missing), an existing ``HexConfig``, or ``None`` for defaults.

    Raises:
        ConfigValidationError: If any merged value is invalid.
    """
    if isinstance(overrides, HexConfig):
        return overrides
    if overrides is None:
        return DEFAULT_CONFIG
    if not isinstance(overrides, dict):
        raise ConfigValidationError("config", overrides, "a mapping")

    merged = deep_merge(DEFAULT_CONFIG.model_dump(), overrides)
    validate_config(merged)
    return HexConfig.model_validate(merged)


# ---------------------------------------------------------------------------
# Config files
# ---------------------------------------------------------------------------


def find_config(cwd: str | Path) -> Path | None:
    """Return the first ``hexgen.config.*`` file inside *cwd*, if any."""
    for filename in CONFIG_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(path: str | Path | None = None, cwd: str | Path = ".") -> HexConfig:
    """Read a JSON or YAML config file and resolve it against the defaults.

    Args:
        path: Explicit config file.  When omitted, :func:`find_config` looks
            in *cwd* and the defaults are returned if nothing is found.
        cwd: Directory searched when *path* is not given.

    Raises:
        ConfigValidationError: If the file cannot be read or parsed, or
            holds invalid values.
    """
    target = Path(path) if path is not None else find_config(cwd)
    if target is None:
        logger.debug("No config file found in %s, using defaults", cwd)
        return DEFAULT_CONFIG

    try:
        text = target.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigValidationError(
            str(target), None, message=f"Failed to read config file {target}: {exc}"
        ) from exc
    try:
        if target.suffix == ".json":
            raw = json.loads(text) if text.strip() else {}
        else:
            raw = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(
            str(target), text, message=f"Failed to parse config file {target}: {exc}"
        ) from exc

    logger.debug("Loaded config from %s", target)
    return resolve_config(raw)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_string(field: str, value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise ConfigValidationError(field, value, "a string")


def _check_choice(field: str, value: Any, accepted: tuple[Any, ...]) -> None:
    if value is not None and (
        value not in accepted or type(value) not in {type(choice) for choice in accepted}
    ):
        raise ConfigValidationError(field, value, accepted)
