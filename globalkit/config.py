"""Process-wide settings for globalkit.

Settings are resolved once: built-in defaults, then an optional YAML file, then
``GLOBALKIT_*`` environment variables. The hash word size in particular is read
when :mod:`globalkit.hashing` is first imported and never changes afterwards.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["ConfigError", "Settings", "get_settings", "load_settings", "native_word_bits"]

ENV_PREFIX = "GLOBALKIT_"
CONFIG_ENV_VAR = "GLOBALKIT_CONFIG"
SUPPORTED_WORD_BITS = (32, 64)
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(RuntimeError):
    """Raised when a configuration file or variable holds an unusable value."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def native_word_bits() -> int:
    """Width of the interpreter's native pointer-sized integer."""

    return 64 if sys.maxsize > 2**32 else 32


@dataclass(frozen=True)
class Settings:
    word_bits: int = native_word_bits()
    echo_mode: bool = False
    base64_uids: bool = True
    log_level: str = "INFO"


def load_settings(path: str | Path | None = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve :class:`Settings` from defaults, ``path`` (YAML) and ``environ``."""

    settings = Settings()
    if path is not None:
        settings = _apply(settings, _read_yaml(Path(path)), source=str(path))

    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for field in fields(Settings):
        key = ENV_PREFIX + field.name.upper()
        if key in env:
            overrides[field.name] = env[key]
    if overrides:
        settings = _apply(settings, overrides, source="environment")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings for this process."""

    return load_settings(os.environ.get(CONFIG_ENV_VAR))


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in '{path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")
    return data


def _apply(settings: Settings, values: Mapping[str, Any], *, source: str) -> Settings:
    known = {field.name for field in fields(Settings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s) in {source}: {', '.join(unknown)}")

    updates: Dict[str, Any] = {}
    for name, raw in values.items():
        if name == "word_bits":
            updates[name] = _parse_word_bits(raw, source)
        elif name in ("echo_mode", "base64_uids"):
            updates[name] = _parse_bool(name, raw, source)
        elif name == "log_level":
            updates[name] = _parse_log_level(raw, source)
    return replace(settings, **updates)


def _parse_word_bits(raw: Any, source: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"word_bits must be an integer in {source}, got {raw!r}") from exc
    if value not in SUPPORTED_WORD_BITS:
        raise ConfigError(f"word_bits must be one of {SUPPORTED_WORD_BITS} in {source}, got {value}")
    return value


def _parse_bool(name: str, raw: Any, source: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean in {source}, got {raw!r}")


def _parse_log_level(raw: Any, source: str) -> str:
    level = str(raw).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"log_level must be a logging level name in {source}, got {raw!r}")
    return level
