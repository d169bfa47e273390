"""
Configuration Loader (``payroll_config.loader``).

Responsibility
--------------
Reads YAML configuration files, applies environment overrides and parses
the merged mapping into a frozen ``PayrollConfig``.  Runtime callers go
through ``payroll_config.get_active_config()`` instead of calling this
module directly.

Invariants enforced
-------------------
* Precedence, lowest first: ``defaults.yaml``, an explicit YAML file,
  environment variables.
* Every value is type-checked; a bad value raises ``ConfigurationError``
  naming the offending key.  Nothing is silently coerced to a default.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing ``database.url`` or a wrongly typed value  -> ``ConfigurationError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from payroll_config.schema import PayrollConfig
from payroll_kernel.exceptions import ConfigurationError

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

# Environment variable -> dotted configuration key.  Earlier entries win.
ENV_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("PAYROLL_DATABASE_URL", "database.url"),
    ("DATABASE_URL", "database.url"),
    ("PAYROLL_ALLOW_STANDIN", "allow_standin"),
    ("PAYROLL_LOG_LEVEL", "logging.level"),
)

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigurationError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top level must be a mapping")
    return data


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursive dict merge; values in override win."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_env_overrides(
    data: Mapping[str, Any],
    environ: Mapping[str, str],
) -> dict[str, Any]:
    """Return data with every set override variable written into it."""
    result = dict(data)
    applied: set[str] = set()
    for var, dotted in ENV_OVERRIDES:
        if dotted in applied or var not in environ:
            continue
        applied.add(dotted)
        section, _, leaf = dotted.rpartition(".")
        if section:
            nested = dict(result.get(section) or {})
            nested[leaf] = environ[var]
            result[section] = nested
        else:
            result[leaf] = environ[var]
    return result


def parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigurationError(key, f"expected a boolean, got {value!r}")


def parse_positive_int(key: str, value: Any, *, allow_zero: bool = False) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, f"expected an integer, got {value!r}") from None
    if number < 0 or (number == 0 and not allow_zero):
        raise ConfigurationError(key, f"must be {'>= 0' if allow_zero else '> 0'}, got {number}")
    return number


def parse_database_url(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError("database.url", "a database URL is required")
    try:
        make_url(value.strip())
    except ArgumentError as exc:
        raise ConfigurationError("database.url", str(exc)) from exc
    return value.strip()


def parse_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            "logging.level", f"expected one of {sorted(_LOG_LEVELS)}, got {value!r}"
        )
    return level


def parse_config(data: Mapping[str, Any]) -> PayrollConfig:
    """Build a PayrollConfig from a merged configuration mapping."""
    database = data.get("database") or {}
    logging_section = data.get("logging") or {}
    if not isinstance(database, Mapping):
        raise ConfigurationError("database", "must be a mapping")
    if not isinstance(logging_section, Mapping):
        raise ConfigurationError("logging", "must be a mapping")

    return PayrollConfig(
        database_url=parse_database_url(database.get("url")),
        echo=parse_bool("database.echo", database.get("echo", False)),
        pool_size=parse_positive_int("database.pool_size", database.get("pool_size", 5)),
        max_overflow=parse_positive_int(
            "database.max_overflow", database.get("max_overflow", 5), allow_zero=True
        ),
        pool_timeout=parse_positive_int("database.pool_timeout", database.get("pool_timeout", 30)),
        pool_recycle=parse_positive_int("database.pool_recycle", database.get("pool_recycle", 1800)),
        connect_timeout=parse_positive_int(
            "database.connect_timeout", database.get("connect_timeout", 5)
        ),
        allow_standin=parse_bool("allow_standin", data.get("allow_standin", True)),
        log_level=parse_log_level(logging_section.get("level", "INFO")),
    )
