"""
payroll_config -- single public entrypoint for runtime configuration.

Responsibility:
    ``get_active_config()`` is the only way the application obtains its
    settings.  No other component reads configuration files or environment
    variables directly.

Architecture position:
    Configuration sits above ``payroll_kernel`` and is consumed by
    ``payroll_kernel.bootstrap``.  Kernel modules other than bootstrap
    never import from this package.

Failure modes:
    - ``FileNotFoundError`` -- an explicit config_path does not exist.
    - ``ConfigurationError`` -- a value is missing or has the wrong type.

Audit relevance:
    Every successful call logs ``payroll_config_loaded`` with the effective
    settings; the database password is masked.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from payroll_config.loader import (
    DEFAULTS_PATH,
    apply_env_overrides,
    load_yaml_file,
    merge,
    parse_config,
)
from payroll_config.schema import PayrollConfig
from payroll_kernel.logging_config import get_logger

__all__ = ["PayrollConfig", "get_active_config"]

_logger = get_logger("config")


def get_active_config(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> PayrollConfig:
    """The ONLY public configuration entrypoint.

    Args:
        config_path: Optional YAML file layered over the packaged defaults.
        environ: Environment mapping to read overrides from.  Defaults to
            ``os.environ``.

    Returns:
        A frozen PayrollConfig.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ConfigurationError: If a value is missing or invalid.
    """
    data = load_yaml_file(DEFAULTS_PATH)
    if config_path is not None:
        data = merge(data, load_yaml_file(Path(config_path)))
    data = apply_env_overrides(data, os.environ if environ is None else environ)

    config = parse_config(data)

    _logger.info(
        "payroll_config_loaded",
        extra={
            "database_url": config.masked_database_url,
            "allow_standin": config.allow_standin,
            "log_level": config.log_level,
            "config_path": str(config_path) if config_path is not None else None,
        },
    )
    return config
