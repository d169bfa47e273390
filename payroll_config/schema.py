"""
Configuration schema (``payroll_config.schema``).

Frozen dataclass describing the runtime settings of the payroll kernel.
Instances are produced by ``payroll_config.loader.parse_config`` and handed
to ``payroll_kernel.bootstrap``; nothing mutates them after loading.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.engine import make_url


@dataclass(frozen=True)
class PayrollConfig:
    """Runtime settings: store connection, pool sizing, fallback and logging."""

    database_url: str
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 5
    pool_timeout: int = 30
    pool_recycle: int = 1800
    connect_timeout: int = 5
    allow_standin: bool = True
    log_level: str = "INFO"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def masked_database_url(self) -> str:
        """database_url with any password replaced by ***."""
        return make_url(self.database_url).render_as_string(hide_password=True)
