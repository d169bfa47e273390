"""
Module: payroll_kernel.db.base
Responsibility: Declarative base class for all SQLAlchemy ORM models and the
    type annotation map that keeps column types consistent.
Architecture position: Kernel > DB.  This is the lowest-level import target
    within the kernel.  ALL model files import from here.  This module MUST NOT
    import from models/, services/, selectors/, repositories/ or domain/.

Invariants enforced:
    - Decimal precision: type_annotation_map maps Python Decimal to
      Numeric(14, 2).  NEVER use float for salaries.
    - Integer keys: the store keeps the integer identifiers (empid,
      job_title_id, division_id) that external HR processes assign, so
      models declare their own primary keys instead of inheriting one.
"""

from datetime import date
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import Date, Integer, Numeric
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for all SQLAlchemy models.

    Guarantees:
        - Decimal maps to Numeric(14, 2).
        - date maps to Date.
        - int maps to Integer (SQLite only autoincrements INTEGER keys).
    """

    type_annotation_map: ClassVar[dict] = {
        Decimal: Numeric(14, 2),
        date: Date,
        int: Integer,
    }
