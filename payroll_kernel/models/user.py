"""
Module: payroll_kernel.models.user
Responsibility: ORM persistence for login accounts.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - username is the primary key.
    - role is stored as text; values other than ADMIN / EMPLOYEE
      (case-insensitive) are kept as-is in the store but rejected at login.

Non-goals:
    - Password hashing.  The password column is an opaque string compared
      for exact equality, as the existing store holds it.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from payroll_kernel.db.base import Base


class UserAccount(Base):
    """A login account and the role it is granted."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), primary_key=True)

    password: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[str] = mapped_column(String(20), nullable=False)

    # Employee row whose pay history a self-service account may view
    empid: Mapped[int | None] = mapped_column(
        ForeignKey("employees.empid"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserAccount {self.username} ({self.role})>"
