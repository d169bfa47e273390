"""
payroll_kernel -- employee and payroll records kernel.

Credential validation, role-tagged sessions, store-backed and stand-in
repositories, and the all-or-nothing bulk salary adjustment.  Start with
``payroll_kernel.bootstrap.PayrollSystem``.
"""

__version__ = "0.1.0"
