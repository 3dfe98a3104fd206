"""
Finance Tracker - Core Package

A single-user personal finance ledger: income and expense transactions
kept in memory, persisted to a flat CSV file, and queried with simple
filters and totals.

DESIGN PRINCIPLES:
1. The core never talks to the user - presentation lives in app/
2. Every public store operation is all-or-nothing
3. A bad record in the data file is skipped, never fatal
4. Every step is auditable
5. Storage backend is swappable
"""

__version__ = "1.0.0"
__author__ = "Finance Tracker Team"
