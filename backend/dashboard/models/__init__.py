"""ORM Models — SQLAlchemy declarative models for dashboard records.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table names match the consumed schema: users, customers, invoices

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from dashboard.models.user import User  # noqa: F401
from dashboard.models.customer import Customer  # noqa: F401
from dashboard.models.invoice import Invoice  # noqa: F401
