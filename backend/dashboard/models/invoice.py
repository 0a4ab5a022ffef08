"""Invoice ORM — a billed amount owed by a customer.

Invariants:
    - customer_id references customers.id
    - amount is integer minor units (cents), never a float
    - status is "pending" or "paid" (enforced at the validation boundary)
    - date is assigned at creation and never rewritten by updates
"""

import datetime
import uuid

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dashboard.db.base import Base


class Invoice(Base):
    """Invoice entity — customer reference, cents, status, creation date."""
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
