"""Invoice Schemas — form validation for invoice mutations and the listing shape.

Invariants:
    - customerId: required, non-blank (id and date are never read from input)
    - amount: coerced from string to Decimal BEFORE the > 0 rule
    - amount: at least one cent after rounding, at most MAX_AMOUNT (fits the INTEGER column)
    - status: exactly "pending" or "paid"

Design Decisions:
    - Field alias "customerId" matches the form field name, so error keys match too
    - Decimal over float: amounts reach to_minor_units without binary rounding
"""

import datetime
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from dashboard.core.domain_types import InvoiceStatus
from dashboard.core.money import MAX_AMOUNT, to_minor_units

_STATUSES = {s.value for s in InvoiceStatus}


class InvoiceForm(BaseModel):
    """Create/update input."""
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def check_customer(cls, v: object) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("customer_required", "Please select a customer.")
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> Decimal:
        # Absent or blank coerces to 0, which then fails the positivity rule
        raw = "0" if v is None or (isinstance(v, str) and not v.strip()) else str(v).strip()
        try:
            amount = Decimal(raw)
        except InvalidOperation:
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        if not amount.is_finite():
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        if amount > MAX_AMOUNT:
            raise PydanticCustomError("amount_invalid", "Please enter a valid amount.")
        # Positivity is judged on the stored cents, so 0.001 does not become 0
        if amount <= 0 or to_minor_units(amount) < 1:
            raise PydanticCustomError(
                "amount_not_positive", "Please enter an amount greater than $0.",
            )
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v: object) -> str:
        if v not in _STATUSES:
            raise PydanticCustomError("status_invalid", "Please select an invoice status.")
        return v


class InvoiceResponse(BaseModel):
    """Listing row — amount rendered back from minor units."""
    id: str
    customer_id: str
    amount: Decimal
    status: InvoiceStatus
    date: datetime.date
