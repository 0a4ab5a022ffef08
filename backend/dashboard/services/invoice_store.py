"""Invoice Store — SQLAlchemy implementation of InvoiceRepository.

Invariants:
    - amount is written as integer cents exactly as given
    - update() and delete() on an unknown id are silent no-ops (no existence precheck)
    - date is written only by insert()
"""

import datetime
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import (
    CustomerId, InvoiceId, InvoiceStatus, MinorUnits,
)
from dashboard.infrastructure.database import map_db_errors
from dashboard.models.invoice import Invoice


class SqlInvoiceRepository:
    """InvoiceRepository backed by the `invoices` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(
        self, customer_id: CustomerId, amount: MinorUnits,
        status: InvoiceStatus, date: datetime.date,
    ) -> InvoiceId:
        invoice_id = InvoiceId(str(uuid.uuid4()))
        async with map_db_errors(self.db, "insert"):
            self.db.add(Invoice(
                id=invoice_id, customer_id=customer_id, amount=amount,
                status=status.value, date=date,
            ))
            await self.db.commit()
        return invoice_id

    async def update(
        self, invoice_id: InvoiceId, customer_id: CustomerId,
        amount: MinorUnits, status: InvoiceStatus,
    ) -> None:
        async with map_db_errors(self.db, "update"):
            await self.db.execute(
                update(Invoice)
                .where(Invoice.id == invoice_id)
                .values(customer_id=customer_id, amount=amount, status=status.value),
            )
            await self.db.commit()

    async def delete(self, invoice_id: InvoiceId) -> None:
        async with map_db_errors(self.db, "delete"):
            await self.db.execute(delete(Invoice).where(Invoice.id == invoice_id))
            await self.db.commit()

    async def list_all(self) -> list[Invoice]:
        async with map_db_errors(self.db, "query"):
            result = await self.db.execute(
                select(Invoice).order_by(Invoice.date.desc(), Invoice.id),
            )
            return list(result.scalars().all())
