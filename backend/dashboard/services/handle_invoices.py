"""Invoice Handlers — create_invoice, update_invoice, delete_invoice.

Invariants:
    - Amount converted to integer cents before any write
    - Status is one of InvoiceStatus; anything else fails validation before a write
    - Creation date comes from the injected clock, never from input
    - update/delete do no existence precheck (unknown id is a store-level no-op)
    - Persistence failures become Failure results with a "Database Error" message
"""

import datetime
import logging
from collections.abc import Callable, Mapping

from dashboard.core.action_result import ActionResult, Failure, Ok, Redirect
from dashboard.core.domain_types import CustomerId, FailureCode, InvoiceId
from dashboard.core.errors import DashboardError
from dashboard.core.money import to_minor_units
from dashboard.core.repository_protocols import InvoiceRepository, ViewInvalidator
from dashboard.core.validate_form import parse_form
from dashboard.schemas.invoice import InvoiceForm

logger = logging.getLogger(__name__)

INVOICES_ROUTE = "/dashboard/invoices"


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


class InvoiceHandlers:
    """Invoice mutation handlers."""

    def __init__(
        self,
        invoices: InvoiceRepository,
        views: ViewInvalidator,
        listing_route: str = INVOICES_ROUTE,
        today: Callable[[], datetime.date] = utc_today,
    ):
        self.invoices = invoices
        self.views = views
        self.listing_route = listing_route
        self.today = today

    async def create_invoice(self, raw: Mapping[str, str | None]) -> ActionResult:
        form, errors = parse_form(InvoiceForm, raw)
        if form is None:
            return Failure(
                "Missing Fields. Failed to Create Invoice.",
                errors, FailureCode.VALIDATION_ERROR,
            )

        try:
            invoice_id = await self.invoices.insert(
                CustomerId(form.customer_id),
                to_minor_units(form.amount),
                form.status,
                self.today(),
            )
        except DashboardError as e:
            logger.error(
                f"Failed to create invoice: {e.message}",
                extra={"error_code": e.code, "action": "create_invoice"},
            )
            return Failure("Database Error: Failed to Create Invoice.")

        logger.info(
            "Invoice created",
            extra={"invoice_id": invoice_id, "action": "create_invoice"},
        )
        self.views.invalidate(self.listing_route)
        return Redirect(self.listing_route)

    async def update_invoice(
        self, invoice_id: InvoiceId, raw: Mapping[str, str | None],
    ) -> ActionResult:
        form, errors = parse_form(InvoiceForm, raw)
        if form is None:
            return Failure(
                "Missing Fields. Failed to Update Invoice.",
                errors, FailureCode.VALIDATION_ERROR,
            )

        try:
            await self.invoices.update(
                invoice_id,
                CustomerId(form.customer_id),
                to_minor_units(form.amount),
                form.status,
            )
        except DashboardError as e:
            logger.error(
                f"Failed to update invoice: {e.message}",
                extra={
                    "invoice_id": invoice_id, "error_code": e.code,
                    "action": "update_invoice",
                },
            )
            return Failure("Database Error: Failed to Update Invoice.")

        self.views.invalidate(self.listing_route)
        return Redirect(self.listing_route)

    async def delete_invoice(self, invoice_id: InvoiceId) -> ActionResult:
        try:
            await self.invoices.delete(invoice_id)
        except DashboardError as e:
            logger.error(
                f"Failed to delete invoice: {e.message}",
                extra={
                    "invoice_id": invoice_id, "error_code": e.code,
                    "action": "delete_invoice",
                },
            )
            return Failure("Database Error: Failed to Delete Invoice.")

        self.views.invalidate(self.listing_route)
        return Ok({"message": "Deleted Invoice."})
