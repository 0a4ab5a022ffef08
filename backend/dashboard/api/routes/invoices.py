"""Invoice Routes — form endpoints for invoice mutations plus the cached listing.

Invariants:
    - Form field names match the dashboard invoice form: customerId, amount, status
    - Listing renders amounts back from cents
"""

import logging

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.deps import get_invoice_handlers, get_route_cache
from dashboard.api.routes.action_responses import to_http_response
from dashboard.config import Settings, get_settings
from dashboard.core.domain_types import InvoiceId
from dashboard.core.money import from_minor_units
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.view_cache import RouteCache
from dashboard.schemas.invoice import InvoiceResponse
from dashboard.services.handle_invoices import InvoiceHandlers
from dashboard.services.invoice_store import SqlInvoiceRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


@router.get("")
async def list_invoices(
    db: AsyncSession = Depends(get_db),
    cache: RouteCache = Depends(get_route_cache),
    settings: Settings = Depends(get_settings),
):
    """Invoices listing, newest first, cached per route."""
    invoices = cache.get(settings.invoices_route)
    if invoices is None:
        generation = cache.generation(settings.invoices_route)
        rows = await SqlInvoiceRepository(db).list_all()
        invoices = [
            InvoiceResponse(
                id=i.id,
                customer_id=i.customer_id,
                amount=from_minor_units(i.amount),
                status=i.status,
                date=i.date,
            ).model_dump(mode="json")
            for i in rows
        ]
        cache.put(settings.invoices_route, invoices, generation)
    return {"invoices": invoices}


@router.post("")
async def create_invoice(
    customer_id: str | None = Form(None, alias="customerId"),
    amount: str | None = Form(None),
    status: str | None = Form(None),
    handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    result = await handlers.create_invoice(
        {"customerId": customer_id, "amount": amount, "status": status},
    )
    return to_http_response(result)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    customer_id: str | None = Form(None, alias="customerId"),
    amount: str | None = Form(None),
    status: str | None = Form(None),
    handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    result = await handlers.update_invoice(
        InvoiceId(invoice_id),
        {"customerId": customer_id, "amount": amount, "status": status},
    )
    return to_http_response(result)


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    return to_http_response(await handlers.delete_invoice(InvoiceId(invoice_id)))
