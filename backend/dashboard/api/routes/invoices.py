"""Invoice Routes — form submission endpoints for create, edit and delete.

Invariants:
    - Bodies are form-encoded key/value submissions; the invoice id only ever comes
      from the path
    - Success on create/update → 303 See Other to the invoices listing (POST-redirect-GET)
    - Form states keep the {"errors", "message"} shape: 422 validation, 404 unknown id,
      503 store failure
    - Delete answers 200 with a message and does not navigate

Design Decisions:
    - POST aliases for update and delete: HTML forms can only submit GET/POST
    - Status codes derived from the form state here, so services stay HTTP-agnostic
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.config import Settings, get_settings
from dashboard.core.domain_types import OutcomeKind
from dashboard.core.invoice_mutation import Redirect
from dashboard.infrastructure.invoice_repository import (
    SqlInvoiceRepository, get_invoice_repository,
)
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.schemas.invoice import InvoiceDetail, InvoiceFormState
from dashboard.services import invoice_actions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def form_state_status(state: InvoiceFormState) -> int:
    """HTTP status for a form state returned by the pipeline."""
    if state.errors:
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if state.outcome is OutcomeKind.NOT_FOUND:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_503_SERVICE_UNAVAILABLE


def _to_response(result: InvoiceFormState | Redirect):
    if isinstance(result, Redirect):
        return RedirectResponse(
            result.location, status_code=status.HTTP_303_SEE_OTHER,
        )
    return JSONResponse(
        status_code=form_state_status(result), content=result.model_dump(),
    )


@router.post("", summary="Create an invoice from a form submission")
async def create_invoice(
    request: Request,
    repository: SqlInvoiceRepository = Depends(get_invoice_repository),
    views: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
):
    form = await request.form()
    result = await invoice_actions.create_invoice(
        form,
        repository=repository,
        views=views,
        listing_path=settings.invoices_listing_path,
    )
    return _to_response(result)


@router.get(
    "/{invoice_id}", response_model=InvoiceDetail,
    summary="Invoice as shown in the edit form",
)
async def get_invoice(
    invoice_id: str,
    repository: SqlInvoiceRepository = Depends(get_invoice_repository),
):
    return await invoice_actions.get_invoice_detail(
        invoice_id, repository=repository,
    )


@router.put("/{invoice_id}", summary="Update an invoice from a form submission")
@router.post("/{invoice_id}", include_in_schema=False)
async def update_invoice(
    invoice_id: str,
    request: Request,
    repository: SqlInvoiceRepository = Depends(get_invoice_repository),
    views: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
):
    form = await request.form()
    result = await invoice_actions.update_invoice(
        invoice_id,
        form,
        repository=repository,
        views=views,
        listing_path=settings.invoices_listing_path,
    )
    return _to_response(result)


@router.delete("/{invoice_id}", summary="Delete an invoice")
@router.post("/{invoice_id}/delete", include_in_schema=False)
async def delete_invoice(
    invoice_id: str,
    repository: SqlInvoiceRepository = Depends(get_invoice_repository),
    views: ViewCache = Depends(get_view_cache),
    settings: Settings = Depends(get_settings),
):
    return await invoice_actions.delete_invoice(
        invoice_id,
        repository=repository,
        views=views,
        listing_path=settings.invoices_listing_path,
    )
