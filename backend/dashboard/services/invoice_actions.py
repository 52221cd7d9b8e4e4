"""Invoice Actions — the validated-mutation pipeline behind the invoice forms.

Invariants:
    - validate → normalize → execute → invalidate/navigate, strictly in that order
    - A validation failure never reaches the repository
    - The listing view is revalidated only after the store reports OK
    - create/update report every failure as InvoiceFormState; delete raises instead,
      because it has no form to re-render

Design Decisions:
    - Repository and view cache injected per call (Protocols), no module-level store
    - The clock is injected (today=) so the issue date is testable; defaults to UTC
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable

from dashboard.core.domain_types import InvoiceId, MutationKind, OutcomeKind
from dashboard.core.errors import DatabaseError, ErrorContext, InvoiceNotFoundError
from dashboard.core.invoice_mutation import (
    DELETED_MESSAGE, MutationOutcome, Redirect, outcome_message, to_validated_invoice,
)
from dashboard.core.money import from_minor_units
from dashboard.core.repository_protocols import InvoiceRepository, ViewInvalidator
from dashboard.schemas.invoice import InvoiceDetail, InvoiceFormState, parse_invoice_form

logger = logging.getLogger(__name__)

INVOICES_LISTING_PATH = "/dashboard/invoices"


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


async def create_invoice(
    form_data: Mapping[str, Any],
    *,
    repository: InvoiceRepository,
    views: ViewInvalidator,
    listing_path: str = INVOICES_LISTING_PATH,
    today: Callable[[], date] = utc_today,
) -> InvoiceFormState | Redirect:
    """Validate and insert a new invoice dated today."""
    parsed = parse_invoice_form(form_data, MutationKind.CREATE)
    if isinstance(parsed, InvoiceFormState):
        logger.info(
            f"Invoice create rejected: {sorted(parsed.errors)}",
            extra={"operation": MutationKind.CREATE.value},
        )
        return parsed

    invoice = to_validated_invoice(
        parsed.customer_id, parsed.amount, parsed.status, issued_on=today(),
    )
    outcome = await repository.insert(invoice)
    return _finish(MutationKind.CREATE, outcome, views, listing_path)


async def update_invoice(
    invoice_id: str,
    form_data: Mapping[str, Any],
    *,
    repository: InvoiceRepository,
    views: ViewInvalidator,
    listing_path: str = INVOICES_LISTING_PATH,
) -> InvoiceFormState | Redirect:
    """Validate and overwrite customer, amount and status of an existing invoice."""
    parsed = parse_invoice_form(form_data, MutationKind.UPDATE)
    if isinstance(parsed, InvoiceFormState):
        logger.info(
            f"Invoice update rejected: {sorted(parsed.errors)}",
            extra={"operation": MutationKind.UPDATE.value, "invoice_id": invoice_id},
        )
        return parsed

    if not invoice_id:
        outcome = MutationOutcome(OutcomeKind.NOT_FOUND)
    else:
        invoice = to_validated_invoice(parsed.customer_id, parsed.amount, parsed.status)
        outcome = await repository.update(InvoiceId(invoice_id), invoice)
    return _finish(MutationKind.UPDATE, outcome, views, listing_path)


async def delete_invoice(
    invoice_id: str,
    *,
    repository: InvoiceRepository,
    views: ViewInvalidator,
    listing_path: str = INVOICES_LISTING_PATH,
) -> dict[str, str]:
    """Remove an invoice and mark the listing stale. No navigation."""
    if not invoice_id:
        raise InvoiceNotFoundError(invoice_id)

    outcome = await repository.delete(InvoiceId(invoice_id))
    if outcome.kind is OutcomeKind.NOT_FOUND:
        raise InvoiceNotFoundError(invoice_id)
    if outcome.kind is OutcomeKind.FAILED:
        raise DatabaseError(
            "invoice could not be deleted", "delete",
            ErrorContext(invoice_id=invoice_id, debug_info={"reason": outcome.reason}),
        )

    views.revalidate(listing_path)
    return {"message": DELETED_MESSAGE}


async def get_invoice_detail(
    invoice_id: str, *, repository: InvoiceRepository,
) -> InvoiceDetail:
    """Invoice for the edit form, amount converted back to currency units."""
    row = await repository.get(InvoiceId(invoice_id)) if invoice_id else None
    if row is None:
        raise InvoiceNotFoundError(invoice_id)
    return InvoiceDetail(
        id=row["id"],
        customer_id=row["customer_id"],
        amount=from_minor_units(row["amount"]),
        status=row["status"],
        date=row["date"],
    )


def _finish(
    mutation: MutationKind,
    outcome: MutationOutcome,
    views: ViewInvalidator,
    listing_path: str,
) -> InvoiceFormState | Redirect:
    """Report a failed outcome, or invalidate the listing and navigate to it."""
    message = outcome_message(mutation, outcome)
    if message is not None:
        logger.warning(
            f"Invoice {mutation.value} not applied: {outcome.kind.value}",
            extra={
                "operation": mutation.value,
                "invoice_id": outcome.invoice_id,
                "error_code": outcome.kind.value.upper(),
            },
        )
        return InvoiceFormState(message=message, outcome=outcome.kind)

    views.revalidate(listing_path)
    return Redirect(listing_path)
