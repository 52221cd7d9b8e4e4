"""Invoice Mutation Core — validated records, store outcomes, and navigation signals.

Invariants:
    - ValidatedInvoice is transient: built per request, never persisted as an object
    - amount_minor_units is always derived from the decimal amount (see core/money.py)
    - date is set only for creation; updates never carry one
    - outcome_message is PURE: maps (mutation, outcome) to a user-facing message or None

Design Decisions:
    - MutationOutcome instead of exceptions: the executor reports, the pipeline decides
      whether a failure is recoverable (form state) or fatal (raised)
    - Redirect is a value, not a side effect: the HTTP layer turns it into a 303
"""

from dataclasses import dataclass
import datetime
from decimal import Decimal

from dashboard.core.domain_types import (
    CustomerId, InvoiceId, InvoiceStatus, MinorUnits, MutationKind, OutcomeKind,
)
from dashboard.core.money import to_minor_units


VALIDATION_FAILED_MESSAGES: dict[MutationKind, str] = {
    MutationKind.CREATE: "Missing Fields. Failed to Create Invoice.",
    MutationKind.UPDATE: "Missing Fields. Failed to Update Invoice.",
}

DATABASE_FAILED_MESSAGES: dict[MutationKind, str] = {
    MutationKind.CREATE: "Database Error: Failed to Create Invoice.",
    MutationKind.UPDATE: "Database Error: Failed to Update Invoice.",
}

NOT_FOUND_MESSAGES: dict[MutationKind, str] = {
    MutationKind.UPDATE: "Invoice not found. Failed to Update Invoice.",
}

DELETED_MESSAGE = "Deleted Invoice."


@dataclass(frozen=True)
class ValidatedInvoice:
    """Strict internal record handed to the Mutation Executor."""
    customer_id: CustomerId
    amount_minor_units: MinorUnits
    status: InvoiceStatus
    date: datetime.date | None = None

    def __post_init__(self):
        if not self.customer_id:
            raise ValueError("customer_id cannot be empty")
        if self.amount_minor_units < 0:
            raise ValueError("amount_minor_units cannot be negative")


def to_validated_invoice(
    customer_id: str,
    amount: Decimal,
    status: InvoiceStatus,
    *,
    issued_on: datetime.date | None = None,
) -> ValidatedInvoice:
    """Normalize validated form fields into a ValidatedInvoice."""
    return ValidatedInvoice(
        customer_id=CustomerId(customer_id),
        amount_minor_units=to_minor_units(amount),
        status=InvoiceStatus(status),
        date=issued_on,
    )


@dataclass(frozen=True)
class MutationOutcome:
    """What one create/update/delete statement did to the store."""
    kind: OutcomeKind
    rows_affected: int = 0
    invoice_id: InvoiceId | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @classmethod
    def from_rowcount(
        cls, rowcount: int, invoice_id: InvoiceId | None = None,
    ) -> "MutationOutcome":
        """Zero affected rows means the target id did not exist."""
        if rowcount == 0:
            return cls(OutcomeKind.NOT_FOUND, 0, invoice_id)
        return cls(OutcomeKind.OK, rowcount, invoice_id)

    @classmethod
    def failed(
        cls, reason: str, invoice_id: InvoiceId | None = None,
    ) -> "MutationOutcome":
        return cls(OutcomeKind.FAILED, 0, invoice_id, reason)


@dataclass(frozen=True)
class Redirect:
    """Navigation signal: the caller should transition to `location`."""
    location: str


def outcome_message(mutation: MutationKind, outcome: MutationOutcome) -> str | None:
    """User-facing message for a non-successful create/update outcome, None on success."""
    if outcome.kind is OutcomeKind.OK:
        return None
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return NOT_FOUND_MESSAGES.get(mutation, DATABASE_FAILED_MESSAGES[mutation])
    return DATABASE_FAILED_MESSAGES[mutation]
