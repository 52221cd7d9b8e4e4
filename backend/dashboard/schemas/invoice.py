"""Invoice Schemas — the form validation boundary and the API response shapes.

Invariants:
    - Only customerId, amount and status are read from a submission; id and date never are
    - Every failing field carries its fixed user-facing message, all fields accumulated
    - parse_invoice_form returns InvoiceForm | InvoiceFormState, never raises ValidationError

Design Decisions:
    - Pydantic aliases keep snake_case attributes with camelCase wire names
    - Decimal for amount: exact coercion from form strings ("12.50"), see core/money.py
    - Per-field messages replace pydantic's defaults so the wire contract stays fixed
      regardless of which constraint failed (type, coercion, bound, enum)
"""

import datetime
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dashboard.core.domain_types import InvoiceStatus, MutationKind, OutcomeKind
from dashboard.core.invoice_mutation import VALIDATION_FAILED_MESSAGES


FORM_FIELDS: tuple[str, ...] = ("customerId", "amount", "status")

FIELD_ERROR_MESSAGES: dict[str, str] = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(BaseModel):
    """Create/update submission — validated, strongly typed fields."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    customer_id: str = Field(alias="customerId")
    amount: Decimal = Field(gt=0)
    status: InvoiceStatus

    @field_validator("customer_id")
    @classmethod
    def require_customer(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("customerId cannot be empty or whitespace")
        return v


class InvoiceFormState(BaseModel):
    """Form state returned to the caller when a mutation does not go through.

    `outcome` is the store outcome behind a non-validation failure. It stays off
    the wire; the HTTP layer picks the status code from it.
    """
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: str | None = None
    outcome: OutcomeKind | None = Field(default=None, exclude=True)


class InvoiceDetail(BaseModel):
    """Invoice as shown in the edit form — amount back in currency units."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus
    date: datetime.date


# --- Validation helpers -------------------------------------------------------

_ALIASES: dict[str, str] = {
    name: info.alias or name for name, info in InvoiceForm.model_fields.items()
}


def flatten_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by wire field name, one fixed message per field."""
    field_errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error["loc"]
        name = str(loc[0]) if loc else "__root__"
        name = _ALIASES.get(name, name)
        message = FIELD_ERROR_MESSAGES.get(name, error["msg"])
        messages = field_errors.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return field_errors


def parse_invoice_form(
    form_data: Mapping[str, Any], mutation: MutationKind,
) -> InvoiceForm | InvoiceFormState:
    """Validate a raw submission for `mutation` (create or update)."""
    raw = {name: form_data.get(name) for name in FORM_FIELDS}
    try:
        return InvoiceForm.model_validate(raw)
    except ValidationError as exc:
        return InvoiceFormState(
            errors=flatten_field_errors(exc),
            message=VALIDATION_FAILED_MESSAGES[mutation],
        )
