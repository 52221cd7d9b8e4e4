"""Invoice Form Validation — the parse boundary between raw submissions and typed records.

Invariants:
    - amount <= 0, non-numeric or missing → errors["amount"]
    - missing / empty / non-string customerId → errors["customerId"]
    - status outside {pending, paid} → errors["status"]
    - all failing fields reported together, with the mode's summary message
    - id and date in the payload are ignored
"""

from decimal import Decimal

import pytest

from dashboard.core.domain_types import InvoiceStatus, MutationKind, OutcomeKind
from dashboard.schemas.invoice import (
    FIELD_ERROR_MESSAGES,
    InvoiceDetail,
    InvoiceForm,
    InvoiceFormState,
    parse_invoice_form,
)

AMOUNT_MESSAGE = "Please enter an amount greater than $0."
CUSTOMER_MESSAGE = "Please select a customer."
STATUS_MESSAGE = "Please select an invoice status."


def _payload(**overrides):
    payload = {"customerId": "c1", "amount": "12.50", "status": "pending"}
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not None}


# --- valid submissions ---------------------------------------------------------

def test_valid_payload_yields_typed_form():
    form = parse_invoice_form(_payload(), MutationKind.CREATE)
    assert isinstance(form, InvoiceForm)
    assert form.customer_id == "c1"
    assert form.amount == Decimal("12.50")
    assert form.status is InvoiceStatus.PENDING


def test_numeric_amount_is_accepted():
    form = parse_invoice_form(_payload(amount=5), MutationKind.UPDATE)
    assert form.amount == Decimal("5")


def test_id_and_date_in_payload_are_ignored():
    form = parse_invoice_form(
        _payload(id="inv-from-payload", date="1999-01-01"), MutationKind.CREATE,
    )
    assert isinstance(form, InvoiceForm)
    assert "id" not in form.model_dump()
    assert "date" not in form.model_dump()


def test_customer_id_is_stripped():
    form = parse_invoice_form(_payload(customerId="  c2 "), MutationKind.CREATE)
    assert form.customer_id == "c2"


# --- amount --------------------------------------------------------------------

@pytest.mark.parametrize("amount", ["0", "-5", "-0.01", "abc", "", "NaN"])
def test_non_positive_or_non_numeric_amount_fails(amount):
    state = parse_invoice_form(_payload(amount=amount), MutationKind.CREATE)
    assert isinstance(state, InvoiceFormState)
    assert state.errors == {"amount": [AMOUNT_MESSAGE]}


def test_missing_amount_fails():
    payload = _payload()
    del payload["amount"]
    state = parse_invoice_form(payload, MutationKind.CREATE)
    assert state.errors["amount"] == [AMOUNT_MESSAGE]


# --- customerId ----------------------------------------------------------------

def test_missing_customer_fails():
    payload = _payload()
    del payload["customerId"]
    state = parse_invoice_form(payload, MutationKind.CREATE)
    assert state.errors["customerId"] == [CUSTOMER_MESSAGE]


@pytest.mark.parametrize("customer_id", ["", "   ", 42])
def test_empty_or_non_string_customer_fails(customer_id):
    state = parse_invoice_form(_payload(customerId=customer_id), MutationKind.CREATE)
    assert state.errors == {"customerId": [CUSTOMER_MESSAGE]}


# --- status --------------------------------------------------------------------

@pytest.mark.parametrize("status", ["overdue", "PAID", "", "pending "])
def test_status_outside_enumeration_fails(status):
    state = parse_invoice_form(_payload(status=status), MutationKind.CREATE)
    assert state.errors == {"status": [STATUS_MESSAGE]}


def test_missing_status_fails():
    payload = _payload()
    del payload["status"]
    state = parse_invoice_form(payload, MutationKind.UPDATE)
    assert state.errors["status"] == [STATUS_MESSAGE]


# --- accumulation & summary ----------------------------------------------------

def test_all_field_errors_are_accumulated():
    state = parse_invoice_form({}, MutationKind.CREATE)
    assert state.errors == {
        "customerId": [CUSTOMER_MESSAGE],
        "amount": [AMOUNT_MESSAGE],
        "status": [STATUS_MESSAGE],
    }
    assert state.message == "Missing Fields. Failed to Create Invoice."


def test_update_mode_uses_update_summary():
    state = parse_invoice_form(_payload(amount="0"), MutationKind.UPDATE)
    assert state.message == "Missing Fields. Failed to Update Invoice."


def test_valid_fields_are_absent_from_errors():
    state = parse_invoice_form(_payload(status="void"), MutationKind.CREATE)
    assert "customerId" not in state.errors
    assert "amount" not in state.errors


def test_field_messages_cover_exactly_the_form_fields():
    assert set(FIELD_ERROR_MESSAGES) == {"customerId", "amount", "status"}


# --- response shapes -----------------------------------------------------------

def test_form_state_defaults_to_no_errors():
    state = InvoiceFormState()
    assert state.model_dump() == {"errors": {}, "message": None}


def test_form_state_outcome_stays_off_the_wire():
    state = InvoiceFormState(message="Database Error: Failed to Create Invoice.", outcome="failed")
    assert state.outcome is OutcomeKind.FAILED
    assert "outcome" not in state.model_dump()


def test_invoice_detail_serializes_wire_names():
    detail = InvoiceDetail(
        id="inv1", customer_id="c1", amount=Decimal("10.00"),
        status="paid", date="2024-01-15",
    )
    body = detail.model_dump(mode="json", by_alias=True)
    assert body == {
        "id": "inv1",
        "customerId": "c1",
        "amount": "10.00",
        "status": "paid",
        "date": "2024-01-15",
    }
