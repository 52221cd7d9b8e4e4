"""Domain Types — verifies enum closure and identity wrappers."""

from dashboard.core.domain_types import (
    CustomerId, InvoiceId, InvoiceStatus, MutationKind, OutcomeKind,
)


def test_invoice_status_is_closed_to_two_values():
    assert {s.value for s in InvoiceStatus} == {"pending", "paid"}


def test_invoice_status_parses_wire_value():
    assert InvoiceStatus("paid") is InvoiceStatus.PAID


def test_identity_types_wrap_str():
    assert InvoiceId("inv1") == "inv1"
    assert CustomerId("c1") == "c1"


def test_mutation_kinds():
    assert [m.value for m in MutationKind] == ["create", "update", "delete"]


def test_outcome_kinds():
    assert set(OutcomeKind) == {
        OutcomeKind.OK, OutcomeKind.NOT_FOUND, OutcomeKind.FAILED,
    }
