"""Service test fixtures — in-memory fake repository for the invoice pipeline.

Invariants:
    - fake_repository records every call as (method, args) in .calls
    - outcomes are configurable per method; default is a one-row OK

Design Decisions:
    - Fake over AsyncMock: the pipeline depends on a Protocol, a plain class satisfies it
      and keeps assertions readable
"""

import pytest

from dashboard.core.domain_types import OutcomeKind
from dashboard.core.invoice_mutation import MutationOutcome


class FakeInvoiceRepository:
    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.outcomes: dict[str, MutationOutcome] = {}
        self.rows: dict[str, dict] = {}

    def _outcome(self, method: str, invoice_id=None) -> MutationOutcome:
        outcome = self.outcomes.get(method, MutationOutcome(OutcomeKind.OK, 1))
        if outcome.invoice_id is None and invoice_id is not None:
            return MutationOutcome(
                outcome.kind, outcome.rows_affected, invoice_id, outcome.reason,
            )
        return outcome

    async def insert(self, invoice):
        self.calls.append(("insert", (invoice,)))
        return self._outcome("insert", "inv-new")

    async def update(self, invoice_id, invoice):
        self.calls.append(("update", (invoice_id, invoice)))
        return self._outcome("update", invoice_id)

    async def delete(self, invoice_id):
        self.calls.append(("delete", (invoice_id,)))
        return self._outcome("delete", invoice_id)

    async def get(self, invoice_id):
        self.calls.append(("get", (invoice_id,)))
        return self.rows.get(invoice_id)


@pytest.fixture
def fake_repository():
    return FakeInvoiceRepository()
