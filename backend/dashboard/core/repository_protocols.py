"""Boundary Protocols — contracts between the pipeline and the store / view cache.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Repository methods return MutationOutcome and never raise for store failures
"""

from typing import Any, Protocol

from dashboard.core.domain_types import InvoiceId
from dashboard.core.invoice_mutation import MutationOutcome, ValidatedInvoice


class InvoiceRepository(Protocol):
    """Contract for invoice persistence — implemented by shell."""
    async def insert(self, invoice: ValidatedInvoice) -> MutationOutcome: ...
    async def update(
        self, invoice_id: InvoiceId, invoice: ValidatedInvoice,
    ) -> MutationOutcome: ...
    async def delete(self, invoice_id: InvoiceId) -> MutationOutcome: ...
    async def get(self, invoice_id: InvoiceId) -> dict[str, Any] | None: ...


class ViewInvalidator(Protocol):
    """Contract for marking cached read views stale — implemented by shell."""
    def revalidate(self, path: str) -> None: ...
