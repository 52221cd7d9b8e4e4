"""Invoice Repository — the Mutation Executor: one SQL statement per create/update/delete.

Invariants:
    - Exactly one statement per mutation, committed immediately (store atomicity only)
    - Every mutation returns a MutationOutcome carrying the affected-row count
    - Store failures are rolled back, logged, and returned as FAILED — never raised,
      including driver errors SQLAlchemy does not wrap (refused connection, out-of-range value)
    - update never writes the date column; insert always does

Design Decisions:
    - SQLAlchemy Core statements over ORM unit-of-work: rowcount is the existence check,
      no SELECT-before-UPDATE round trip
    - Invoice id generated here, not by the caller: the insert knows its own id without
      relying on RETURNING support
"""

import logging
import uuid
from typing import Any

from fastapi import Depends
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.domain_types import InvoiceId, MutationKind
from dashboard.core.invoice_mutation import MutationOutcome, ValidatedInvoice
from dashboard.infrastructure.database import get_db
from dashboard.models.invoice import Invoice

logger = logging.getLogger(__name__)

# asyncpg raises OSError subclasses on connect; drivers raise OverflowError/ValueError on bind
STORE_ERRORS = (SQLAlchemyError, OSError, OverflowError, ValueError)


class SqlInvoiceRepository:
    """InvoiceRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, invoice: ValidatedInvoice) -> MutationOutcome:
        if invoice.date is None:
            raise ValueError("insert requires the invoice date")
        invoice_id = InvoiceId(str(uuid.uuid4()))
        stmt = insert(Invoice).values(
            id=invoice_id,
            customer_id=invoice.customer_id,
            amount=invoice.amount_minor_units,
            status=invoice.status.value,
            date=invoice.date,
        )
        return await self._execute(
            MutationKind.CREATE, stmt, invoice_id, count_rows=False,
        )

    async def update(
        self, invoice_id: InvoiceId, invoice: ValidatedInvoice,
    ) -> MutationOutcome:
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=invoice.customer_id,
                amount=invoice.amount_minor_units,
                status=invoice.status.value,
            )
        )
        return await self._execute(MutationKind.UPDATE, stmt, invoice_id)

    async def delete(self, invoice_id: InvoiceId) -> MutationOutcome:
        stmt = delete(Invoice).where(Invoice.id == invoice_id)
        return await self._execute(MutationKind.DELETE, stmt, invoice_id)

    async def get(self, invoice_id: InvoiceId) -> dict[str, Any] | None:
        result = await self._db.execute(
            select(Invoice).where(Invoice.id == invoice_id),
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return {
            "id": row.id,
            "customer_id": row.customer_id,
            "amount": row.amount,
            "status": row.status,
            "date": row.date,
        }

    async def _execute(
        self,
        mutation: MutationKind,
        stmt,
        invoice_id: InvoiceId,
        count_rows: bool = True,
    ) -> MutationOutcome:
        try:
            result = await self._db.execute(stmt)
            await self._db.commit()
        except STORE_ERRORS as e:
            await self._db.rollback()
            logger.error(
                f"Error on invoice {mutation.value}: {e}",
                extra={
                    "invoice_id": invoice_id,
                    "operation": mutation.value,
                    "error_code": "DATABASE_ERROR",
                },
            )
            return MutationOutcome.failed(f"{type(e).__name__}: {e}", invoice_id)

        # Drivers may report -1 for INSERT; a single-row insert that did not raise wrote its row
        rowcount = result.rowcount if count_rows else 1
        outcome = MutationOutcome.from_rowcount(rowcount, invoice_id)
        logger.info(
            f"Invoice {mutation.value}: {outcome.kind.value}",
            extra={
                "invoice_id": invoice_id,
                "operation": mutation.value,
                "rows_affected": outcome.rows_affected,
            },
        )
        return outcome


def get_invoice_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlInvoiceRepository:
    """FastAPI dependency: repository bound to the request's session."""
    return SqlInvoiceRepository(db)
