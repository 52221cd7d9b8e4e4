"""Invoice ORM — the row the mutation pipeline writes.

Invariants:
    - id is an opaque string primary key, generated on insert (never caller-supplied)
    - amount is integer minor units (cents), never a float
    - status is 'pending' | 'paid' (enforced upstream by the schema validator)
    - date is set once on insert and never updated

Design Decisions:
    - String(36) id over UUID column type: ids are opaque to the pipeline, a malformed
      id simply matches no row instead of failing bind processing
    - customer_id FK to customers.id: referential integrity belongs to the store
"""

import datetime
import uuid

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class Invoice(Base):
    """Invoice row — one per issued invoice."""
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
