"""Customer ORM — referential target for invoices.customer_id.

Invariants:
    - Read-only from the pipeline's point of view; customers are managed elsewhere
    - email is unique

Design Decisions:
    - Modeled only so the store can enforce invoices.customer_id integrity and
      tests can seed rows; customer lookup is not part of this service
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class Customer(Base):
    """Customer row."""
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
