"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId and CustomerId are opaque strings; format is never inspected
    - InvoiceStatus is closed to exactly two values
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and bind to text columns without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

MinorUnits = NewType("MinorUnits", int)   # cents, >= 0


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment state — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class MutationKind(str, Enum):
    """The three mutations the pipeline performs."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class OutcomeKind(str, Enum):
    """Result of one statement against the store."""
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"
