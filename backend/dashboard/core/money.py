"""Monetary Normalizer — decimal currency amounts to integer minor units and back.

Invariants:
    - to_minor_units is PURE and exact: Decimal arithmetic, no float multiplication
    - Sub-cent remainders round half-up to the nearest minor unit
    - MINOR_UNITS_PER_UNIT (100) is the single source of truth for the scale

Design Decisions:
    - Decimal over float: "0.29" * 100 must store 29, not 28
"""

from decimal import Decimal, ROUND_HALF_UP

from dashboard.core.domain_types import MinorUnits


MINOR_UNITS_PER_UNIT: int = 100


def to_minor_units(amount: Decimal | int | str) -> MinorUnits:
    """Convert a currency amount (e.g. dollars) to minor units (cents)."""
    scaled = Decimal(str(amount)) * MINOR_UNITS_PER_UNIT
    return MinorUnits(int(scaled.to_integral_value(rounding=ROUND_HALF_UP)))


def from_minor_units(minor_units: int) -> Decimal:
    """Inverse of to_minor_units, for pre-filling edit forms."""
    return (Decimal(minor_units) / MINOR_UNITS_PER_UNIT).quantize(Decimal("0.01"))
