"""Rounding helpers shared by the calculator and the report."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* places, ties going away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    score rules expect ``2.5 -> 3``.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(round_half_away(value))
