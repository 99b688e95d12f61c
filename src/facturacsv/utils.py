"""Utility helpers shared across facturacsv modules."""

from __future__ import annotations

import re

AMOUNT_RE = re.compile(r"[0-9]*")


def is_valid_amount(value: str | None) -> bool:
    """Return ``True`` for an empty string or an unsigned run of ASCII digits.

    ``None`` stands for a column missing from the row and is never valid.
    """

    if value is None:
        return False
    return AMOUNT_RE.fullmatch(value) is not None


def parse_amount(value: str | None, *, default: float = 0.0) -> float:
    """Convert a validated amount to :class:`float`.

    Empty strings read as ``default``, like the numeric coercion applied by
    the legacy export tooling.
    """

    if not value:
        return default
    return float(value)


def line_number(row_index: int) -> int:
    """Line of the source text holding the row at ``row_index`` (header is 1)."""

    return row_index + 2


__all__ = ["AMOUNT_RE", "is_valid_amount", "line_number", "parse_amount"]
