"""Fail-fast validation of a parsed invoice export."""

from __future__ import annotations

import logging

from .parser import RecordSet
from .schema import AMOUNT_FIELDS, HEADER_LINE, InvoiceField, cell, split_row
from .utils import is_valid_amount, line_number

LOGGER = logging.getLogger("facturacsv.validator")


class InvoiceDataError(ValueError):
    """Base class for data-quality errors raised while validating an export."""


class InvalidHeader(InvoiceDataError):
    """The first line is not the canonical header."""

    def __init__(self, header: str) -> None:
        super().__init__("Invalid Header")
        self.header = header


class InvalidAmount(InvoiceDataError):
    """A monetary or tax-rate column holds something other than digits."""

    def __init__(
        self,
        *,
        line_number: int,
        field: InvoiceField,
        value: str | None,
    ) -> None:
        super().__init__("Invalid Amount")
        self.line_number = line_number
        self.field = field
        self.value = value

    def describe(self) -> str:
        """Human readable context for command line output."""

        if self.value is None:
            shown = "(columna ausente)"
        else:
            shown = repr(self.value)
        return f"línea {self.line_number}, campo {self.field.name}: {shown}"


def check_header(record_set: RecordSet) -> None:
    """Raise :class:`InvalidHeader` unless the header matches exactly."""

    if record_set.header != HEADER_LINE:
        raise InvalidHeader(record_set.header)


def check_amounts(record_set: RecordSet) -> None:
    """Raise :class:`InvalidAmount` for the first row with a malformed amount."""

    for index, row in enumerate(record_set.rows):
        cells = split_row(row)
        for field in AMOUNT_FIELDS:
            value = cell(cells, field)
            if not is_valid_amount(value):
                raise InvalidAmount(
                    line_number=line_number(index), field=field, value=value
                )


def validate(record_set: RecordSet) -> RecordSet:
    """Check header and amount formats, returning ``record_set`` unchanged."""

    check_header(record_set)
    check_amounts(record_set)
    LOGGER.debug("Validated %d rows", len(record_set.rows))
    return record_set


__all__ = [
    "InvalidAmount",
    "InvalidHeader",
    "InvoiceDataError",
    "check_amounts",
    "check_header",
    "validate",
]
