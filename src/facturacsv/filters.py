"""Business-rule filtering of validated invoice rows.

Every rule is evaluated against the split cells of one row. The only rule
that depends on other rows, invoice number uniqueness, is built from a
frequency table of the whole input before any row is judged, so all copies
of a repeated number are dropped together.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from .parser import RecordSet
from .schema import (
    BRUTO,
    CIF_CLIENTE,
    IGIC,
    IVA,
    NETO,
    NIF_CLIENTE,
    NUM_FACTURA,
    InvoiceField,
    cell,
    split_row,
)
from .utils import line_number, parse_amount

LOGGER = logging.getLogger("facturacsv.filters")

RowCheck = Callable[[Sequence[str]], bool]


@dataclass(frozen=True)
class RowRule:
    """A named predicate a row must satisfy to be kept."""

    code: str
    message: str
    check: RowCheck


@dataclass(frozen=True)
class RowRejection:
    """A dropped row together with every rule it failed."""

    line_number: int
    invoice_number: str
    codes: tuple[str, ...]
    reasons: tuple[str, ...]
    row: str

    @property
    def message(self) -> str:
        return "; ".join(self.reasons)

    def as_cells(self) -> list[str]:
        """Serialise the rejection for tabular export."""

        return [
            str(self.line_number),
            self.invoice_number,
            ", ".join(self.codes),
            self.message,
            self.row,
        ]


def _is_filled(value: str | None) -> bool:
    # A missing column is not the empty string, so it counts as filled.
    return value != ""


def _exactly_one_filled(first: InvoiceField, second: InvoiceField) -> RowCheck:
    def check(cells: Sequence[str]) -> bool:
        return _is_filled(cell(cells, first)) != _is_filled(cell(cells, second))

    return check


def _tax_correctly_calculated(tax: InvoiceField) -> RowCheck:
    def check(cells: Sequence[str]) -> bool:
        rate = cell(cells, tax)
        if rate == "":
            return True
        gross = parse_amount(cell(cells, BRUTO))
        net = parse_amount(cell(cells, NETO))
        # Exact float comparison; rates that do not divide evenly may fail.
        return gross == net * parse_amount(rate) / 100 + net

    return check


ROW_RULES: tuple[RowRule, ...] = (
    RowRule(
        "TAX_CODE_NOT_UNIQUE",
        "La factura debe tener exactamente uno de IVA o IGIC.",
        _exactly_one_filled(IVA, IGIC),
    ),
    RowRule(
        "IDENTIFIER_NOT_UNIQUE",
        "La factura debe tener exactamente uno de CIF_cliente o NIF_cliente.",
        _exactly_one_filled(CIF_CLIENTE, NIF_CLIENTE),
    ),
    RowRule(
        "IVA_WRONGLY_CALCULATED",
        "Bruto no coincide con Neto más el IVA aplicado.",
        _tax_correctly_calculated(IVA),
    ),
    RowRule(
        "IGIC_WRONGLY_CALCULATED",
        "Bruto no coincide con Neto más el IGIC aplicado.",
        _tax_correctly_calculated(IGIC),
    ),
)


def invoice_number_frequencies(rows_cells: Iterable[Sequence[str]]) -> Counter:
    """Count how many times each invoice number appears in the input."""

    return Counter(cell(cells, NUM_FACTURA) for cells in rows_cells)


def unique_invoice_number_rule(rows_cells: Iterable[Sequence[str]]) -> RowRule:
    """Build the uniqueness rule from the frequency table of ``rows_cells``."""

    frequencies = invoice_number_frequencies(rows_cells)
    return RowRule(
        "DUPLICATE_INVOICE_NUMBER",
        "El número de factura aparece más de una vez.",
        lambda cells: frequencies[cell(cells, NUM_FACTURA)] == 1,
    )


def build_rules(rows_cells: Sequence[Sequence[str]]) -> tuple[RowRule, ...]:
    """Return the full, ordered rule set for the given rows."""

    return (unique_invoice_number_rule(rows_cells), *ROW_RULES)


def _split_rows(record_set: RecordSet) -> list[list[str]]:
    return [split_row(row) for row in record_set.rows]


def filter_invoices(record_set: RecordSet) -> RecordSet:
    """Keep the rows that satisfy every rule, preserving their order.

    ``record_set`` must already be validated; this function never raises for
    validated input and always returns the original header.
    """

    rows_cells = _split_rows(record_set)
    rules = build_rules(rows_cells)
    kept = [
        row
        for row, cells in zip(record_set.rows, rows_cells)
        if all(rule.check(cells) for rule in rules)
    ]
    LOGGER.debug(
        "Kept %d of %d rows (%d dropped)",
        len(kept),
        len(record_set.rows),
        len(record_set.rows) - len(kept),
    )
    return record_set.with_rows(kept)


def explain_rejections(record_set: RecordSet) -> list[RowRejection]:
    """List the rows :func:`filter_invoices` drops and every rule each fails."""

    rows_cells = _split_rows(record_set)
    rules = build_rules(rows_cells)

    rejections: list[RowRejection] = []
    for index, (row, cells) in enumerate(zip(record_set.rows, rows_cells)):
        failed = [rule for rule in rules if not rule.check(cells)]
        if not failed:
            continue
        rejection = RowRejection(
            line_number=line_number(index),
            invoice_number=cell(cells, NUM_FACTURA) or "",
            codes=tuple(rule.code for rule in failed),
            reasons=tuple(rule.message for rule in failed),
            row=row,
        )
        LOGGER.debug(
            "Line %d (factura %r) dropped: %s",
            rejection.line_number,
            rejection.invoice_number,
            ", ".join(rejection.codes),
        )
        rejections.append(rejection)

    return rejections


REPORT_COLUMNS = ("line", "invoice", "codes", "message", "row")
_REPORT_WIDTHS = {"A": 8, "B": 14, "C": 40, "D": 70, "E": 80}


def export_rejections(
    rejections: Iterable[RowRejection], *, destination: Path
) -> Path:
    """Export rejected rows to an Excel report."""

    from .logging import ExcelLogger, ExcelLoggerConfig

    logger = ExcelLogger(
        ExcelLoggerConfig(
            columns=REPORT_COLUMNS,
            filename=str(destination),
            column_widths=_REPORT_WIDTHS,
        )
    )
    return logger.write_rows(rejections)


__all__ = [
    "REPORT_COLUMNS",
    "ROW_RULES",
    "RowRejection",
    "RowRule",
    "build_rules",
    "explain_rejections",
    "export_rejections",
    "filter_invoices",
    "invoice_number_frequencies",
    "unique_invoice_number_rule",
]
