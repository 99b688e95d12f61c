"""Column schema of the invoice export."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class InvoiceField:
    """A named column of the export and its position in every row."""

    name: str
    position: int


def _build_fields(names: Sequence[str]) -> tuple[InvoiceField, ...]:
    return tuple(InvoiceField(name, position) for position, name in enumerate(names))


FIELD_SEPARATOR = ","
LINE_SEPARATOR = "\n"

INVOICE_FIELDS: tuple[InvoiceField, ...] = _build_fields(
    (
        "Num_factura",
        "Fecha",
        "Bruto",
        "Neto",
        "IVA",
        "IGIC",
        "Concepto",
        "CIF_cliente",
        "NIF_cliente",
    )
)

(
    NUM_FACTURA,
    FECHA,
    BRUTO,
    NETO,
    IVA,
    IGIC,
    CONCEPTO,
    CIF_CLIENTE,
    NIF_CLIENTE,
) = INVOICE_FIELDS

AMOUNT_FIELDS: tuple[InvoiceField, ...] = (BRUTO, NETO, IVA, IGIC)

HEADER_LINE = FIELD_SEPARATOR.join(field.name for field in INVOICE_FIELDS)


def split_row(row: str) -> list[str]:
    """Split ``row`` into cells.

    Quoted values are not supported: the export never escapes the separator.
    """

    return row.split(FIELD_SEPARATOR)


def cell(cells: Sequence[str], field: InvoiceField) -> str | None:
    """Return the value of ``field`` or ``None`` when the row is too short."""

    if field.position < len(cells):
        return cells[field.position]
    return None


__all__ = [
    "AMOUNT_FIELDS",
    "BRUTO",
    "CIF_CLIENTE",
    "CONCEPTO",
    "FECHA",
    "FIELD_SEPARATOR",
    "HEADER_LINE",
    "IGIC",
    "INVOICE_FIELDS",
    "IVA",
    "InvoiceField",
    "LINE_SEPARATOR",
    "NETO",
    "NIF_CLIENTE",
    "NUM_FACTURA",
    "cell",
    "split_row",
]
