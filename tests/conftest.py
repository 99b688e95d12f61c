from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

HEADER = "Num_factura,Fecha,Bruto,Neto,IVA,IGIC,Concepto,CIF_cliente,NIF_cliente"


def _invoice_line(
    num_factura: object = 1,
    fecha: str = "02/05/2019",
    bruto: str = "1200",
    neto: str = "1000",
    iva: str = "20",
    igic: str = "",
    concepto: str = "ACERLaptop",
    cif_cliente: str = "B76430134",
    nif_cliente: str = "",
) -> str:
    return ",".join(
        [
            str(num_factura),
            fecha,
            bruto,
            neto,
            iva,
            igic,
            concepto,
            cif_cliente,
            nif_cliente,
        ]
    )


@pytest.fixture
def header() -> str:
    return HEADER


@pytest.fixture
def invoice_line():
    """Factory for a valid row; keyword arguments override single columns."""

    return _invoice_line


@pytest.fixture
def export_text(header):
    def _build(*rows: str) -> str:
        return "\n".join((header, *rows))

    return _build
