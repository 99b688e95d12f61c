"""Registo tabular en Excel de las facturas descartadas.

Las filas que no superan el filtrado se vuelcan en un libro ``.xlsx`` para
que el equipo de contabilidad pueda revisarlas sin abrir el fichero de
exportación original.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Protocol, Sequence


class RowLike(Protocol):
    """Protocolo para filas serializables en formato tabular."""

    def as_cells(self) -> Iterable[str]:
        """Devuelve los valores ordenados a escribir en la hoja."""


@dataclass(slots=True)
class ExcelLoggerConfig:
    """Configuración usada por :class:`ExcelLogger`."""

    columns: Sequence[str]
    filename: str = "facturas-rechazadas.xlsx"
    sheet_title: str = "Rechazos"
    column_widths: Mapping[str, int] | None = None


class ExcelLogger:
    """Graba registros en Excel utilizando :mod:`openpyxl`.

    Cada llamada a :meth:`write_rows` crea un libro nuevo con la cabecera de
    :class:`ExcelLoggerConfig` y sobrescribe el fichero de destino.
    """

    def __init__(self, config: ExcelLoggerConfig) -> None:
        self.config = config

    def write_rows(self, rows: Iterable[RowLike | Iterable[str]]) -> Path:
        """Persistir ``rows`` en un fichero Excel y devolver la ruta final."""

        from openpyxl import Workbook

        destination = Path(self.config.filename)
        destination.parent.mkdir(parents=True, exist_ok=True)

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.config.sheet_title

        if self.config.columns:
            worksheet.append(list(self.config.columns))
        for column, width in (self.config.column_widths or {}).items():
            worksheet.column_dimensions[column].width = width

        for row in rows:
            if hasattr(row, "as_cells"):
                cells = list(row.as_cells())  # type: ignore[arg-type]
            else:
                cells = list(row)  # type: ignore[arg-type]
            worksheet.append(cells)

        workbook.save(destination)
        return destination


__all__ = ["RowLike", "ExcelLoggerConfig", "ExcelLogger"]
