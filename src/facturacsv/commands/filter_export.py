"""Remove invalid invoices from an export and report what was dropped.

Uso::

    facturacsv filter facturas.csv -o facturas_filtradas.csv --report rechazos.xlsx

Sin ``--output`` el resultado se escribe en la salida estándar.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from ..filters import export_rejections
from ..pipeline import run_pipeline
from ..validator import InvalidAmount, InvoiceDataError
from ._io import DEFAULT_ENCODING, configure_logging, read_export, write_export

LOGGER = logging.getLogger("facturacsv.commands.filter_export")

REPORT_ENV_VAR = "FACTURACSV_REPORT_PATH"


def default_report_path() -> Path | None:
    """Return the report destination configured in the environment, if any."""

    value = os.getenv(REPORT_ENV_VAR, "").strip()
    return Path(value).expanduser() if value else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Filtra las facturas que incumplen las reglas de negocio."
    )
    parser.add_argument("input", type=Path, help="Fichero CSV de facturas")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Fichero donde grabar el CSV filtrado (por defecto: salida estándar)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help=f"Libro Excel con las filas descartadas (o variable {REPORT_ENV_VAR})",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Codificación de entrada y salida (por defecto: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Mostrar mensajes de depuración"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.input.exists():
        print(f"[ERROR] Fichero no encontrado: {args.input}", file=sys.stderr)
        return 2

    try:
        export = read_export(args.input, args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"[ERROR] No se pudo leer {args.input}: {exc}", file=sys.stderr)
        return 2

    try:
        outcome = run_pipeline(export.text)
    except InvalidAmount as exc:
        print(f"[ERROR] {exc} ({exc.describe()})", file=sys.stderr)
        return 1
    except InvoiceDataError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    LOGGER.info(
        "%d facturas conservadas, %d descartadas",
        outcome.kept,
        len(outcome.rejections),
    )

    if args.output is None:
        sys.stdout.write(outcome.to_text())
        if export.trailing_newline:
            sys.stdout.write("\n")
    else:
        try:
            write_export(
                args.output,
                outcome.to_text(),
                trailing_newline=export.trailing_newline,
                encoding=args.encoding,
            )
        except OSError as exc:
            print(f"[ERROR] No se pudo grabar {args.output}: {exc}", file=sys.stderr)
            return 2
        LOGGER.info("CSV filtrado guardado en: %s", args.output)

    report = args.report or default_report_path()
    if report is not None:
        try:
            destination = export_rejections(outcome.rejections, destination=report)
        except OSError as exc:
            print(f"[ERROR] No se pudo grabar el informe {report}: {exc}", file=sys.stderr)
            return 2
        LOGGER.info("Informe de rechazos guardado en: %s", destination)

    return 0


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
