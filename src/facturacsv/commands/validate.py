"""Check an invoice export without filtering it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..parser import parse
from ..validator import InvalidAmount, InvoiceDataError, validate
from ._io import DEFAULT_ENCODING, configure_logging, read_export

LOGGER = logging.getLogger("facturacsv.commands.validate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Comprueba la cabecera y los importes de una exportación de facturas."
    )
    parser.add_argument("input", type=Path, help="Fichero CSV de facturas")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Codificación del fichero (por defecto: %(default)s)",
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
        record_set = validate(parse(export.text))
    except InvalidAmount as exc:
        print(f"[ERROR] {exc} ({exc.describe()})", file=sys.stderr)
        return 1
    except InvoiceDataError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    LOGGER.info("%s: %d facturas con formato válido", args.input, len(record_set.rows))
    print(f"[OK] {args.input}")
    return 0


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
