#!/usr/bin/env python3
"""Wrapper para el comando de filtrado de facturas."""

from __future__ import annotations

import sys
from pathlib import Path

# Permite ejecutar el script desde el repositorio sin instalar el paquete.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_SRC_PATH = _PROJECT_ROOT / "src"
if _SRC_PATH.exists() and str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from facturacsv.commands.filter_export import main

if __name__ == "__main__":  # pragma: no cover - compatibilidad con ejecución directa
    raise SystemExit(main())
