"""Command implementations exposed through :mod:`facturacsv.cli`."""

from . import filter_export, validate

__all__ = ["filter_export", "validate"]
