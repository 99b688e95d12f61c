"""Validation and filtering of comma-separated invoice exports.

The public entry points are :func:`parse`, :func:`validate` and
:func:`filter_invoices`; :func:`run_pipeline` chains them and also explains
every dropped row.
"""

from .filters import RowRejection, explain_rejections, export_rejections, filter_invoices
from .parser import RecordSet, parse, render
from .pipeline import FilterOutcome, filter_text, run_pipeline
from .schema import HEADER_LINE, INVOICE_FIELDS, InvoiceField
from .validator import InvalidAmount, InvalidHeader, InvoiceDataError, validate

__version__ = "0.1.0"

__all__ = [
    "FilterOutcome",
    "HEADER_LINE",
    "INVOICE_FIELDS",
    "InvalidAmount",
    "InvalidHeader",
    "InvoiceDataError",
    "InvoiceField",
    "RecordSet",
    "RowRejection",
    "explain_rejections",
    "export_rejections",
    "filter_invoices",
    "filter_text",
    "parse",
    "render",
    "run_pipeline",
    "validate",
]
