"""Parse, validate and filter an invoice export in a single call."""

from __future__ import annotations

from dataclasses import dataclass

from .filters import RowRejection, explain_rejections, filter_invoices
from .parser import RecordSet, parse, render
from .validator import validate


@dataclass(frozen=True)
class FilterOutcome:
    """Filtered record set and the explanation of every dropped row."""

    record_set: RecordSet
    rejections: tuple[RowRejection, ...] = ()

    @property
    def kept(self) -> int:
        return len(self.record_set.rows)

    def to_text(self) -> str:
        return render(self.record_set)


def run_pipeline(raw_text: str) -> FilterOutcome:
    """Run the full pipeline, raising on the first validation failure."""

    record_set = validate(parse(raw_text))
    return FilterOutcome(
        filter_invoices(record_set), tuple(explain_rejections(record_set))
    )


def filter_text(raw_text: str) -> str:
    """Return ``raw_text`` with every invalid invoice row removed."""

    return render(filter_invoices(validate(parse(raw_text))))


__all__ = ["FilterOutcome", "filter_text", "run_pipeline"]
