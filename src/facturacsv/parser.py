"""Structural split of the raw export into header and rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .schema import LINE_SEPARATOR


@dataclass(frozen=True)
class RecordSet:
    """Header line plus the record lines, in the order they were received."""

    header: str
    rows: tuple[str, ...] = ()

    def with_rows(self, rows: Iterable[str]) -> "RecordSet":
        """Return a copy sharing the header and holding ``rows``."""

        return RecordSet(self.header, tuple(rows))


def parse(raw_text: str) -> RecordSet:
    """Split ``raw_text`` into a :class:`RecordSet`.

    No validation happens here. A trailing newline leaves an empty last row,
    which the validator later reports as an invalid amount.
    """

    header, *rows = raw_text.split(LINE_SEPARATOR)
    return RecordSet(header, tuple(rows))


def render(record_set: RecordSet) -> str:
    """Join header and rows back into export text."""

    return LINE_SEPARATOR.join((record_set.header, *record_set.rows))


__all__ = ["RecordSet", "parse", "render"]
