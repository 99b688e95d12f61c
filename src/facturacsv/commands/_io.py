"""File helpers shared by the command line tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..schema import LINE_SEPARATOR

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class ExportText:
    """Contents of an export file with its final newline detached."""

    text: str
    trailing_newline: bool


def read_export(path: Path, encoding: str = DEFAULT_ENCODING) -> ExportText:
    """Read ``path`` and strip one trailing newline.

    Editors usually end files with a newline; left in place it would become
    an empty record that fails amount validation.
    """

    raw = path.read_text(encoding=encoding)
    if raw.endswith(LINE_SEPARATOR):
        return ExportText(raw[: -len(LINE_SEPARATOR)], True)
    return ExportText(raw, False)


def write_export(
    path: Path, text: str, *, trailing_newline: bool, encoding: str = DEFAULT_ENCODING
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if trailing_newline:
        text += LINE_SEPARATOR
    path.write_text(text, encoding=encoding)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
