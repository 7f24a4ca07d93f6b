"""CLI utilities."""

from dataclasses import dataclass
from pathlib import Path

import click

from cljindent.core.errors import InputError


@dataclass(frozen=True, slots=True)
class CursorText:
    """Document text with the cursor marker removed."""

    text: str
    pos: int
    marker: str | None = None


def read_source(path: Path | None) -> str:
    """Read PATH, or stdin when no path is given."""
    if path is None:
        return click.get_text_stream("stdin").read()
    return path.read_text(encoding="utf-8")


def locate_cursor(
    raw: str,
    *,
    marker: str,
    pos: int | None = None,
    at_end: bool = False,
) -> CursorText:
    """Resolve the cursor position in raw input.

    An explicit pos wins, then at_end; otherwise the first occurrence of
    marker is the cursor and is removed from the text.

    Raises:
        InputError: If pos is out of range or the marker is absent.
    """
    if pos is not None:
        if not 0 <= pos <= len(raw):
            raise InputError.cursor_out_of_range(pos, len(raw))
        return CursorText(text=raw, pos=pos)
    if at_end:
        return CursorText(text=raw, pos=len(raw))

    index = raw.find(marker)
    if index < 0:
        raise InputError.missing_cursor(marker)
    return CursorText(text=raw[:index] + raw[index + len(marker) :], pos=index, marker=marker)
