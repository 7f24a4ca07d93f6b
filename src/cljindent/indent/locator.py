"""Structural searches built on the scanner primitive."""

from __future__ import annotations

from dataclasses import dataclass

from cljindent.indent.classifier import Classification
from cljindent.indent.scanner import CLOSERS, OPENERS, is_not_whitespace, scan


@dataclass(frozen=True, slots=True)
class UnmatchedDelimiter:
    """A delimiter whose partner lies outside the searched line."""

    index: int
    is_opener: bool


def find_last_code_character(source: Classification) -> int | None:
    """Index of the last non-whitespace character outside strings and comments."""
    return scan(source, len(source) - 1, 0, is_not_whitespace)


def find_unmatched_delimiter_in_line(
    source: Classification, from_index: int, line_start: int
) -> UnmatchedDelimiter | None:
    """Walk back from from_index to line_start looking for an unbalanced delimiter.

    An opener met at depth zero wins immediately. Otherwise the outermost
    closer left unbalanced when the line is exhausted is returned.
    """
    if from_index < line_start:
        return None

    depth = 0
    closer: int | None = None

    def visit(i: int, ch: str) -> bool:
        nonlocal depth, closer
        if ch in CLOSERS:
            depth += 1
            if depth == 1:
                closer = i
        elif ch in OPENERS:
            if depth == 0:
                return True
            depth -= 1
            if depth == 0:
                closer = None
        return False

    opener = scan(source, from_index, line_start, visit)
    if opener is not None:
        return UnmatchedDelimiter(opener, is_opener=True)
    if closer is not None:
        return UnmatchedDelimiter(closer, is_opener=False)
    return None


def find_open_delimiter(source: Classification, from_index: int, limit: int = 0) -> int | None:
    """Find the opener that balances a closer sitting just after from_index.

    Unlike the line search this crosses line boundaries, down to limit.
    """
    if from_index < limit:
        return None

    depth = 0

    def visit(_i: int, ch: str) -> bool:
        nonlocal depth
        if ch in CLOSERS:
            depth += 1
        elif ch in OPENERS:
            if depth == 0:
                return True
            depth -= 1
        return False

    return scan(source, from_index, limit, visit)
