"""Indentation rules for a line whose context is known."""

from __future__ import annotations

from cljindent.indent.classifier import CharTag, Classification
from cljindent.indent.forms import BODY_INDENT, DEFAULT_INDENT, is_body_form
from cljindent.indent.scanner import CLOSERS, OPENERS, is_not_whitespace, scan, skip_comments


def _is_element_boundary(source: Classification, index: int) -> bool:
    if index >= len(source):
        return True
    tag = source.tags[index]
    if tag is CharTag.COMMENT:
        return True
    ch = source.text[index]
    return tag is CharTag.NONE and (ch.isspace() or ch in CLOSERS)


def find_element_end(source: Classification, start: int) -> int:
    """Index of the last character of the element beginning at start.

    Nested forms are read whole, so ``#{1 2}`` or ``(a b)`` is one element.
    """
    depth = 0

    def at_end(i: int, ch: str) -> bool:
        nonlocal depth
        if source.is_code(i):
            if ch in OPENERS:
                depth += 1
            elif ch in CLOSERS:
                depth -= 1
        return depth <= 0 and _is_element_boundary(source, i + 1)

    end = scan(source, start, len(source) - 1, at_end, skip=lambda _i: False)
    return len(source) - 1 if end is None else end


def form_indentation(source: Classification, open_index: int) -> int:
    """Column for a line inside the form opened at open_index.

    Lists headed by a body form get a fixed offset, other lists align with
    their first argument when it shares the opener's line. Everything else,
    vectors and maps included, indents one column past the opener.
    """
    open_column = source.column(open_index)
    if source.text[open_index] != "(":
        return open_column + DEFAULT_INDENT

    last = len(source) - 1
    first = scan(source, open_index + 1, last, is_not_whitespace, skip=skip_comments(source))
    if first is None:
        return open_column + DEFAULT_INDENT

    end = find_element_end(source, first)
    if is_body_form(source.text[first : end + 1]):
        return open_column + BODY_INDENT

    argument = scan(source, end + 1, last, is_not_whitespace, skip=skip_comments(source))
    if argument is not None and source.line_start(argument) == source.line_start(open_index):
        return source.column(argument)
    return open_column + DEFAULT_INDENT


def line_indentation(source: Classification, line_start: int) -> int:
    """Width of the leading whitespace of the line starting at line_start."""
    width = 0
    for ch in source.text[line_start:]:
        if ch not in " \t":
            break
        width += 1
    return width
