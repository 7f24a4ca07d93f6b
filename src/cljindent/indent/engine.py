"""Top-level indentation decision for the line after the cursor."""

from __future__ import annotations

from cljindent.core.logging import get_logger
from cljindent.indent.classifier import Classification, classify
from cljindent.indent.locator import (
    find_last_code_character,
    find_open_delimiter,
    find_unmatched_delimiter_in_line,
)
from cljindent.indent.rules import form_indentation, line_indentation

log = get_logger(__name__)


def calculate_indentation(text: str) -> int:
    """Number of spaces to put on a new line inserted after text.

    Args:
        text: Everything in the document before the cursor.

    Returns:
        Non-negative column count. Zero for empty or whitespace-only text
        and whenever the cursor sits inside an unterminated string.
    """
    source = classify(text)
    if source.ends_in_string:
        return 0

    last = find_last_code_character(source)
    if last is None:
        return 0
    return indentation_from(source, last, source.line_start(last))


def indentation_from(source: Classification, from_index: int, line_start: int) -> int:
    """Decide indentation from the code at or before from_index on one line.

    An unmatched opener on the line selects the form rule, an unmatched
    closer dedents to where its form was opened, and a balanced line keeps
    its own leading whitespace.

    Dedenting continues on the opener's line as though the code ended just
    before the opener. Forms chained across many lines are walked
    iteratively, so the work per call is bounded by the text, not the stack.
    """
    while True:
        delimiter = find_unmatched_delimiter_in_line(source, from_index, line_start)
        if delimiter is None:
            break
        if delimiter.is_opener:
            return form_indentation(source, delimiter.index)
        open_index = _matching_opener(source, delimiter.index)
        if open_index is None:
            break
        from_index, line_start = open_index - 1, source.line_start(open_index)
    return line_indentation(source, line_start)


def dedent_indentation(source: Classification, close_index: int) -> int | None:
    """Indentation for a sibling of the form closed at close_index.

    Returns None when the closer has no opener.
    """
    open_index = _matching_opener(source, close_index)
    if open_index is None:
        return None
    return indentation_from(source, open_index - 1, source.line_start(open_index))


def _matching_opener(source: Classification, close_index: int) -> int | None:
    open_index = find_open_delimiter(source, close_index - 1)
    if open_index is None:
        log.debug("unbalanced_closer", index=close_index)
    return open_index
