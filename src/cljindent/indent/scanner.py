"""Bounded directional scan over classified source.

Every structural search in the engine is a call to :func:`scan` with a
different match predicate. Predicates receive the index and the character
and may close over mutable state such as a nesting depth.
"""

from __future__ import annotations

from collections.abc import Callable

from cljindent.indent.classifier import CharTag, Classification

OPENERS = frozenset("([{")
CLOSERS = frozenset(")]}")

Predicate = Callable[[int, str], bool]


def scan(
    source: Classification,
    start: int,
    limit: int,
    match: Predicate,
    skip: Callable[[int], bool] | None = None,
) -> int | None:
    """Return the first index in [start..limit] that is not skipped and matches.

    The scan runs forward when start <= limit and backward otherwise. Both
    bounds are inclusive and must lie inside the text; a bound outside it
    yields None. By default every tagged character (string, comment,
    escaped) is skipped.

    Returns:
        Matching index, or None when the range holds no match.
    """
    size = len(source.text)
    if not (0 <= start < size and 0 <= limit < size):
        return None
    if skip is None:
        skip = _skip_tagged(source)

    step = 1 if start <= limit else -1

    for i in range(start, limit + step, step):
        if skip(i):
            continue
        if match(i, source.text[i]):
            return i
    return None


def _skip_tagged(source: Classification) -> Callable[[int], bool]:
    tags = source.tags
    return lambda i: tags[i] is not CharTag.NONE


def skip_comments(source: Classification) -> Callable[[int], bool]:
    """Skip predicate that lets strings and escapes through but hides comments."""
    tags = source.tags
    return lambda i: tags[i] is CharTag.COMMENT


def is_not_whitespace(_index: int, ch: str) -> bool:
    return not ch.isspace()
