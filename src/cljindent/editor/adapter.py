"""Glue between a host editor and the indentation engine.

The host supplies the document through :class:`IndentContext` and an
extension point through :class:`IndentService`. The engine only ever sees
the text before the cursor.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from cljindent.core.errors import InputError
from cljindent.core.logging import get_logger
from cljindent.indent.engine import calculate_indentation

log = get_logger(__name__)

IndentCallback = Callable[["IndentContext", int], int | None]


class IndentContext(Protocol):
    """Read access to the live document of a host editor."""

    def text_before(self, pos: int) -> str:
        """Document text from the start up to, not including, pos."""
        ...


class IndentService(Protocol):
    """Host extension point accepting an indentation callback.

    ``of`` wraps the callback in whatever extension object the host uses to
    register indentation providers.
    """

    def of(self, callback: IndentCallback) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class StringDocument:
    """IndentContext over a plain string."""

    text: str

    def text_before(self, pos: int) -> str:
        if not 0 <= pos <= len(self.text):
            raise InputError.cursor_out_of_range(pos, len(self.text))
        return self.text[:pos]


@dataclass(frozen=True, slots=True)
class Insertion:
    """Result of inserting a newline plus indentation."""

    text: str
    cursor: int
    column: int


def clojure_smart_indent(context: IndentContext, pos: int) -> int:
    """Indentation callback for a line break inserted at pos."""
    column = calculate_indentation(context.text_before(pos))
    log.debug("smart_indent", pos=pos, column=column)
    return column


def smart_indent_extension(indent_service: IndentService) -> Any:
    """Register clojure_smart_indent with the host's indentation service."""
    return indent_service.of(clojure_smart_indent)


def insert_newline_and_indent(text: str, pos: int) -> Insertion:
    """Break the line at pos and indent the new line.

    Text after pos is kept as-is; the cursor lands after the inserted spaces.

    Raises:
        InputError: If pos lies outside text.
    """
    column = clojure_smart_indent(StringDocument(text), pos)
    inserted = "\n" + " " * column
    return Insertion(
        text=text[:pos] + inserted + text[pos:],
        cursor=pos + len(inserted),
        column=column,
    )
