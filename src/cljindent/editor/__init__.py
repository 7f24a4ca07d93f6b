"""Editor integration exports."""

from cljindent.editor.adapter import (
    IndentContext,
    IndentService,
    Insertion,
    StringDocument,
    clojure_smart_indent,
    insert_newline_and_indent,
    smart_indent_extension,
)

__all__ = [
    "IndentContext",
    "IndentService",
    "Insertion",
    "StringDocument",
    "clojure_smart_indent",
    "insert_newline_and_indent",
    "smart_indent_extension",
]
