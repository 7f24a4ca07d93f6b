"""Clojure smart indentation.

Usage::

    from cljindent.indent import calculate_indentation

    calculate_indentation("(defn foo [x]")  # -> 2
"""

from cljindent.indent.classifier import CharTag, Classification, classify
from cljindent.indent.engine import calculate_indentation, dedent_indentation
from cljindent.indent.forms import BODY_FORMS, is_body_form
from cljindent.indent.locator import (
    UnmatchedDelimiter,
    find_last_code_character,
    find_open_delimiter,
    find_unmatched_delimiter_in_line,
)
from cljindent.indent.rules import form_indentation, line_indentation
from cljindent.indent.scanner import scan

__all__ = [
    "calculate_indentation",
    "dedent_indentation",
    "form_indentation",
    "line_indentation",
    # Classification
    "CharTag",
    "Classification",
    "classify",
    # Scanning
    "scan",
    "UnmatchedDelimiter",
    "find_last_code_character",
    "find_open_delimiter",
    "find_unmatched_delimiter_in_line",
    # Forms
    "BODY_FORMS",
    "is_body_form",
]
