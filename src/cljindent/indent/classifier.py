"""Per-character classification of Clojure source.

One left-to-right pass tags every character that sits inside a string
literal, inside a line comment, or directly after a backslash. Tagged
characters are structurally inert: delimiters among them never open or
close a form.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CharTag(IntEnum):
    """Classification of a single character."""

    NONE = 0
    ESCAPED = 1
    COMMENT = 2
    STRING = 3


@dataclass(frozen=True, slots=True)
class Classification:
    """Source text together with its per-character tags.

    Attributes:
        text: The text preceding the cursor.
        tags: One CharTag per character of text.
        ends_in_string: True when text stops inside an unterminated string.
    """

    text: str
    tags: tuple[CharTag, ...]
    ends_in_string: bool

    def __len__(self) -> int:
        return len(self.text)

    def is_code(self, index: int) -> bool:
        return self.tags[index] is CharTag.NONE

    def line_start(self, index: int) -> int:
        """Index of the first character of the line holding index."""
        return self.text.rfind("\n", 0, index) + 1

    def column(self, index: int) -> int:
        return index - self.line_start(index)


def classify(text: str) -> Classification:
    """Tag every character of text in a single pass.

    The order of the checks matters: a comment swallows everything up to the
    newline, an escape consumes exactly the next character, and only then
    are string and comment openings considered. The backslash itself stays
    untagged so character literals such as ``\\(`` read as code while the
    delimiter after them does not.
    """
    tags = [CharTag.NONE] * len(text)
    in_string = False
    in_comment = False
    escaped = False

    for i, ch in enumerate(text):
        if in_comment:
            tags[i] = CharTag.COMMENT
            if ch == "\n":
                in_comment = False
        elif escaped:
            tags[i] = CharTag.ESCAPED
            escaped = False
        elif ch == "\\":
            escaped = True
        elif in_string:
            if ch == '"':
                in_string = False
            else:
                tags[i] = CharTag.STRING
        elif ch == '"':
            in_string = True
            tags[i] = CharTag.STRING
        elif ch == ";":
            in_comment = True
            tags[i] = CharTag.COMMENT

    return Classification(text=text, tags=tuple(tags), ends_in_string=in_string)
