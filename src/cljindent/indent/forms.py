"""Symbols whose bodies indent by a fixed two columns.

Following the Clojure style guide, the arguments of these forms are not
aligned with the first argument; their body is indented two columns past
the opening parenthesis instead.
"""

BODY_FORMS: frozenset[str] = frozenset(
    {
        "->",
        "->>",
        "as->",
        "binding",
        "bound-fn",
        "case",
        "catch",
        "comment",
        "cond",
        "cond->",
        "cond->>",
        "condp",
        "def",
        "definterface",
        "defmethod",
        "defn",
        "defmacro",
        "defprotocol",
        "defrecord",
        "defstruct",
        "deftype",
        "do",
        "doseq",
        "dotimes",
        "doto",
        "extend",
        "extend-protocol",
        "extend-type",
        "fn",
        "for",
        "future",
        "if",
        "if-let",
        "if-not",
        "if-some",
        "let",
        "letfn",
        "locking",
        "loop",
        "ns",
        "proxy",
        "reify",
        "struct-map",
        "some->",
        "some->>",
        "try",
        "when",
        "when-first",
        "when-let",
        "when-not",
        "when-some",
        "while",
        "with-bindings",
        "with-bindings*",
        "with-in-str",
        "with-loading-context",
        "with-local-vars",
        "with-meta",
        "with-open",
        "with-out-str",
        "with-precision",
        "with-redefs",
        "with-redefs-fn",
    }
)

BODY_INDENT = 2
DEFAULT_INDENT = 1


def is_body_form(symbol: str) -> bool:
    return symbol in BODY_FORMS
