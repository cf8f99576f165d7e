"""Attribute text: the four ways a DOT attribute value can be written.

Each variant belongs to a different DOT sub-language:

    RAW      plain token, emitted verbatim (``LR``, ``filled``, ``1.5``)
    ESCAPED  escString, double-quoted; backslashes are left alone so that
             graphviz escapes such as ``\\n``, ``\\l`` and ``\\r`` survive
    HTML     HTML-like label, wrapped in ``<`` ``>`` with no escaping
    QUOTED   quoted literal, double-quoted with every backslash doubled
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
}


class TextKind(Enum):
    """Which escaping contract an attribute value follows."""

    RAW = "raw"
    ESCAPED = "escaped"
    HTML = "html"
    QUOTED = "quoted"


@dataclass(frozen=True)
class AttributeText:
    """A single attribute value together with its escaping contract."""

    kind: TextKind
    text: str

    @classmethod
    def raw(cls, text: str) -> AttributeText:
        return cls(TextKind.RAW, text)

    @classmethod
    def escaped(cls, text: str) -> AttributeText:
        return cls(TextKind.ESCAPED, text)

    @classmethod
    def html(cls, text: str) -> AttributeText:
        return cls(TextKind.HTML, text)

    @classmethod
    def quoted(cls, text: str) -> AttributeText:
        return cls(TextKind.QUOTED, text)

    def dot_string(self) -> str:
        """Render the value as it appears on the right of ``key=``."""
        if self.kind is TextKind.RAW:
            return self.text
        if self.kind is TextKind.ESCAPED:
            return f'"{escape_text(self.text, keep_backslashes=True)}"'
        if self.kind is TextKind.HTML:
            return f"<{self.text}>"
        return f'"{escape_text(self.text)}"'

    def __str__(self) -> str:
        return self.dot_string()


def escape_text(text: str, keep_backslashes: bool = False) -> str:
    """Apply default character escaping to ``text``.

    Quotes, tabs, newlines and carriage returns get their short backslash
    forms. Other non-printable characters use Python's ``unicode_escape``
    spelling. Printable characters, non-ASCII included, pass through.
    """
    out: list[str] = []
    for ch in text:
        if ch == "\\" and keep_backslashes:
            out.append(ch)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            out.append(ch.encode("unicode_escape").decode("ascii"))
    return "".join(out)
