# celine/htmlhead/contracts/sink.py
"""
Sink contracts for head snippet emitters.

A sink is the caller-owned, already-open document context that emitters
append to. Emitters never construct or close a sink; they only perform a
bounded, ordered sequence of writes against the one they are handed.

Two capability levels exist:

* :class:`ScriptSupportingSink` can only hold ``<script>`` elements.
* :class:`MetadataPhrasingSink` can also hold ``<link>`` and ``<meta>``
  elements and exposes the document type and character set.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union, runtime_checkable

AttrValue = Union[str, bool]


class Doctype(str, Enum):
    HTML5 = "html5"
    STRICT = "strict"
    TRANSITIONAL = "transitional"
    FRAMESET = "frameset"

    @property
    def is_modern(self) -> bool:
        return self is Doctype.HTML5

    @property
    def declaration(self) -> str:
        return _DOCTYPE_DECLARATIONS[self]


_DOCTYPE_DECLARATIONS: dict[Doctype, str] = {
    Doctype.HTML5: "<!DOCTYPE html>",
    Doctype.STRICT: (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" '
        '"http://www.w3.org/TR/html4/strict.dtd">'
    ),
    Doctype.TRANSITIONAL: (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
        '"http://www.w3.org/TR/html4/loose.dtd">'
    ),
    Doctype.FRAMESET: (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
        '"http://www.w3.org/TR/html4/frameset.dtd">'
    ),
}


class Serialization(str, Enum):
    HTML = "html"
    XML = "xml"


@dataclass(frozen=True)
class Element:
    """A single element to be appended to a sink.

    Attributes:
        name: Element name, e.g. ``"link"`` or ``"script"``.
        attrs: Ordered ``(name, value)`` pairs. A value of ``True`` is a
            boolean attribute (``async``); ``False`` omits the attribute.
        body: Raw script text. Emitters are responsible for escaping any
            untrusted data embedded in it.
    """

    name: str
    attrs: tuple[tuple[str, AttrValue], ...] = ()
    body: str | None = None

    def attr(self, name: str) -> AttrValue | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return None


@runtime_checkable
class ScriptSupportingSink(Protocol):
    """Sink that accepts script-supporting content only."""

    def write(self, element: Element) -> None:
        """Append one element."""
        ...

    def write_text(self, text: str) -> None:
        """Append raw text verbatim."""
        ...


@runtime_checkable
class MetadataPhrasingSink(ScriptSupportingSink, Protocol):
    """Sink that accepts metadata and phrasing content (link, meta, script)."""

    @property
    def doctype(self) -> Doctype:
        """Declared document type of the document being written."""
        ...

    @property
    def charset(self) -> str:
        """Character encoding the document is written in."""
        ...
