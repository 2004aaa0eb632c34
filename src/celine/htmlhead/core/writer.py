# celine/htmlhead/core/writer.py
"""
Stream-backed HTML sink.

Elements are rendered through a Jinja2 environment with autoescaping on,
so attribute values are HTML-escaped by MarkupSafe. Script bodies are
passed through as markup: emitters have already escaped the data they
embed, and script content is raw text in HTML.
"""
from __future__ import annotations

import io
from typing import Callable, TextIO

from jinja2 import Environment, StrictUndefined
from markupsafe import Markup

from celine.htmlhead.contracts.sink import Doctype, Element, Serialization
from celine.htmlhead.core.config import Settings, settings as default_settings
from celine.htmlhead.core.errors import SinkClosedError

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source"}
)

_ELEMENT_TEMPLATE = (
    "<{{ name }}"
    "{% for key, value in attrs %}"
    "{% if value is sameas true %} {{ key }}{% if xml %}=\"{{ key }}\"{% endif %}"
    "{% elif value is not sameas false %} {{ key }}=\"{{ value }}\"{% endif %}"
    "{% endfor %}"
    "{% if void %}{% if xml %} /{% endif %}>"
    "{% else %}>{{ body }}</{{ name }}>{% endif %}"
)


def _create_jinja_env() -> Environment:
    return Environment(
        autoescape=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


_jinja_env = _create_jinja_env()
_element_template = _jinja_env.from_string(_ELEMENT_TEMPLATE)


class HtmlWriter:
    """Metadata and phrasing sink that writes HTML to a text stream.

    The writer does not own ``out``; :meth:`close` only stops further
    writes through this writer.
    """

    def __init__(
        self,
        out: TextIO,
        *,
        doctype: Doctype = Doctype.HTML5,
        serialization: Serialization = Serialization.HTML,
        charset: str = "UTF-8",
        indent: str = "",
    ) -> None:
        self._out = out
        self._doctype = doctype
        self._serialization = serialization
        self._charset = charset
        self._indent = indent
        self._closed = False

    @classmethod
    def from_settings(
        cls, out: TextIO, cfg: Settings | None = None, **kwargs
    ) -> HtmlWriter:
        cfg = cfg or default_settings
        kwargs.setdefault("doctype", cfg.default_doctype)
        kwargs.setdefault("charset", cfg.charset)
        return cls(out, **kwargs)

    @property
    def doctype(self) -> Doctype:
        return self._doctype

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def serialization(self) -> Serialization:
        return self._serialization

    @property
    def closed(self) -> bool:
        return self._closed

    # -- Sink ----------------------------------------------------------------

    def write(self, element: Element) -> None:
        self.write_text(self.render(element) + "\n")

    def write_text(self, text: str) -> None:
        if self._closed:
            raise SinkClosedError("Cannot write to a closed HtmlWriter")
        self._out.write(text)

    # -- Extras --------------------------------------------------------------

    def write_doctype(self) -> None:
        self.write_text(self._doctype.declaration + "\n")

    def close(self) -> None:
        self._closed = True

    def render(self, element: Element) -> str:
        """Render one element without writing it."""
        attrs = element.attrs
        # HTML 4.01 requires the script language to be declared
        if (
            element.name == "script"
            and not self._doctype.is_modern
            and element.attr("type") is None
        ):
            attrs = (("type", "text/javascript"), *attrs)

        void = element.name in VOID_ELEMENTS
        if void and element.body:
            raise ValueError(f"Void element <{element.name}> cannot have a body")

        return _element_template.render(
            name=element.name,
            attrs=attrs,
            void=void,
            xml=self._serialization is Serialization.XML,
            body=self._format_body(element.body),
        )

    def _format_body(self, body: str | None) -> Markup:
        if not body:
            return Markup("")
        lines = [self._indent + line for line in body.split("\n")]
        if self._serialization is Serialization.XML:
            lines = [self._indent + "//<![CDATA[", *lines, self._indent + "//]]>"]
        return Markup("\n" + "\n".join(lines) + "\n")


def render_to_string(callback: Callable[[HtmlWriter], None], **writer_kwargs) -> str:
    """Run ``callback`` against a fresh in-memory writer and return its output."""
    buf = io.StringIO()
    writer = HtmlWriter(buf, **writer_kwargs)
    try:
        callback(writer)
    finally:
        writer.close()
    return buf.getvalue()
