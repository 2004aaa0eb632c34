# celine/htmlhead/core/encoding.py
"""
Embedding of untrusted strings into generated markup.

Only two contexts are supported, each with its own escaping contract:

* a single URL query parameter value (RFC 3986 percent-encoding of the
  UTF-8 bytes);
* a double-quoted JavaScript string literal placed inside a ``<script>``
  body.

The script literal must evaluate back to exactly the input while never
containing a sequence that could end the surrounding element or CDATA
section early (``</``, ``<!--``, ``]]>``).
"""
from __future__ import annotations

import logging
from urllib.parse import quote

from celine.htmlhead.core.errors import EmbeddingError

logger = logging.getLogger(__name__)


def _build_script_escapes() -> dict[int, str]:
    table: dict[int, str] = {}
    # C0 controls and DEL
    for code in (*range(0x20), 0x7F):
        table[code] = f"\\x{code:02X}"
    # Lone surrogates cannot be written as-is, but JS accepts them escaped
    for code in range(0xD800, 0xE000):
        table[code] = f"\\u{code:04X}"
    table.update(
        {
            ord("\\"): "\\\\",
            ord('"'): '\\"',
            ord("\b"): "\\b",
            ord("\f"): "\\f",
            ord("\n"): "\\n",
            ord("\r"): "\\r",
            ord("\t"): "\\t",
            # Line terminators in JS, not in JSON
            0x2028: "\\u2028",
            0x2029: "\\u2029",
            # Keeps </script, <!-- and ]]> out of the element body
            ord("<"): "\\x3C",
            ord(">"): "\\x3E",
        }
    )
    return table


_SCRIPT_ESCAPES = _build_script_escapes()


def url_encode_param(value: str) -> str:
    """
    Percent-encode a value for use as one query parameter value.

    Only the RFC 3986 unreserved characters (``A-Z a-z 0-9 - . _ ~``) are
    left as-is; space becomes ``%20`` and ``+`` becomes ``%2B``.

    Raises:
        EmbeddingError: If the value has no UTF-8 representation (lone
            surrogates).
    """
    try:
        return quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        logger.error("URL parameter encoding failed: %s", exc)
        raise EmbeddingError(value, "URL parameter", str(exc)) from exc


def script_string_literal(value: str) -> str:
    """
    Quote a value as a double-quoted JavaScript string literal.

    Evaluating the result in a script yields exactly ``value``.

    Args:
        value: Arbitrary text, including untrusted input.

    Returns:
        The literal, including its surrounding double quotes.
    """
    return '"' + value.translate(_SCRIPT_ESCAPES) + '"'
