# celine/htmlhead/analytics.py
"""
Google Analytics bootstrap snippets.

Both emitters write nothing when the tracking id is missing or blank. The
script bodies follow the vendor's published client snippets exactly; only
the tracking id varies, and it is always embedded through
:mod:`celine.htmlhead.core.encoding`.
"""
from __future__ import annotations

import logging
import warnings

from celine.htmlhead.contracts.sink import (
    Element,
    MetadataPhrasingSink,
    ScriptSupportingSink,
)
from celine.htmlhead.core.encoding import script_string_literal, url_encode_param
from celine.htmlhead.core.normalize import trim_null_if_empty

logger = logging.getLogger(__name__)

ANALYTICS_ORIGIN = "https://www.google-analytics.com/"
GTAG_SCRIPT_PREFIX = "https://www.googletagmanager.com/gtag/js?id="
ANALYTICS_JS_URL = "https://www.google-analytics.com/analytics.js"


def write_global_site_tag(
    content: MetadataPhrasingSink, tracking_id: str | None
) -> None:
    """
    Write the modern Global Site Tag (gtag.js).

    Best used with :attr:`Doctype.HTML5`, as early as possible in
    ``<head>``. Writes, in order: a dns-prefetch and a preconnect hint for
    the analytics origin, the async gtag.js loader, and the inline
    configuration script.

    Args:
        content: Sink accepting link and script elements.
        tracking_id: Nothing is written when ``None`` or blank.
    """
    trimmed_id = trim_null_if_empty(tracking_id)
    if trimmed_id is None:
        logger.debug("No tracking id, skipping global site tag")
        return

    content.write(
        Element("link", (("rel", "dns-prefetch"), ("href", ANALYTICS_ORIGIN)))
    )
    content.write(
        Element(
            "link",
            (
                ("rel", "preconnect"),
                ("href", ANALYTICS_ORIGIN),
                ("crossorigin", "anonymous"),
            ),
        )
    )
    content.write(
        Element(
            "script",
            (("async", True), ("src", GTAG_SCRIPT_PREFIX + url_encode_param(trimmed_id))),
        )
    )
    content.write(
        Element(
            "script",
            body="\n".join(
                [
                    "window.dataLayer = window.dataLayer || [];",
                    "function gtag(){dataLayer.push(arguments);}",
                    'gtag("js", new Date());',
                    f'gtag("config", {script_string_literal(trimmed_id)});',
                ]
            ),
        )
    )


def _analytics_js_element(trimmed_id: str) -> Element:
    return Element(
        "script",
        body="\n".join(
            [
                '(function(i,s,o,g,r,a,m){i["GoogleAnalyticsObject"]=r;i[r]=i[r] || function(){',
                "(i[r].q=i[r].q || []).push(arguments)},i[r].l=1*new Date();a=s.createElement(o),",
                "m=s.getElementsByTagName(o)[0];a.async=1;a.src=g;m.parentNode.insertBefore(a,m)",
                f'}})(window,document,"script","{ANALYTICS_JS_URL}","ga");',
                f'ga("create",{script_string_literal(trimmed_id)},"auto");',
                'ga("send","pageview");',
            ]
        ),
    )


def _write_analytics_js(content: ScriptSupportingSink, tracking_id: str | None) -> None:
    trimmed_id = trim_null_if_empty(tracking_id)
    if trimmed_id is None:
        logger.debug("No tracking id, skipping analytics.js snippet")
        return
    content.write(_analytics_js_element(trimmed_id))


def write_analytics_js(content: ScriptSupportingSink, tracking_id: str | None) -> None:
    """
    Write the older analytics.js tracking snippet.

    Kept for documents with a doctype prior to HTML5.

    .. deprecated::
        Use :func:`write_global_site_tag`.

    Args:
        content: Sink accepting script elements.
        tracking_id: Nothing is written when ``None`` or blank.
    """
    warnings.warn(
        "write_analytics_js is deprecated, use write_global_site_tag",
        DeprecationWarning,
        stacklevel=2,
    )
    _write_analytics_js(content, tracking_id)
