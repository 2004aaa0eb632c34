# celine/htmlhead/head.py
"""
Standard ``<head>`` content selected by document type.
"""
from __future__ import annotations

import logging

from celine.htmlhead.analytics import _write_analytics_js, write_global_site_tag
from celine.htmlhead.contracts.sink import Element, MetadataPhrasingSink
from celine.htmlhead.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

STYLE_TYPE = "text/css"
SCRIPT_TYPE = "text/javascript"


def write_standard_meta(head: MetadataPhrasingSink, content_type: str | None) -> None:
    """
    Write the standard minimal meta tags.

    HTML5 documents get a single ``<meta charset>``; ``content_type`` is
    not used. Older doctypes get the three http-equiv declarations for the
    content, default style and default script types.

    Raises:
        ValueError: If ``content_type`` is missing for a legacy doctype.
    """
    if head.doctype.is_modern:
        head.write(Element("meta", (("charset", head.charset),)))
        return

    if content_type is None:
        raise ValueError(
            f"content_type is required for doctype '{head.doctype.value}'"
        )
    head.write(
        Element("meta", (("http-equiv", "Content-Type"), ("content", content_type)))
    )
    # Default style language
    head.write(
        Element("meta", (("http-equiv", "Content-Style-Type"), ("content", STYLE_TYPE)))
    )
    head.write(
        Element("meta", (("http-equiv", "Content-Script-Type"), ("content", SCRIPT_TYPE)))
    )


def write_head_snippets(
    head: MetadataPhrasingSink,
    *,
    content_type: str | None = None,
    tracking_id: str | None = None,
    settings: Settings | None = None,
) -> None:
    """Write standard meta tags followed by the doctype-appropriate tracker.

    Arguments left as ``None`` fall back to ``settings``.
    """
    cfg = settings or default_settings
    content_type = content_type if content_type is not None else cfg.default_content_type
    tracking_id = tracking_id if tracking_id is not None else cfg.ga_tracking_id

    write_standard_meta(head, content_type)
    if head.doctype.is_modern:
        write_global_site_tag(head, tracking_id)
    else:
        logger.debug("Legacy doctype '%s', using analytics.js", head.doctype.value)
        _write_analytics_js(head, tracking_id)
