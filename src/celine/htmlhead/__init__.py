"""Head snippet emitters: analytics tags, image preload and standard meta."""
from celine.htmlhead.analytics import write_analytics_js, write_global_site_tag
from celine.htmlhead.contracts import (
    Doctype,
    Element,
    MetadataPhrasingSink,
    ScriptSupportingSink,
    Serialization,
)
from celine.htmlhead.core.encoding import script_string_literal, url_encode_param
from celine.htmlhead.core.errors import EmbeddingError, HtmlHeadError, SinkClosedError
from celine.htmlhead.core.normalize import trim_null_if_empty
from celine.htmlhead.core.writer import HtmlWriter, render_to_string
from celine.htmlhead.head import write_head_snippets, write_standard_meta
from celine.htmlhead.images import write_image_preload_script

__all__ = [
    "write_global_site_tag", "write_analytics_js",
    "write_image_preload_script",
    "write_standard_meta", "write_head_snippets",
    "Doctype", "Element", "Serialization",
    "MetadataPhrasingSink", "ScriptSupportingSink",
    "HtmlWriter", "render_to_string",
    "script_string_literal", "url_encode_param", "trim_null_if_empty",
    "HtmlHeadError", "EmbeddingError", "SinkClosedError",
]
