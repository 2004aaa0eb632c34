# tests/test_analytics.py
"""
Unit tests for the Google Analytics snippet emitters.
"""
from __future__ import annotations

import io
import warnings

import pytest

from conftest import FailingSink, RecordingSink
from celine.htmlhead.analytics import (
    ANALYTICS_ORIGIN,
    write_analytics_js,
    write_global_site_tag,
)
from celine.htmlhead.contracts.sink import Doctype, Element
from celine.htmlhead.core.writer import HtmlWriter, render_to_string

BLANK_IDS = [None, "", "   ", "\n\t"]

GLOBAL_SITE_TAG_HTML = """\
<link rel="dns-prefetch" href="https://www.google-analytics.com/">
<link rel="preconnect" href="https://www.google-analytics.com/" crossorigin="anonymous">
<script async src="https://www.googletagmanager.com/gtag/js?id=UA-12345-6"></script>
<script>
window.dataLayer = window.dataLayer || [];
function gtag(){dataLayer.push(arguments);}
gtag("js", new Date());
gtag("config", "UA-12345-6");
</script>
"""

ANALYTICS_JS_BODY = """\
(function(i,s,o,g,r,a,m){i["GoogleAnalyticsObject"]=r;i[r]=i[r] || function(){
(i[r].q=i[r].q || []).push(arguments)},i[r].l=1*new Date();a=s.createElement(o),
m=s.getElementsByTagName(o)[0];a.async=1;a.src=g;m.parentNode.insertBefore(a,m)
})(window,document,"script","https://www.google-analytics.com/analytics.js","ga");
ga("create","UA-12345-6","auto");
ga("send","pageview");"""


class TestGlobalSiteTag:
    @pytest.mark.parametrize("tracking_id", BLANK_IDS)
    def test_blank_id_writes_nothing(self, sink, tracking_id):
        write_global_site_tag(sink, tracking_id)
        assert sink.writes == []

    def test_writes_four_elements_in_order(self, sink):
        write_global_site_tag(sink, "UA-12345-6")

        assert [e.name for e in sink.elements] == ["link", "link", "script", "script"]
        dns, preconnect, loader, config = sink.elements
        assert dns.attrs == (("rel", "dns-prefetch"), ("href", ANALYTICS_ORIGIN))
        assert preconnect.attrs == (
            ("rel", "preconnect"),
            ("href", ANALYTICS_ORIGIN),
            ("crossorigin", "anonymous"),
        )
        assert loader.attr("async") is True
        assert loader.attr("src").endswith("?id=UA-12345-6")
        assert loader.body is None
        assert 'gtag("config", "UA-12345-6");' in config.body

    def test_id_is_trimmed(self, sink):
        write_global_site_tag(sink, "  G-ABC  ")
        assert sink.elements[2].attr("src").endswith("?id=G-ABC")
        assert sink.elements[3].body.endswith('gtag("config", "G-ABC");')

    def test_id_embedded_once_per_context(self, sink):
        tracking_id = 'G-1 "x"&</script>'
        write_global_site_tag(sink, tracking_id)

        src = sink.elements[2].attr("src")
        body = sink.elements[3].body
        assert src == (
            "https://www.googletagmanager.com/gtag/js?id="
            "G-1%20%22x%22%26%3C%2Fscript%3E"
        )
        assert body.count('"G-1 \\"x\\"&\\x3C/script\\x3E"') == 1
        assert "</" not in body

    def test_rendered_html(self):
        out = render_to_string(lambda w: write_global_site_tag(w, "UA-12345-6"))
        assert out == GLOBAL_SITE_TAG_HTML

    def test_output_repeatable(self):
        first = render_to_string(lambda w: write_global_site_tag(w, "G-REPEAT"))
        second = render_to_string(lambda w: write_global_site_tag(w, "G-REPEAT"))
        assert first == second

    def test_not_deduplicated(self, sink):
        write_global_site_tag(sink, "G-1")
        write_global_site_tag(sink, "G-1")
        assert len(sink.elements) == 8
        assert sink.elements[:4] == sink.elements[4:]

    def test_write_failure_propagates_after_partial_output(self):
        sink = FailingSink(fail_after=2)
        with pytest.raises(BrokenPipeError):
            write_global_site_tag(sink, "G-1")
        assert [e.name for e in sink.elements] == ["link", "link"]


class TestAnalyticsJs:
    def test_deprecated(self, sink):
        with pytest.warns(DeprecationWarning, match="write_global_site_tag"):
            write_analytics_js(sink, "UA-12345-6")

    @pytest.mark.parametrize("tracking_id", BLANK_IDS)
    def test_blank_id_writes_nothing(self, sink, tracking_id):
        with pytest.warns(DeprecationWarning):
            write_analytics_js(sink, tracking_id)
        assert sink.writes == []

    def test_single_script_with_vendor_body(self, sink):
        with pytest.warns(DeprecationWarning):
            write_analytics_js(sink, " UA-12345-6 ")

        assert sink.elements == [Element("script", body=ANALYTICS_JS_BODY)]

    def test_id_escaped(self, sink):
        with pytest.warns(DeprecationWarning):
            write_analytics_js(sink, '");alert(1);("')
        body = sink.elements[0].body
        assert 'ga("create","\\");alert(1);(\\"","auto");' in body

    def test_legacy_writer_output(self):
        buf = io.StringIO()
        writer = HtmlWriter(buf, doctype=Doctype.TRANSITIONAL)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            write_analytics_js(writer, "UA-12345-6")
        assert buf.getvalue() == (
            '<script type="text/javascript">\n' + ANALYTICS_JS_BODY + "\n</script>\n"
        )

    def test_accepts_script_only_sink(self):
        class ScriptOnlySink:
            def __init__(self):
                self.elements: list[Element] = []

            def write(self, element: Element) -> None:
                self.elements.append(element)

            def write_text(self, text: str) -> None:
                raise AssertionError("unexpected raw text")

        sink = ScriptOnlySink()
        with pytest.warns(DeprecationWarning):
            write_analytics_js(sink, "UA-1")
        assert len(sink.elements) == 1


def test_recording_sink_is_fresh_per_test(sink):
    assert isinstance(sink, RecordingSink)
    assert sink.writes == []
