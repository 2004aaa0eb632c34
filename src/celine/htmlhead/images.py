from __future__ import annotations

from celine.htmlhead.contracts.sink import Element, ScriptSupportingSink
from celine.htmlhead.core.encoding import script_string_literal


def write_image_preload_script(content: ScriptSupportingSink, url: str) -> None:
    """
    Write a script that preloads the image at ``url``.

    ``url`` must already be URL-encoded, using a bare ``&`` (not ``&amp;``)
    between parameters. It is embedded as given; an empty url is written too.
    """
    content.write(
        Element(
            "script",
            body="\n".join(
                [
                    "var img=new Image();",
                    f"img.src={script_string_literal(url)};",
                ]
            ),
        )
    )
