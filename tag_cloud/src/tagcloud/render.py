# tagcloud/render.py
"""
Renderers that turn a TagCloud into a document.

The HTML output reproduces the classic tag-cloud page: a title naming the
source and tag count, the tagcloud stylesheet, and one <span> per word whose
class "fNN" selects the font size and whose tooltip shows the raw count.
"""
from __future__ import annotations
import json
from html import escape
from typing import Callable, Dict, List

from .config import STYLESHEET_URLS
from .models import TagCloud


def _title(cloud: TagCloud) -> str:
    return f"Top {cloud.n} words in {cloud.source or 'document'}"


def render_html(cloud: TagCloud) -> str:
    title = escape(_title(cloud))
    out: List[str] = ["<html>", "<head>", f"<title>{title}</title>"]
    for href in STYLESHEET_URLS:
        out.append(f'<link href="{escape(href)}" rel="stylesheet" type="text/css">')
    out += [
        '<style type="text/css"></style>',
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for e in cloud.entries:
        out.append(
            f'<span style="cursor:default" class="f{e.font_size}" '
            f'title="count: {e.count}">{escape(e.word)}</span>'
        )
    out += ["</p>", "</div>", "</body>", "</html>"]
    return "\n".join(out) + "\n"


def render_json(cloud: TagCloud) -> str:
    return json.dumps(cloud.to_dict(), ensure_ascii=False, indent=2) + "\n"


def render_text(cloud: TagCloud) -> str:
    """Plain table: word, count, font size."""
    lines = [_title(cloud), f"{'Word':<24} {'Count':>7} {'Size':>5}"]
    for e in cloud.entries:
        lines.append(f"{e.word:<24} {e.count:>7} {e.font_size:>5}")
    return "\n".join(lines) + "\n"


RENDERERS: Dict[str, Callable[[TagCloud], str]] = {
    "html": render_html,
    "json": render_json,
    "text": render_text,
}


def render(cloud: TagCloud, fmt: str = "html") -> str:
    try:
        renderer = RENDERERS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unsupported output format: {fmt!r} (choose from {', '.join(RENDERERS)})")
    return renderer(cloud)
