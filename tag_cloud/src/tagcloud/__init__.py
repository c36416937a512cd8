"""
Tag Cloud Module

Turns a text document into a tag cloud: the N most frequent words, ordered
alphabetically, each with a font-size class proportional to its count.

Pipeline:
    text -> tokenizer -> counter -> top-N selection -> alphabetical order
         -> font scale -> renderer (HTML / JSON / text)

Example Usage:
    from tagcloud import build_cloud, render_html

    cloud = build_cloud("the cat sat on the mat the cat ran", 3)
    for e in cloud.entries:
        print(e.word, e.count, e.font_size)
    html = render_html(cloud)
"""

from .config import SEPARATORS
from .counter import count_words
from .engine import Engine, build_cloud
from .models import DisplayEntry, RankedEntry, Selection, TagCloud, Token
from .ranking import (TagCountError, alphabetical, by_count, order_alphabetically,
                      select_top_n, validate_tag_count)
from .render import RENDERERS, render, render_html, render_json, render_text
from .scale import font_size, scale_entries
from .tokenizer import iter_tokens, make_separators, next_word_or_separator

__version__ = "1.0.0"
__all__ = [
    "SEPARATORS", "count_words", "Engine", "build_cloud",
    "DisplayEntry", "RankedEntry", "Selection", "TagCloud", "Token",
    "TagCountError", "alphabetical", "by_count", "order_alphabetically",
    "select_top_n", "validate_tag_count",
    "RENDERERS", "render", "render_html", "render_json", "render_text",
    "font_size", "scale_entries",
    "iter_tokens", "make_separators", "next_word_or_separator",
]
