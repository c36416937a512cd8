from __future__ import annotations

# characters that split words; digits and brackets included
SEPARATOR_CHARS: str = " \t\n\r,-.!?[]';:/()*_0123456789~{}@$%&#"
SEPARATORS: frozenset[str] = frozenset(SEPARATOR_CHARS)

# font-size classes: f11 .. f48 in tagcloud.css
FONT_MIN: int = 11
FONT_MAX: int = 48

# defaults for the front ends
DEFAULT_TAG_COUNT: int = 10
DEFAULT_FORMAT: str = "html"     # "html", "json" or "text"
ENCODING: str = "utf-8"

STYLESHEET_URLS: tuple[str, ...] = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)
