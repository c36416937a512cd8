from __future__ import annotations
import logging
import os
import sys

from .config import ENCODING

log = logging.getLogger(__name__)

# Progress logging (set TAGCLOUD_VERBOSE=1 to enable)
def _verbose() -> bool:
    return os.environ.get("TAGCLOUD_VERBOSE") == "1"

STDIN_PATH = "-"


def read_document(path: str, encoding: str | None = None) -> str:
    """
    Read a whole document into memory.
    `path` may be "-" to read standard input. Undecodable bytes are dropped.
    OSError (missing file, permissions...) propagates to the caller.
    """
    if path == STDIN_PATH:
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding=encoding or ENCODING, errors="ignore") as f:
            text = f.read()
    if _verbose():
        print(f"[loaded] {path} chars={len(text):,}")
    log.info("Loaded %s (%d characters)", path, len(text))
    return text


def source_label(path: str) -> str:
    """Name shown in titles for a document read from `path`."""
    return "<stdin>" if path == STDIN_PATH else os.path.basename(path)
