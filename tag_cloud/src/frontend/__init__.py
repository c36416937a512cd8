"""Front ends for the tag cloud engine: command line (python -m frontend) and Flask UI (frontend.web)."""
from __future__ import annotations
import logging
import os


def configure_logging(verbose: bool) -> None:
    """INFO-level logging plus loader progress when verbose; warnings only otherwise."""
    if verbose:
        os.environ["TAGCLOUD_VERBOSE"] = "1"
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
