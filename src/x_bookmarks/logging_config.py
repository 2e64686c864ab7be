"""Configure logging for the application."""

import logging
import sys


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger("x_bookmarks")
    root.setLevel(level)
    # Replace handlers from an earlier call so stderr is the current stream
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
