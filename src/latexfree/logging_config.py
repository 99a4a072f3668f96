"""Root logger setup for the API server.

Modules log through `logging.getLogger(__name__)`; only the entry point
calls setup_logging, so tests keep pytest's own capture handlers.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Send all records at or above level to stdout with one handler."""
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    return root
