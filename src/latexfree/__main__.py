"""Run the API server: python -m latexfree"""

from __future__ import annotations

import os

import uvicorn

from latexfree.config import load_config
from latexfree.logging_config import setup_logging


def main() -> None:
    config = load_config()
    setup_logging(config.log_level)
    uvicorn.run(
        "latexfree.api.app:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "3000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
