"""Application configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

DEFAULT_DB_PATH = Path("data/latexfree.db")
DEFAULT_DATA_FILE = Path("data/submissions.json")
DEFAULT_PLACES_TIMEOUT = 10.0
DEFAULT_SEARCH_QUERY = "restaurants"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")

StoreBackend = Literal["sql", "json"]


@dataclass(frozen=True)
class AppConfig:
    """Resolved runtime settings."""

    google_places_api_key: str | None = None
    store_backend: StoreBackend = "sql"
    db_path: Path = DEFAULT_DB_PATH
    data_file: Path = DEFAULT_DATA_FILE
    places_timeout: float = DEFAULT_PLACES_TIMEOUT
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @property
    def google_api_configured(self) -> bool:
        return bool(self.google_places_api_key)


def load_config() -> AppConfig:
    """Build AppConfig from the process environment.

    Raises:
        ValueError: If LATEXFREE_STORE or LATEXFREE_PLACES_TIMEOUT is invalid.
    """
    backend = os.environ.get("LATEXFREE_STORE", "sql").strip().lower()
    if backend not in ("sql", "json"):
        raise ValueError(f"LATEXFREE_STORE must be 'sql' or 'json', got {backend!r}")

    timeout_raw = os.environ.get("LATEXFREE_PLACES_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_PLACES_TIMEOUT
    except ValueError as e:
        raise ValueError(f"LATEXFREE_PLACES_TIMEOUT must be a number: {timeout_raw!r}") from e

    origins_raw = os.environ.get("LATEXFREE_CORS_ORIGINS")
    origins = (
        tuple(o.strip() for o in origins_raw.split(",") if o.strip())
        if origins_raw
        else DEFAULT_CORS_ORIGINS
    )

    return AppConfig(
        google_places_api_key=os.environ.get("GOOGLE_PLACES_API_KEY") or None,
        store_backend=backend,  # type: ignore[arg-type]
        db_path=Path(os.environ.get("LATEXFREE_DB_PATH", str(DEFAULT_DB_PATH))),
        data_file=Path(os.environ.get("LATEXFREE_DATA_FILE", str(DEFAULT_DATA_FILE))),
        places_timeout=timeout,
        log_level=os.environ.get("LATEXFREE_LOG_LEVEL", "INFO").upper(),
        cors_origins=origins,
    )
