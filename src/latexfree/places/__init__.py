"""External place lookup.

- Narrow interface: `search(query) -> list[Restaurant]`
- Forbidden: storage access, glove aggregation
"""

from __future__ import annotations

from latexfree.config import AppConfig
from latexfree.places.base import PlacesProviderBase
from latexfree.places.google import GooglePlacesProvider
from latexfree.places.sample import SampleProvider


def get_places_provider(config: AppConfig) -> PlacesProviderBase:
    """Google Places when an API key is configured, fixed samples otherwise."""
    if config.google_api_configured:
        return GooglePlacesProvider(
            api_key=config.google_places_api_key,
            timeout=config.places_timeout,
        )
    return SampleProvider()


__all__ = [
    "GooglePlacesProvider",
    "PlacesProviderBase",
    "SampleProvider",
    "get_places_provider",
]
