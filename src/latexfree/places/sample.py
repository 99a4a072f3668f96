"""Fixed sample places used when no lookup API key is configured."""

from __future__ import annotations

from latexfree.models.domain import Restaurant
from latexfree.places.base import PlacesProviderBase

SAMPLE_RESTAURANTS = (
    Restaurant(
        place_id="sample-1",
        name="Sample Deli (configure GOOGLE_PLACES_API_KEY for live data)",
        formatted_address="Midtown Manhattan, New York, NY",
        rating=4.2,
    ),
    Restaurant(
        place_id="sample-2",
        name="Sample Pizza Spot",
        formatted_address="Lower Manhattan, New York, NY",
        rating=4.5,
    ),
)


class SampleProvider(PlacesProviderBase):
    """Returns the same two sample restaurants for every query."""

    source = "sample_data_no_api_key"

    def search(self, query: str) -> list[Restaurant]:
        return list(SAMPLE_RESTAURANTS)
