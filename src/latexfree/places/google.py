"""Google Places Text Search provider."""

from __future__ import annotations

import logging

import requests

from latexfree.errors import UpstreamError
from latexfree.models.domain import Restaurant
from latexfree.places.base import PlacesProviderBase

logger = logging.getLogger(__name__)

_UNEXPECTED_RESPONSE = "Google Places API returned an unexpected response"


class GooglePlacesProvider(PlacesProviderBase):
    # from https://developers.google.com/maps/documentation/places/web-service/search-text
    _TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
    _ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")
    _LOCATION_SUFFIX = " in New York City"

    source = "google_places_api"

    def __init__(self, api_key: str, timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    def search(self, query: str) -> list[Restaurant]:
        params = {
            "query": f"{query}{self._LOCATION_SUFFIX}",
            "key": self.api_key,
        }

        try:
            response = requests.get(self._TEXT_SEARCH_URL, params=params, timeout=self.timeout)
        except requests.RequestException as error:
            logger.warning(f"Google Places request failed: {error.__class__.__name__}")
            raise UpstreamError(f"Google Places API request failed: {error.__class__.__name__}") from error

        if not response.ok:
            logger.warning(f"Google Places returned HTTP {response.status_code}")
            raise UpstreamError(
                f"Google Places API request failed with status {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as error:
            raise UpstreamError("Google Places API returned invalid JSON") from error

        if not isinstance(payload, dict):
            raise UpstreamError(_UNEXPECTED_RESPONSE)

        status = payload.get("status")
        if status not in self._ACCEPTED_STATUSES:
            logger.warning(f"Google Places returned API status {status}")
            raise UpstreamError(f"Google Places API error: {status}")

        try:
            return [self._to_restaurant(place) for place in payload.get("results") or []]
        except (KeyError, TypeError, AttributeError) as error:
            logger.warning(f"Google Places result could not be read: {error!r}")
            raise UpstreamError(_UNEXPECTED_RESPONSE) from error

    def _to_restaurant(self, place: dict) -> Restaurant:
        return Restaurant(
            place_id=place["place_id"],
            name=place.get("name", ""),
            formatted_address=place.get("formatted_address", ""),
            rating=place.get("rating"),
        )
