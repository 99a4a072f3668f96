"""Restaurants API endpoints.

GET /api/restaurants - Search restaurants and attach glove summaries
GET /api/reported-restaurants - Restaurants built from submissions only
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from latexfree.aggregation.summary import (
    aggregate_glove_info,
    merge_glove_info,
    reported_restaurants,
)
from latexfree.api.app import get_config, get_places_provider, get_store
from latexfree.config import DEFAULT_SEARCH_QUERY, AppConfig
from latexfree.models.types import (
    ReportedRestaurantsResponse,
    RestaurantDetail,
    RestaurantsResponse,
)
from latexfree.places import PlacesProviderBase
from latexfree.store import SubmissionStore

router = APIRouter()


@router.get("/restaurants", response_model=RestaurantsResponse)
def list_restaurants(
    query: str | None = None,
    config: AppConfig = Depends(get_config),
    places: PlacesProviderBase = Depends(get_places_provider),
    store: SubmissionStore = Depends(get_store),
) -> RestaurantsResponse:
    """Search restaurants and attach the glove summary for each.

    Args:
        query: Free-text search. Defaults to "restaurants".

    Raises:
        UpstreamError: If the place lookup fails (500).
    """
    search_term = (query or "").strip() or DEFAULT_SEARCH_QUERY

    found = places.search(search_term)
    glove_info = aggregate_glove_info(store.list_all())
    merged = merge_glove_info(found, glove_info)

    return RestaurantsResponse(
        source=places.source,
        google_api_configured=config.google_api_configured,
        restaurants=[RestaurantDetail.from_domain(r) for r in merged],
    )


@router.get("/reported-restaurants", response_model=ReportedRestaurantsResponse)
def list_reported_restaurants(
    store: SubmissionStore = Depends(get_store),
) -> ReportedRestaurantsResponse:
    """List every place that has at least one submission."""
    restaurants = reported_restaurants(store.list_all())
    return ReportedRestaurantsResponse(
        restaurants=[RestaurantDetail.from_domain(r) for r in restaurants]
    )
