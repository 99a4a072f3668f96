"""Base place lookup interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from latexfree.models.domain import Restaurant


class PlacesProviderBase(ABC):
    """Abstract base class for restaurant lookup sources.

    Providers must NOT:
    - Read or write submissions
    - Attach glove info
    """

    #: Value reported as `source` in restaurant responses.
    source: str

    @abstractmethod
    def search(self, query: str) -> list[Restaurant]:
        """Find restaurants matching a free-text query.

        Args:
            query: Free-text search such as "pizza".

        Returns:
            Restaurants with glove_info unset.

        Raises:
            UpstreamError: If the source is unreachable or reports an error.
        """
        pass
