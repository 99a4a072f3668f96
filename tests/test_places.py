"""Tests for place lookup providers."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from latexfree.config import AppConfig
from latexfree.errors import UpstreamError
from latexfree.places import (
    GooglePlacesProvider,
    PlacesProviderBase,
    SampleProvider,
    get_places_provider,
)


def _response(status_code: int = 200, payload: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload if payload is not None else {}
    return response


class TestProviderBase:
    """Test base provider interface."""

    def test_is_abstract(self):
        """PlacesProviderBase cannot be instantiated directly."""
        with pytest.raises(TypeError):
            PlacesProviderBase()

    def test_implementations_inherit(self):
        """Both providers implement the base interface."""
        assert issubclass(SampleProvider, PlacesProviderBase)
        assert issubclass(GooglePlacesProvider, PlacesProviderBase)


class TestSampleProvider:
    """Fixed two-item sample data."""

    def test_returns_two_samples(self):
        """Any query returns sample-1 and sample-2."""
        restaurants = SampleProvider().search("sushi")

        assert [r.place_id for r in restaurants] == ["sample-1", "sample-2"]
        assert restaurants[0].rating == 4.2
        assert restaurants[1].name == "Sample Pizza Spot"
        assert all(r.glove_info is None for r in restaurants)

    def test_source_flag(self):
        """Sample data is flagged as such."""
        assert SampleProvider.source == "sample_data_no_api_key"

    def test_returns_fresh_list(self):
        """Callers cannot alter the shared sample tuple."""
        first = SampleProvider().search("x")
        first.clear()
        assert len(SampleProvider().search("x")) == 2


class TestGetPlacesProvider:
    """Provider selection from config."""

    def test_without_key(self):
        """No API key selects sample data."""
        assert isinstance(get_places_provider(AppConfig()), SampleProvider)

    def test_with_key(self):
        """An API key selects Google Places with the configured timeout."""
        provider = get_places_provider(AppConfig(google_places_api_key="k", places_timeout=3.0))
        assert isinstance(provider, GooglePlacesProvider)
        assert provider.timeout == 3.0


class TestGooglePlacesProvider:
    """HTTP behavior with requests.get patched."""

    def test_maps_results(self):
        """Results are mapped to restaurants; missing rating becomes None."""
        payload = {
            "status": "OK",
            "results": [
                {"place_id": "g1", "name": "Joe's", "formatted_address": "7 Carmine St", "rating": 4.6},
                {"place_id": "g2", "name": "Katz's", "formatted_address": "205 E Houston St"},
            ],
        }
        with patch("latexfree.places.google.requests.get", return_value=_response(200, payload)) as get:
            restaurants = GooglePlacesProvider(api_key="secret", timeout=5).search("pizza")

        assert [r.place_id for r in restaurants] == ["g1", "g2"]
        assert restaurants[0].rating == 4.6
        assert restaurants[1].rating is None

        _, kwargs = get.call_args
        assert kwargs["params"]["query"] == "pizza in New York City"
        assert kwargs["params"]["key"] == "secret"
        assert kwargs["timeout"] == 5

    def test_zero_results(self):
        """ZERO_RESULTS is an empty list, not an error."""
        with patch(
            "latexfree.places.google.requests.get",
            return_value=_response(200, {"status": "ZERO_RESULTS", "results": []}),
        ):
            assert GooglePlacesProvider(api_key="k").search("nothing") == []

    def test_http_error_status(self):
        """Non-2xx responses raise UpstreamError naming the status."""
        with patch("latexfree.places.google.requests.get", return_value=_response(503)):
            with pytest.raises(UpstreamError, match="status 503"):
                GooglePlacesProvider(api_key="k").search("pizza")

    def test_api_error_status(self):
        """API statuses other than OK/ZERO_RESULTS raise UpstreamError."""
        with patch(
            "latexfree.places.google.requests.get",
            return_value=_response(200, {"status": "REQUEST_DENIED"}),
        ):
            with pytest.raises(UpstreamError, match="REQUEST_DENIED"):
                GooglePlacesProvider(api_key="k").search("pizza")

    def test_network_error(self):
        """Connection failures and timeouts raise UpstreamError."""
        with patch(
            "latexfree.places.google.requests.get",
            side_effect=requests.Timeout("timed out"),
        ):
            with pytest.raises(UpstreamError, match="Timeout"):
                GooglePlacesProvider(api_key="k").search("pizza")

    def test_error_message_does_not_leak_key(self):
        """The API key never appears in the error message."""
        error = requests.ConnectionError("failed for url ...&key=secret-key")
        with patch("latexfree.places.google.requests.get", side_effect=error):
            with pytest.raises(UpstreamError) as exc_info:
                GooglePlacesProvider(api_key="secret-key").search("pizza")
        assert "secret-key" not in str(exc_info.value)

    def test_invalid_json(self):
        """A body that is not JSON raises UpstreamError."""
        response = _response(200)
        response.json.side_effect = ValueError("no json")
        with patch("latexfree.places.google.requests.get", return_value=response):
            with pytest.raises(UpstreamError, match="invalid JSON"):
                GooglePlacesProvider(api_key="k").search("pizza")

    @pytest.mark.parametrize(
        "payload",
        [
            ["unexpected"],
            {"status": "OK", "results": [{"name": "No id"}]},
            {"status": "OK", "results": ["not a place"]},
        ],
    )
    def test_unexpected_payload(self, payload):
        """Well-formed JSON of the wrong shape raises UpstreamError."""
        with patch("latexfree.places.google.requests.get", return_value=_response(200, payload)):
            with pytest.raises(UpstreamError, match="unexpected response"):
                GooglePlacesProvider(api_key="k").search("pizza")
