"""
NavRouter Reverse Geocoding Tests
External Nominatim calls are mocked.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from navrouter.models.schemas import Coordinates
from navrouter.services.geocoding import GeocodingService


def _response(payload, status_code=200):
    request = httpx.Request("GET", "https://nominatim.openstreetmap.org/reverse")
    return httpx.Response(status_code, json=payload, request=request)


@pytest.fixture
def http_client():
    client = MagicMock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    return client


@pytest.fixture
def point():
    return Coordinates(lat=45.5017, lon=-73.5673)


class TestReverseGeocode:
    """Tests for GeocodingService.reverse_geocode."""

    @pytest.mark.asyncio
    async def test_named_place(self, http_client, point):
        http_client.get.return_value = _response({
            "lat": "45.5016",
            "lon": "-73.5672",
            "name": "Place d'Armes",
            "display_name": "Place d'Armes, Vieux-Montréal, Montréal, Québec, Canada",
        })
        service = GeocodingService(http_client=http_client)

        result = await service.reverse_geocode(point)

        assert result.label == "Place d'Armes"
        assert result.address.startswith("Place d'Armes, Vieux-Montréal")
        assert result.coordinates == point

    @pytest.mark.asyncio
    async def test_unnamed_place_uses_first_address_part(self, http_client, point):
        http_client.get.return_value = _response({
            "name": "",
            "display_name": "123, Rue Notre-Dame, Montréal",
        })
        service = GeocodingService(http_client=http_client)

        result = await service.reverse_geocode(point)

        assert result.label == "123"

    @pytest.mark.asyncio
    async def test_query_params(self, http_client, point):
        http_client.get.return_value = _response({"display_name": "Somewhere"})
        service = GeocodingService(http_client=http_client)

        await service.reverse_geocode(point)

        url = http_client.get.call_args.args[0]
        params = http_client.get.call_args.kwargs["params"]
        assert url.endswith("/reverse")
        assert params["lat"] == 45.5017
        assert params["lon"] == -73.5673
        assert params["format"] == "jsonv2"

    @pytest.mark.asyncio
    async def test_nothing_found(self, http_client, point):
        """Nominatim answers 200 with an error body over the ocean."""
        http_client.get.return_value = _response({"error": "Unable to geocode"})
        service = GeocodingService(http_client=http_client)

        assert await service.reverse_geocode(point) is None

    @pytest.mark.asyncio
    async def test_http_error(self, http_client, point):
        http_client.get.return_value = _response({}, status_code=503)
        service = GeocodingService(http_client=http_client)

        assert await service.reverse_geocode(point) is None

    @pytest.mark.asyncio
    async def test_network_error(self, http_client, point):
        http_client.get.side_effect = httpx.ConnectError("unreachable")
        service = GeocodingService(http_client=http_client)

        assert await service.reverse_geocode(point) is None
