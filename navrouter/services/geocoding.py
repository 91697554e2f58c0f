"""
NavRouter - Reverse Geocoding Service
Turns a tapped map point into a place name and address using Nominatim
"""

import logging
from typing import Optional

import httpx

from ..config import get_settings
from ..models.schemas import Coordinates, ReverseGeocodeResult

logger = logging.getLogger(__name__)


class GeocodingService:
    """Resolves coordinates to a human-readable address"""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = get_settings()
        self.base_url = self.settings.nominatim_base_url
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=self.settings.geocoding_timeout_seconds,
                headers={"User-Agent": self.settings.geocoding_user_agent},
            )
        self.http_client = http_client

    async def reverse_geocode(
        self,
        coordinates: Coordinates,
    ) -> Optional[ReverseGeocodeResult]:
        """Get the address of the place at coordinates, or None if there is none"""
        try:
            response = await self.http_client.get(
                f"{self.base_url}/reverse",
                params={
                    "format": "jsonv2",
                    "lat": coordinates.lat,
                    "lon": coordinates.lon,
                    "accept-language": self.settings.geocoding_language,
                },
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Reverse geocode failed for {coordinates.lat},{coordinates.lon}: {e}")
            return None

        return self._parse_reverse_result(data, coordinates)

    def _parse_reverse_result(
        self,
        data: dict,
        coordinates: Coordinates,
    ) -> Optional[ReverseGeocodeResult]:
        """Parse Nominatim reverse result. Nominatim reports misses as {"error": ...}"""
        if not data or "error" in data:
            logger.info(f"No address found at {coordinates.lat},{coordinates.lon}")
            return None

        display_name = data.get("display_name") or ""
        if not display_name:
            return None

        label = data.get("name") or display_name.split(",")[0].strip()

        # Keep the tapped point; Nominatim snaps to the nearest object
        return ReverseGeocodeResult(
            coordinates=coordinates,
            label=label,
            address=display_name,
        )

    async def close(self):
        """Close HTTP client"""
        await self.http_client.aclose()


# Singleton instance
_geocoding_service: Optional[GeocodingService] = None


def get_geocoding_service() -> GeocodingService:
    """Get or create geocoding service instance"""
    global _geocoding_service
    if _geocoding_service is None:
        _geocoding_service = GeocodingService()
    return _geocoding_service


async def close_geocoding_service() -> None:
    """Close and forget the geocoding service instance, if one was created"""
    global _geocoding_service
    if _geocoding_service is not None:
        await _geocoding_service.close()
        _geocoding_service = None
