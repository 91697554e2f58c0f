"""NavRouter Models Package"""

from navrouter.models.schemas import (
    NavApp,
    RoutingStatus,
    Coordinates,
    PlaceDestination,
    AddressDestination,
    Destination,
    RouteChoice,
    ReverseGeocodeResult,
)

__all__ = [
    "NavApp",
    "RoutingStatus",
    "Coordinates",
    "PlaceDestination",
    "AddressDestination",
    "Destination",
    "RouteChoice",
    "ReverseGeocodeResult",
]
