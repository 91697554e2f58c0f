"""NavRouter Services"""

from navrouter.services.catalog import NavigationAppCatalog, NavigationAppDescriptor
from navrouter.services.router import NavigationAppRouter, RoutingRequest
from navrouter.services.geocoding import GeocodingService

__all__ = [
    "NavigationAppCatalog",
    "NavigationAppDescriptor",
    "NavigationAppRouter",
    "RoutingRequest",
    "GeocodingService",
]
