"""
NavRouter Navigation App Catalog
Supported third-party navigation apps and their deep link grammars
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from navrouter.errors import InvalidScheme, UnsupportedDestinationKind
from navrouter.models.schemas import (
    AddressDestination,
    Coordinates,
    Destination,
    NavApp,
    PlaceDestination,
)
from navrouter.utils.deep_links import encode_address, format_lat_lon, is_well_formed_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationAppDescriptor:
    """
    A third-party navigation app.

    Templates receive `coords` ("<lat>,<lon>") or `address` (already
    encoded) and are appended to the URL scheme as-is.
    """

    app: NavApp
    display_name: str
    url_scheme: str
    coordinate_template: str
    address_template: Optional[str] = None
    address_plus_sign: bool = False

    @property
    def supports_address(self) -> bool:
        return self.address_template is not None

    def coordinate_params(self, coordinates: Coordinates) -> str:
        return self.coordinate_template.format(coords=format_lat_lon(coordinates))

    def address_params(self, address: str) -> str:
        if self.address_template is None:
            raise UnsupportedDestinationKind(self.display_name, "address")
        return self.address_template.format(
            address=encode_address(address, self.address_plus_sign)
        )


NAVIGATION_APPS: tuple[NavigationAppDescriptor, ...] = (
    NavigationAppDescriptor(
        app=NavApp.GOOGLE_MAPS,
        display_name="Google Maps",
        url_scheme="comgooglemaps://",
        coordinate_template="?daddr={coords}&directionsmode=driving",
        address_template="?q={address}",
        address_plus_sign=True,
    ),
    NavigationAppDescriptor(
        app=NavApp.WAZE,
        display_name="Waze",
        url_scheme="waze://",
        coordinate_template="?ll={coords}&navigate=yes",
        address_template="?q={address}",
    ),
    NavigationAppDescriptor(
        app=NavApp.CITYMAPPER,
        display_name="CityMapper",
        url_scheme="citymapper://",
        coordinate_template="directions?endcoord={coords}",
    ),
)


class NavigationAppCatalog:
    """Read-only registry of supported navigation apps."""

    def __init__(self, apps: tuple[NavigationAppDescriptor, ...] = NAVIGATION_APPS):
        self._apps = apps

    def list_all(self) -> list[NavigationAppDescriptor]:
        """All supported apps, in presentation order."""
        return list(self._apps)

    def get(self, app: NavApp) -> NavigationAppDescriptor:
        for descriptor in self._apps:
            if descriptor.app == app:
                return descriptor
        raise KeyError(app)

    def list_installed(
        self,
        can_open: Callable[[str], bool],
    ) -> list[NavigationAppDescriptor]:
        """
        Apps whose URL scheme the device reports it can open.

        The probe is called once per app, every time. A probe that raises
        counts as "not installed".
        """
        installed = []
        for descriptor in self._apps:
            try:
                available = bool(can_open(descriptor.url_scheme))
            except Exception as e:
                logger.warning(f"Scheme probe failed for {descriptor.url_scheme}: {e}")
                available = False

            if available:
                installed.append(descriptor)

        return installed

    def build_url(
        self,
        app: Union[NavigationAppDescriptor, NavApp],
        destination: Destination,
    ) -> str:
        """
        Build the deep link launching `app` with directions to `destination`.

        Raises:
            UnsupportedDestinationKind: app cannot route to an address
            InvalidScheme: resulting string is not a usable URL
        """
        descriptor = app if isinstance(app, NavigationAppDescriptor) else self.get(app)

        if isinstance(destination, PlaceDestination):
            params = descriptor.coordinate_params(destination.coordinates)
        elif isinstance(destination, AddressDestination):
            try:
                params = descriptor.address_params(destination.address)
            except UnicodeEncodeError as e:
                raise InvalidScheme(descriptor.url_scheme + destination.address) from e
        else:
            raise UnsupportedDestinationKind(descriptor.display_name, type(destination).__name__)

        url = descriptor.url_scheme + params
        if not is_well_formed_url(url, descriptor.url_scheme):
            raise InvalidScheme(url)

        return url


# Shared instance; the catalog holds no mutable state
_catalog: Optional[NavigationAppCatalog] = None


def get_catalog() -> NavigationAppCatalog:
    """Get or create the catalog instance"""
    global _catalog
    if _catalog is None:
        _catalog = NavigationAppCatalog()
    return _catalog
