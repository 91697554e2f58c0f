"""
NavRouter Navigation App Router
Picks between built-in maps and installed third-party navigation apps
"""

import logging
from typing import Callable, Optional, Protocol

from navrouter.config import Settings, get_settings
from navrouter.errors import DeepLinkError, EmptyAddress, InvalidScheme, UnknownChoice
from navrouter.models.schemas import (
    CANCEL_CHOICE,
    DEFAULT_MAPS_CHOICE,
    AddressDestination,
    Coordinates,
    Destination,
    NavApp,
    PlaceDestination,
    RouteChoice,
    RoutingStatus,
)
from navrouter.services.catalog import (
    NavigationAppCatalog,
    NavigationAppDescriptor,
    get_catalog,
)
from navrouter.utils.deep_links import (
    generate_default_maps_address_link,
    generate_default_maps_place_link,
)

logger = logging.getLogger(__name__)

# Selection sheet strings
SHEET_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Navigate with",
        "default_maps": "Maps",
        "cancel": "Cancel",
    },
    "fr": {
        "title": "Naviguer avec",
        "default_maps": "Plans",
        "cancel": "Annuler",
    },
}


class ChoicePresenter(Protocol):
    """Modal single-choice UI (an action sheet on a phone)."""

    def present_choice(
        self,
        title: str,
        options: list[RouteChoice],
        on_selected: Callable[[str], None],
        on_cancelled: Callable[[], None],
    ) -> None:
        ...


class RoutingRequest:
    """
    A single routing request.

    Starts either LAUNCHED (nothing to choose from) or AWAITING_SELECTION.
    In the latter case the presenter drives it to a terminal state through
    select() or cancel().
    """

    def __init__(
        self,
        router: "NavigationAppRouter",
        destination: Destination,
        status: RoutingStatus,
        title: str = "",
        choices: Optional[list[RouteChoice]] = None,
    ):
        self._router = router
        self.destination = destination
        self.status = status
        self.title = title
        self.choices = choices or []
        self.launched_url: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status != RoutingStatus.AWAITING_SELECTION

    def select(self, choice_id: str) -> None:
        """Presenter callback: the user picked a choice."""
        if self.is_finished:
            logger.warning(f"Ignoring selection '{choice_id}' on {self.status.value} request")
            return

        if choice_id == CANCEL_CHOICE:
            self.cancel()
            return

        if choice_id not in [choice.id for choice in self.choices]:
            logger.error(f"Selection '{choice_id}' was not offered")
            self.status = RoutingStatus.FAILED
            return

        try:
            url = self._router.resolve_url(choice_id, self.destination)
        except DeepLinkError as e:
            logger.error(f"Cannot launch '{choice_id}': {e}")
            self.status = RoutingStatus.FAILED
            return

        self.launch(url)

    def cancel(self) -> None:
        """Presenter callback: the sheet was dismissed."""
        if self.is_finished:
            logger.warning(f"Ignoring cancel on {self.status.value} request")
            return
        logger.info("Navigation app selection cancelled")
        self.status = RoutingStatus.CANCELLED

    def launch(self, url: str) -> None:
        self.launched_url = url
        self.status = RoutingStatus.LAUNCHED
        self._router.open(url)


class NavigationAppRouter:
    """
    Route a destination to built-in maps or a third-party navigation app.

    Platform access is injected:
        can_open: URL scheme -> whether an installed app handles it
        open_url: URL -> whether it was opened (result is only logged)
    """

    def __init__(
        self,
        can_open: Callable[[str], bool],
        open_url: Callable[[str], bool],
        catalog: Optional[NavigationAppCatalog] = None,
        settings: Optional[Settings] = None,
    ):
        self.can_open = can_open
        self.open_url = open_url
        self.catalog = catalog or get_catalog()
        self.settings = settings or get_settings()
        self.strings = SHEET_STRINGS.get(self.settings.language, SHEET_STRINGS["en"])

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def route_to_place(
        self,
        coordinates: Coordinates,
        label: Optional[str],
        presenter: ChoicePresenter,
    ) -> RoutingRequest:
        """Offer navigation to a coordinate (e.g. a tapped and geocoded map point)."""
        return self.route(PlaceDestination(coordinates=coordinates, label=label), presenter)

    def route_to_address(self, address: str, presenter: ChoicePresenter) -> RoutingRequest:
        """
        Offer navigation to a free-text address.
        Blank addresses are ignored: nothing is probed, presented or opened.
        """
        destination = AddressDestination(address=address)
        try:
            self.validate_address(address)
        except EmptyAddress:
            logger.info("Ignoring routing request for an empty address")
            return RoutingRequest(self, destination, RoutingStatus.IGNORED)

        return self.route(destination, presenter)

    @staticmethod
    def validate_address(address: str) -> str:
        if not address or not address.strip():
            raise EmptyAddress()
        return address

    def route(self, destination: Destination, presenter: ChoicePresenter) -> RoutingRequest:
        installed = self.catalog.list_installed(self.can_open)

        if not installed:
            logger.info("No third-party navigation app installed, using built-in maps")
            request = RoutingRequest(self, destination, RoutingStatus.AWAITING_SELECTION)
            try:
                url = self.default_maps_url(destination)
            except DeepLinkError as e:
                logger.error(f"Cannot launch built-in maps: {e}")
                request.status = RoutingStatus.FAILED
                return request
            request.launch(url)
            return request

        choices = self.choices_for(destination, installed)
        request = RoutingRequest(
            self,
            destination,
            RoutingStatus.AWAITING_SELECTION,
            title=self.strings["title"],
            choices=choices,
        )
        logger.info(f"Presenting {len(choices) - 2} navigation app(s) for {destination.kind}")
        presenter.present_choice(
            request.title,
            list(choices),
            on_selected=request.select,
            on_cancelled=request.cancel,
        )
        return request

    # -------------------------------------------------------------------------
    # Choices and URLs
    # -------------------------------------------------------------------------

    def choices_for(
        self,
        destination: Destination,
        installed: list[NavigationAppDescriptor],
    ) -> list[RouteChoice]:
        """Built-in maps first, then installed apps able to handle the destination, then cancel."""
        choices = [RouteChoice(id=DEFAULT_MAPS_CHOICE, label=self.strings["default_maps"])]

        for descriptor in installed:
            if isinstance(destination, AddressDestination) and not descriptor.supports_address:
                continue
            choices.append(RouteChoice(id=descriptor.app.value, label=descriptor.display_name))

        choices.append(RouteChoice(id=CANCEL_CHOICE, label=self.strings["cancel"]))
        return choices

    def resolve_url(self, choice_id: str, destination: Destination) -> str:
        """
        URL a choice would open, without opening it.

        Raises:
            UnknownChoice: cancel, or an id that is neither built-in maps nor an app
            DeepLinkError: the app cannot build a link for this destination
        """
        if choice_id == DEFAULT_MAPS_CHOICE:
            return self.default_maps_url(destination)

        try:
            app = NavApp(choice_id)
        except ValueError:
            raise UnknownChoice(choice_id)

        return self.catalog.build_url(app, destination)

    def default_maps_url(self, destination: Destination) -> str:
        base_url = self.settings.default_maps_url
        try:
            if isinstance(destination, AddressDestination):
                return generate_default_maps_address_link(base_url, destination.address)
            return generate_default_maps_place_link(
                base_url, destination.coordinates, destination.label or ""
            )
        except UnicodeEncodeError as e:
            raise InvalidScheme(base_url) from e

    def open(self, url: str) -> None:
        """Fire-and-forget launch; failures are logged only."""
        logger.info(f"Opening {url}")
        try:
            opened = self.open_url(url)
        except Exception as e:
            logger.error(f"Failed to open {url}: {e}")
            return

        if not opened:
            logger.warning(f"Platform refused to open {url}")
