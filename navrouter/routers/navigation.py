"""
NavRouter Navigation Router
Tells a client which navigation app links to offer for a destination
"""

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from navrouter.errors import DeepLinkError, EmptyAddress
from navrouter.models.schemas import (
    CANCEL_CHOICE,
    AddressRouteRequest,
    NavAppInfo,
    PlaceRouteRequest,
    PlannedChoice,
    RouteChoice,
    RoutingPlanResponse,
    RoutingStatus,
    TapRouteRequest,
)
from navrouter.services.catalog import NavigationAppDescriptor, get_catalog
from navrouter.services.geocoding import GeocodingService, get_geocoding_service
from navrouter.services.router import NavigationAppRouter, RoutingRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _scheme_name(scheme: str) -> str:
    """'waze://', 'waze:' and 'WAZE' all name the same scheme."""
    return scheme.split(":", 1)[0].strip().lower()


class CollectingPresenter:
    """Records the selection sheet so it can be sent to the client instead of shown."""

    def __init__(self):
        self.title: Optional[str] = None
        self.options: list[RouteChoice] = []

    def present_choice(
        self,
        title: str,
        options: list[RouteChoice],
        on_selected: Callable[[str], None],
        on_cancelled: Callable[[], None],
    ) -> None:
        self.title = title
        self.options = options


def build_client_router(installed_schemes: list[str]) -> NavigationAppRouter:
    """Router whose scheme probe answers from the client's own report."""
    reported = {_scheme_name(s) for s in installed_schemes if s.strip()}

    # The client opens the link itself
    return NavigationAppRouter(
        can_open=lambda scheme: _scheme_name(scheme) in reported,
        open_url=lambda url: True,
    )


def build_plan(nav_router: NavigationAppRouter, request: RoutingRequest) -> RoutingPlanResponse:
    """Attach a resolved URL to every choice the client may show."""
    title = request.title or nav_router.strings["title"]

    if request.status != RoutingStatus.AWAITING_SELECTION:
        return RoutingPlanResponse(
            status=request.status,
            title=title,
            launch_url=request.launched_url,
            destination=request.destination,
        )

    choices = []
    for choice in request.choices:
        if choice.id == CANCEL_CHOICE:
            choices.append(PlannedChoice(id=choice.id, label=choice.label))
            continue

        try:
            url = nav_router.resolve_url(choice.id, request.destination)
        except DeepLinkError as e:
            logger.warning(f"Dropping choice '{choice.id}': {e}")
            continue

        choices.append(PlannedChoice(id=choice.id, label=choice.label, url=url))

    return RoutingPlanResponse(
        status=request.status,
        title=title,
        choices=choices,
        destination=request.destination,
    )


def _app_info(descriptor: NavigationAppDescriptor) -> NavAppInfo:
    return NavAppInfo(
        id=descriptor.app,
        name=descriptor.display_name,
        scheme=descriptor.url_scheme,
        supports_address=descriptor.supports_address,
    )


@router.get("/apps", response_model=list[NavAppInfo])
async def list_apps():
    """All supported third-party navigation apps, in menu order."""
    return [_app_info(descriptor) for descriptor in get_catalog().list_all()]


@router.get("/apps/installed", response_model=list[NavAppInfo])
async def list_installed_apps(
    schemes: str = Query(default="", description="Comma-separated URL schemes the device can open"),
):
    """Supported apps among the schemes reported by the device."""
    reported = {_scheme_name(s) for s in schemes.split(",") if s.strip()}
    installed = get_catalog().list_installed(lambda scheme: _scheme_name(scheme) in reported)

    return [_app_info(descriptor) for descriptor in installed]


@router.post("/place", response_model=RoutingPlanResponse)
async def route_to_place(request: PlaceRouteRequest):
    """Plan navigation to a coordinate."""
    nav_router = build_client_router(request.installed_schemes)
    routing = nav_router.route_to_place(request.coordinates, request.label, CollectingPresenter())
    return build_plan(nav_router, routing)


@router.post("/address", response_model=RoutingPlanResponse)
async def route_to_address(request: AddressRouteRequest):
    """Plan navigation to a free-text address."""
    try:
        NavigationAppRouter.validate_address(request.address)
    except EmptyAddress as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    nav_router = build_client_router(request.installed_schemes)
    routing = nav_router.route_to_address(request.address, CollectingPresenter())
    return build_plan(nav_router, routing)


@router.post("/tap", response_model=RoutingPlanResponse)
async def route_to_tapped_point(
    request: TapRouteRequest,
    geocoder: GeocodingService = Depends(get_geocoding_service),
):
    """
    Reverse-geocode a tapped map point, then plan navigation to it.
    The geocoded place name becomes the destination label.
    """
    place = await geocoder.reverse_geocode(request.coordinates)

    if place is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No address found at {request.coordinates.lat},{request.coordinates.lon}",
        )

    nav_router = build_client_router(request.installed_schemes)
    routing = nav_router.route_to_place(place.coordinates, place.label, CollectingPresenter())
    return build_plan(nav_router, routing)
