"""
NavRouter - Pydantic Schemas
Destination values and API request/response models
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enums
# =============================================================================

class NavApp(str, Enum):
    """Supported third-party navigation apps, in presentation order."""
    GOOGLE_MAPS = "google_maps"
    WAZE = "waze"
    CITYMAPPER = "citymapper"


class RoutingStatus(str, Enum):
    LAUNCHED = "launched"
    AWAITING_SELECTION = "awaiting_selection"
    CANCELLED = "cancelled"
    FAILED = "failed"
    IGNORED = "ignored"


# Choice ids that are not third-party apps
DEFAULT_MAPS_CHOICE = "default_maps"
CANCEL_CHOICE = "cancel"


# =============================================================================
# Destination Models
# =============================================================================

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")

    @field_validator("lat", "lon")
    @classmethod
    def validate_coordinates(cls, v: float) -> float:
        return float(v)


class PlaceDestination(BaseModel):
    """Route to a coordinate pair, optionally named."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["place"] = "place"
    coordinates: Coordinates
    label: Optional[str] = None


class AddressDestination(BaseModel):
    """Route to a free-text address."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["address"] = "address"
    address: str


Destination = Annotated[
    Union[PlaceDestination, AddressDestination],
    Field(discriminator="kind"),
]


class RouteChoice(BaseModel):
    """One entry of the navigation app selection sheet."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str


# =============================================================================
# Geocoding Models
# =============================================================================

class ReverseGeocodeResult(BaseModel):
    coordinates: Coordinates
    label: str
    address: str


# =============================================================================
# API Request Models
# =============================================================================

class PlaceRouteRequest(BaseModel):
    coordinates: Coordinates
    label: Optional[str] = Field(None, max_length=200)
    installed_schemes: list[str] = []


class AddressRouteRequest(BaseModel):
    address: str = Field(..., max_length=500)
    installed_schemes: list[str] = []


class TapRouteRequest(BaseModel):
    coordinates: Coordinates
    installed_schemes: list[str] = []


# =============================================================================
# API Response Models
# =============================================================================

class NavAppInfo(BaseModel):
    id: NavApp
    name: str
    scheme: str
    supports_address: bool


class PlannedChoice(BaseModel):
    id: str
    label: str
    url: Optional[str] = None


class RoutingPlanResponse(BaseModel):
    status: RoutingStatus
    title: str
    launch_url: Optional[str] = None
    choices: list[PlannedChoice] = []
    destination: Optional[Destination] = None

