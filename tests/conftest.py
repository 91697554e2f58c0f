"""
NavRouter Test Configuration
Pytest fixtures, fake platform capabilities and test client setup
"""

import pytest
from fastapi.testclient import TestClient

from navrouter.main import app
from navrouter.models.schemas import Coordinates
from navrouter.services.catalog import NavigationAppCatalog


class FakePlatform:
    """Stands in for the device: answers scheme probes and records opened URLs."""

    def __init__(self, installed_schemes=()):
        self.installed_schemes = set(installed_schemes)
        self.probed: list[str] = []
        self.opened: list[str] = []

    def can_open(self, scheme: str) -> bool:
        self.probed.append(scheme)
        return scheme in self.installed_schemes

    def open_url(self, url: str) -> bool:
        self.opened.append(url)
        return True


class RecordingPresenter:
    """Captures the selection sheet and its callbacks."""

    def __init__(self):
        self.calls = 0
        self.title = None
        self.options = []
        self.on_selected = None
        self.on_cancelled = None

    def present_choice(self, title, options, on_selected, on_cancelled):
        self.calls += 1
        self.title = title
        self.options = options
        self.on_selected = on_selected
        self.on_cancelled = on_cancelled

    @property
    def option_ids(self) -> list[str]:
        return [option.id for option in self.options]


@pytest.fixture
def catalog():
    """Catalog with the built-in apps."""
    return NavigationAppCatalog()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def make_platform():
    """Factory for fake platforms with a given set of installed schemes."""
    return FakePlatform


@pytest.fixture
def sample_coordinates():
    """Sample coordinates for testing."""
    return {
        "montreal": Coordinates(lat=45.5017, lon=-73.5673),
        "paris": Coordinates(lat=48.8566, lon=2.3522),
        "sydney": Coordinates(lat=-33.8688, lon=151.2093),
    }


@pytest.fixture(scope="function")
def client():
    """Create a test client."""
    yield TestClient(app)
    app.dependency_overrides.clear()
