"""
NavRouter Deep Links Tests
"""

import pytest

from navrouter.models.schemas import Coordinates
from navrouter.utils.deep_links import (
    encode_address,
    generate_default_maps_address_link,
    generate_default_maps_place_link,
    is_well_formed_url,
    percent_encode,
)


class TestPercentEncode:
    """Tests for the alphanumerics-only percent-encoding."""

    def test_alphanumerics_untouched(self):
        assert percent_encode("Main42") == "Main42"

    def test_punctuation_escaped(self):
        """Characters urllib would leave alone are escaped too."""
        assert percent_encode("a-b.c_d~e") == "a%2Db%2Ec%5Fd%7Ee"

    def test_comma_and_space(self):
        assert percent_encode("Paris, France") == "Paris%2C%20France"

    def test_non_ascii_encoded_as_utf8(self):
        assert percent_encode("Montréal") == "Montr%C3%A9al"


class TestEncodeAddress:
    """Tests for the two address encodings."""

    def test_plus_sign(self):
        assert encode_address("123 Main St", use_plus_sign=True) == "123+Main+St"

    def test_percent_for_space(self):
        assert encode_address("123 Main St", use_plus_sign=False) == "123%20Main%20St"

    def test_plus_sign_collapses_spaces(self):
        """Runs of spaces and surrounding spaces do not produce empty words."""
        assert encode_address("  123   Main St ", use_plus_sign=True) == "123+Main+St"

    def test_plus_sign_escapes_literal_plus(self):
        assert encode_address("A+B Road", use_plus_sign=True) == "A%2BB+Road"


class TestIsWellFormedUrl:
    """Tests for the deep link sanity check."""

    @pytest.mark.parametrize(
        "url,scheme",
        [
            ("waze://?ll=1.0,2.0&navigate=yes", "waze://"),
            ("citymapper://directions?endcoord=1.0,2.0", "citymapper://"),
            ("http://maps.apple.com/?address=x", "http://"),
        ],
    )
    def test_valid(self, url, scheme):
        assert is_well_formed_url(url, scheme)

    def test_rejects_spaces(self):
        assert not is_well_formed_url("waze://?q=123 Main", "waze://")

    def test_rejects_other_scheme(self):
        assert not is_well_formed_url("waze://?q=x", "comgooglemaps://")

    def test_rejects_missing_scheme(self):
        assert not is_well_formed_url("?q=x", "waze://")


class TestDefaultMapsLinks:
    """Tests for built-in maps fallback links."""

    BASE_URL = "http://maps.apple.com/"

    def test_place_link(self):
        link = generate_default_maps_place_link(self.BASE_URL, Coordinates(lat=45.5017, lon=-73.5673))

        assert link == "http://maps.apple.com/?daddr=45.5017,-73.5673&dirflg=d"

    def test_place_link_with_label(self):
        link = generate_default_maps_place_link(
            self.BASE_URL, Coordinates(lat=45.5017, lon=-73.5673), "Old Port"
        )

        assert link.endswith("&q=Old%20Port")

    def test_blank_label_ignored(self):
        link = generate_default_maps_place_link(self.BASE_URL, Coordinates(lat=1.5, lon=2.5), "  ")

        assert "&q=" not in link

    def test_address_link(self):
        link = generate_default_maps_address_link(self.BASE_URL, "10 Downing St, London")

        assert link == "http://maps.apple.com/?address=10+Downing+St%2C+London"
