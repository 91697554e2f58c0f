"""
NavRouter Deep Links
Address encoding and built-in maps URL generation
"""

from urllib.parse import urlsplit

from navrouter.models.schemas import Coordinates


def percent_encode(text: str) -> str:
    """
    Percent-encode everything except ASCII letters and digits.

    Unlike urllib's quote(), "-", ".", "_" and "~" are escaped too, so the
    output only ever contains [A-Za-z0-9%].
    """
    return "".join(
        char if char.isascii() and char.isalnum()
        else "".join(f"%{byte:02X}" for byte in char.encode("utf-8"))
        for char in text
    )


def encode_address(address: str, use_plus_sign: bool) -> str:
    """
    Encode a free-text address for a deep link query.

    Args:
        address: Address as typed or geocoded
        use_plus_sign: Join space-separated words with "+" instead of "%20".
            Runs of spaces collapse to a single "+".

    Returns:
        Encoded address string
    """
    if use_plus_sign:
        return "+".join(percent_encode(word) for word in address.split(" ") if word)
    return percent_encode(address)


def format_lat_lon(coordinates: Coordinates) -> str:
    # str() keeps the shortest round-trip repr, no rounding
    return f"{coordinates.lat},{coordinates.lon}"


def is_well_formed_url(url: str, scheme: str) -> bool:
    """Check that url parses, is plain printable ASCII and uses the given scheme."""
    if not url.isascii() or any(char.isspace() or not char.isprintable() for char in url):
        return False

    try:
        parts = urlsplit(url)
    except ValueError:
        return False

    expected = scheme.split(":", 1)[0].lower()
    return bool(parts.scheme) and parts.scheme == expected


def generate_default_maps_place_link(
    base_url: str,
    destination: Coordinates,
    label: str = "",
) -> str:
    """
    Driving directions to a coordinate in the platform's built-in maps.

    Args:
        base_url: Built-in maps base URL (e.g. http://maps.apple.com/)
        destination: Target coordinates
        label: Optional place name shown on the pin

    Returns:
        Deep link URL string
    """
    link = f"{base_url}?daddr={format_lat_lon(destination)}&dirflg=d"
    if label and label.strip():
        link += f"&q={percent_encode(label.strip())}"
    return link


def generate_default_maps_address_link(base_url: str, address: str) -> str:
    """Address search in the platform's built-in maps."""
    return f"{base_url}?address={encode_address(address, use_plus_sign=True)}"
