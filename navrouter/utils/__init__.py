"""NavRouter Utilities"""

from navrouter.utils.deep_links import (
    encode_address,
    percent_encode,
    generate_default_maps_place_link,
    generate_default_maps_address_link,
)

__all__ = [
    "encode_address",
    "percent_encode",
    "generate_default_maps_place_link",
    "generate_default_maps_address_link",
]
