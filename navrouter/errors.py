"""
NavRouter exception hierarchy.

Raised by the catalog and router, caught by the router itself and by the
host service so every module handles the same types.
"""


class NavRouterError(Exception):
    """Base for all navrouter-specific errors."""


class DeepLinkError(NavRouterError):
    """A deep-link URL could not be built for an app and destination."""


class UnsupportedDestinationKind(DeepLinkError):
    """The app has no grammar for this kind of destination (e.g. addresses)."""

    def __init__(self, app_name: str, kind: str) -> None:
        self.app_name = app_name
        self.kind = kind
        super().__init__(f"{app_name} cannot route to a destination of kind '{kind}'")


class InvalidScheme(DeepLinkError):
    """The constructed string is not a well-formed URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Malformed deep link: {url!r}")


class EmptyAddress(NavRouterError, ValueError):
    """An address routing request was made with blank text."""

    def __init__(self) -> None:
        super().__init__("Address must not be empty")


class UnknownChoice(NavRouterError, KeyError):
    """A selection id that was not offered (or has no URL, like cancel)."""

    def __init__(self, choice_id: str) -> None:
        self.choice_id = choice_id
        super().__init__(choice_id)

    def __str__(self) -> str:
        return f"Unknown routing choice: {self.choice_id}"
