"""Custom exceptions for WikiContext services."""


class InvalidSeedUrlError(ValueError):
    """Raised when a seed URL does not point into a wiki space."""

    def __init__(self, url: str):
        self.url = url
        super().__init__("Invalid Wiki URL format. Expected: https://<server>/wiki/spaces/<space>/pages/...")


class NoValidResourcesError(ValueError):
    """Raised when every seed URL handed to a collection run is blank."""

    def __init__(self):
        super().__init__("Please add at least one valid Wiki URL")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class UnknownFetchModeError(ValueError):
    """Raised when configuration names a fetch mode no fetcher is registered for."""

    def __init__(self, fetch_mode):
        self.fetch_mode = fetch_mode
        super().__init__(f"Unknown fetch_mode: {fetch_mode!r}")
