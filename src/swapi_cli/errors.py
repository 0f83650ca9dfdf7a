"""Errors raised while talking to the API or decoding its payloads.

Everything derives from `SwapiError` so the CLI can map all failures to one
exit status in a single place.
"""


class SwapiError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(SwapiError):
    """Request failed on the network or came back with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(SwapiError):
    """Response body did not contain any usable character records."""
