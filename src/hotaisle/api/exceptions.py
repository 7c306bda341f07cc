"""Custom exceptions for the Hot Aisle API client."""

from __future__ import annotations


class HotAisleError(Exception):
    """Base exception for Hot Aisle client errors."""


class TransportError(HotAisleError):
    """The request failed before any response was received."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class APIError(HotAisleError):
    """The server answered with a status code >= 400.

    The response body is kept verbatim; its format depends on the endpoint.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error (status {status_code}): {message}")


class SerializationError(HotAisleError):
    """The request body could not be encoded as JSON."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"failed to marshal request body: {cause}")


class DecodingError(HotAisleError):
    """A successful response body did not match the expected shape."""

    def __init__(self, raw: bytes, cause: BaseException) -> None:
        self.raw = raw
        self.cause = cause
        super().__init__(f"failed to unmarshal response: {cause}")
