"""Typed async client for the Hot Aisle API."""

from hotaisle.api.client import BASE_URL, ClientConfig, HotAisleClient
from hotaisle.api.exceptions import (
    APIError,
    DecodingError,
    HotAisleError,
    SerializationError,
    TransportError,
)

__all__ = [
    "APIError",
    "BASE_URL",
    "ClientConfig",
    "DecodingError",
    "HotAisleClient",
    "HotAisleError",
    "SerializationError",
    "TransportError",
]
