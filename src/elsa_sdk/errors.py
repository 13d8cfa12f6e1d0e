"""Exception hierarchy raised by the Elsa Python SDK."""

from __future__ import annotations

from asyncio import CancelledError
from typing import Optional


class ElsaClientError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigurationError(ElsaClientError):
    """A surface was used before registration or registered with bad options."""


class SerializationError(ElsaClientError):
    """A value could not be encoded to, or decoded from, its wire form."""


class TransportFailure(ElsaClientError):
    def __init__(
        self,
        message: str,
        *,
        surface: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.surface = surface
        self.status_code = status_code
        self.body = body


class TransientTransportError(TransportFailure):
    """Network failure or 5xx response that survived every retry."""


class PermanentTransportError(TransportFailure):
    """4xx response; never retried."""


__all__ = [
    "CancelledError",
    "ConfigurationError",
    "ElsaClientError",
    "PermanentTransportError",
    "SerializationError",
    "TransientTransportError",
    "TransportFailure",
]
