"""Elsa workflow server Python SDK."""

from .client import DEFAULT_SURFACES, ElsaClient, add_elsa_client
from .config import ClientOptions
from .errors import (
    CancelledError,
    ConfigurationError,
    ElsaClientError,
    PermanentTransportError,
    SerializationError,
    TransientTransportError,
)
from .registry import ApiRegistry, RegisteredClient
from .retry import RetryPolicy, build_retry_policy
from .serialization import SerializationPolicy, build_serialization_policy
from .versioning import VersionOptions

__all__ = [
    "ApiRegistry",
    "CancelledError",
    "ClientOptions",
    "ConfigurationError",
    "DEFAULT_SURFACES",
    "ElsaClient",
    "ElsaClientError",
    "PermanentTransportError",
    "RegisteredClient",
    "RetryPolicy",
    "SerializationError",
    "SerializationPolicy",
    "TransientTransportError",
    "VersionOptions",
    "add_elsa_client",
    "build_retry_policy",
    "build_serialization_policy",
]
