"""Configuration objects for the Elsa Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

import httpx

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .registry import RegisteredClient

RequestConfigurator = Callable[["RegisteredClient", httpx.Request], None]


@dataclass(frozen=True)
class ClientOptions:
    base_address: str
    credential: Optional[str] = None
    configure_request: Optional[RequestConfigurator] = None
    timeout: float = 30.0
    auth_scheme: str = "ApiKey"
    user_agent: str = "elsa-sdk-python/0.1.0"
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy, detached from the caller's dict.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_env(cls, configure_request: Optional[RequestConfigurator] = None) -> "ClientOptions":
        base_address = os.environ.get("ELSA_BASE_URL", "http://localhost:5001/elsa/api")
        credential = os.environ.get("ELSA_API_KEY") or None
        raw_timeout = os.environ.get("ELSA_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(f"ELSA_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from exc
        auth_scheme = os.environ.get("ELSA_AUTH_SCHEME", "ApiKey")
        return cls(
            base_address=base_address,
            credential=credential,
            configure_request=configure_request,
            timeout=timeout,
            auth_scheme=auth_scheme,
        )


__all__ = ["ClientOptions", "RequestConfigurator"]
