"""Authorization header injection for authenticated surface clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import httpx

from .config import ClientOptions
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .registry import RegisteredClient

RequestHook = Callable[["RegisteredClient", httpx.Request], None]


def authorization_value(credential: str, scheme: str = "ApiKey") -> str:
    return f"{scheme} {credential}" if scheme else credential


def build_auth_hook(options: ClientOptions) -> RequestHook:
    """Return a hook that stamps ``Authorization`` onto each outgoing request.

    Raises ``ConfigurationError`` when ``options.credential`` is missing; use
    the unauthenticated registration path when no credential is intended.
    """
    if not options.credential:
        raise ConfigurationError("authenticated registration requires options.credential")
    header = authorization_value(options.credential, options.auth_scheme)

    def apply_authorization(registration: "RegisteredClient", request: httpx.Request) -> None:
        request.headers["Authorization"] = header

    return apply_authorization


__all__ = ["RequestHook", "authorization_value", "build_auth_hook"]
