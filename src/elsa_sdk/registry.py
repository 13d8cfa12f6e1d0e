"""Registration of API surfaces and construction of their typed clients.

An ``ApiRegistry`` is owned by the application's composition root. Each
surface is registered once at startup with its ``ClientOptions``; clients are
then created on demand and share the registry's retry and serialization
policies.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

import httpx

from .auth import RequestHook, build_auth_hook
from .config import ClientOptions
from .errors import ConfigurationError
from .resources.base import ApiSurface
from .retry import RetryingTransport, RetryPolicy, Sleep, build_retry_policy
from .serialization import SerializationPolicy, build_serialization_policy

logger = logging.getLogger("elsa_sdk.registry")

S = TypeVar("S", bound=ApiSurface)
SurfaceKey = Union[str, Type[ApiSurface]]
TransportFactory = Callable[[str], httpx.AsyncBaseTransport]
TransportConfigurator = Callable[[str, httpx.AsyncBaseTransport], httpx.AsyncBaseTransport]


@dataclass(frozen=True)
class RegisteredClient:
    surface_name: str
    surface: Type[ApiSurface]
    options: ClientOptions
    retry_policy: RetryPolicy
    serialization_policy: SerializationPolicy
    request_hooks: Tuple[RequestHook, ...] = ()
    authenticated: bool = False


def _default_transport_factory(surface_name: str) -> httpx.AsyncBaseTransport:
    return httpx.AsyncHTTPTransport()


def _surface_name(surface: SurfaceKey) -> str:
    return surface if isinstance(surface, str) else surface.surface_name


class ApiRegistry:
    def __init__(
        self,
        transport_factory: Optional[TransportFactory] = None,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        serialization_policy: Optional[SerializationPolicy] = None,
        configure_transport: Optional[TransportConfigurator] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._transport_factory = transport_factory or _default_transport_factory
        self._retry_policy = retry_policy or build_retry_policy()
        self._serialization_policy = serialization_policy or build_serialization_policy()
        self._configure_transport = configure_transport
        self._sleep = sleep
        self._registrations: Dict[str, RegisteredClient] = {}

    @property
    def serialization_policy(self) -> SerializationPolicy:
        return self._serialization_policy

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    @property
    def surfaces(self) -> Tuple[str, ...]:
        return tuple(self._registrations)

    def register_api(
        self,
        surface: Type[ApiSurface],
        options: ClientOptions,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        serialization_policy: Optional[SerializationPolicy] = None,
    ) -> RegisteredClient:
        return self._register(surface, options, (), retry_policy, serialization_policy)

    def register_authenticated_api(
        self,
        surface: Type[ApiSurface],
        options: ClientOptions,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        serialization_policy: Optional[SerializationPolicy] = None,
    ) -> RegisteredClient:
        auth_hook = build_auth_hook(options)
        return self._register(surface, options, (auth_hook,), retry_policy, serialization_policy)

    def _register(
        self,
        surface: Type[ApiSurface],
        options: ClientOptions,
        leading_hooks: Tuple[RequestHook, ...],
        retry_policy: Optional[RetryPolicy],
        serialization_policy: Optional[SerializationPolicy],
    ) -> RegisteredClient:
        if not options.base_address:
            raise ConfigurationError(f"{surface.surface_name}: base_address is required")
        hooks: List[RequestHook] = list(leading_hooks)
        if options.configure_request is not None:
            hooks.append(options.configure_request)

        registration = RegisteredClient(
            surface_name=surface.surface_name,
            surface=surface,
            options=options,
            retry_policy=retry_policy or self._retry_policy,
            serialization_policy=serialization_policy or self._serialization_policy,
            request_hooks=tuple(hooks),
            authenticated=bool(leading_hooks),
        )
        if registration.surface_name in self._registrations:
            logger.info("Replacing registration for surface=%s", registration.surface_name)
        self._registrations[registration.surface_name] = registration
        logger.info(
            "Registered surface=%s base_address=%s authenticated=%s",
            registration.surface_name,
            options.base_address,
            registration.authenticated,
        )
        return registration

    def is_registered(self, surface: SurfaceKey) -> bool:
        return _surface_name(surface) in self._registrations

    def registration(self, surface: SurfaceKey) -> RegisteredClient:
        name = _surface_name(surface)
        try:
            return self._registrations[name]
        except KeyError:
            raise ConfigurationError(f"API surface {name!r} has not been registered") from None

    def create_http_client(self, surface: SurfaceKey, base_address: Optional[str] = None) -> httpx.AsyncClient:
        """Build the named transport client for a registered surface."""
        registration = self.registration(surface)
        options = registration.options

        transport = self._transport_factory(registration.surface_name)
        if self._configure_transport is not None:
            transport = self._configure_transport(registration.surface_name, transport)
        transport = RetryingTransport(
            transport,
            registration.retry_policy,
            surface=registration.surface_name,
            sleep=self._sleep,
        )

        headers = {"Accept": "application/json", "User-Agent": options.user_agent}
        headers.update(options.headers)
        return httpx.AsyncClient(
            base_url=base_address or options.base_address,
            timeout=options.timeout,
            headers=headers,
            transport=transport,
            event_hooks={"request": [_bind_hook(hook, registration) for hook in registration.request_hooks]},
        )

    def create_client(
        self,
        surface: Type[S],
        base_address: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> S:
        """Create a typed client for a registered surface.

        With ``http_client`` the given client is used as is, without the retry
        transport or request hooks. Passing ``base_address`` as well rebinds
        that client's ``base_url`` in place, so it affects every other user of
        the same ``httpx.AsyncClient``.
        """
        registration = self.registration(surface)
        if http_client is None:
            http_client = self.create_http_client(surface, base_address)
        elif base_address is not None:
            http_client.base_url = base_address
        return surface(http_client, registration.serialization_policy)


def _bind_hook(hook: RequestHook, registration: RegisteredClient):
    async def on_request(request: httpx.Request) -> None:
        hook(registration, request)

    return on_request


__all__ = ["ApiRegistry", "RegisteredClient", "TransportConfigurator", "TransportFactory"]
