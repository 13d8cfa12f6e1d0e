"""Shared plumbing for hand-written API surface adapters."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Mapping, Optional

import httpx

from ..errors import PermanentTransportError, TransientTransportError
from ..retry import is_transient_error, is_transient_status
from ..serialization import SerializationPolicy

logger = logging.getLogger("elsa_sdk.resources")


class ApiSurface:
    """One remote API contract.

    Subclasses declare their operations as coroutines that delegate to
    ``_send``. ``surface_name`` keys the registration and defaults to the
    class name.
    """

    surface_name: ClassVar[str] = "ApiSurface"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "surface_name" not in cls.__dict__:
            cls.surface_name = cls.__name__

    def __init__(self, http_client: httpx.AsyncClient, serialization: SerializationPolicy) -> None:
        self._client = http_client
        self._serialization = serialization

    async def __aenter__(self) -> "ApiSurface":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def base_address(self) -> str:
        return str(self._client.base_url)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        response_type: Any = None,
    ) -> Any:
        query = self._serialization.encode_query(params or {})
        content = self._serialization.dumps(body) if body is not None else None
        headers = {"Content-Type": "application/json"} if content is not None else None
        try:
            response = await self._client.request(method, path, params=query or None, content=content, headers=headers)
        except httpx.TransportError as exc:
            logger.error("Request failed surface=%s %s %s error=%r", self.surface_name, method, path, exc)
            if is_transient_error(exc):
                raise TransientTransportError(
                    f"{method} {path} failed after retries: {exc}", surface=self.surface_name
                ) from exc
            raise PermanentTransportError(f"{method} {path} cannot be sent: {exc}", surface=self.surface_name) from exc

        if response.status_code >= 400:
            self._raise_for_status(method, path, response)
        if response_type is str and not _is_json(response):
            return response.text
        return self._serialization.loads(response.content, response_type)

    def _raise_for_status(self, method: str, path: str, response: httpx.Response) -> None:
        logger.error(
            "Request failed surface=%s %s %s status=%s body=%s",
            self.surface_name,
            method,
            path,
            response.status_code,
            response.text,
        )
        error_type = TransientTransportError if is_transient_status(response.status_code) else PermanentTransportError
        raise error_type(
            f"{method} {path} returned {response.status_code}",
            surface=self.surface_name,
            status_code=response.status_code,
            body=response.text,
        )

    async def aclose(self) -> None:
        await self._client.aclose()


def _is_json(response: httpx.Response) -> bool:
    return "json" in response.headers.get("Content-Type", "")


__all__ = ["ApiSurface"]
