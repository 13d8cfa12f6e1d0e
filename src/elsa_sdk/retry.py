"""Retry policy for transient HTTP failures and the transport that applies it."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List

import httpx
from prometheus_client import Counter

logger = logging.getLogger("elsa_sdk.retry")

ATTEMPT_COUNTER = Counter(
    "elsa_client_attempts_total",
    "HTTP attempts issued by API surface clients",
    ["surface"],
)
RETRY_COUNTER = Counter(
    "elsa_client_retries_total",
    "Retries scheduled after a transient failure",
    ["surface", "reason"],
)

Backoff = Callable[[int], float]
Sleep = Callable[[float], Awaitable[None]]

TRANSIENT_ERRORS = (httpx.NetworkError, httpx.TimeoutException, httpx.RemoteProtocolError)


def exponential_backoff(attempt: int) -> float:
    """Seconds to wait before retry ``attempt`` (1-based): 2, 4, 8, ..."""
    return float(2**attempt)


def is_transient_status(status_code: int) -> bool:
    return status_code >= 500


def is_transient_error(exc: httpx.TransportError) -> bool:
    """Network-level failures only; a bad scheme or malformed request never recovers."""
    return isinstance(exc, TRANSIENT_ERRORS)


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    backoff: Backoff = exponential_backoff

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")

    def delay_for(self, attempt: int) -> float:
        return self.backoff(attempt)

    def delays(self) -> List[float]:
        return [self.delay_for(attempt) for attempt in range(1, self.max_retries + 1)]


def build_retry_policy() -> RetryPolicy:
    return RetryPolicy(max_retries=3, backoff=exponential_backoff)


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps another transport and repeats requests that fail transiently.

    Network errors, timeouts and 5xx responses are retried up to
    ``policy.max_retries`` times. Other transport errors, such as an
    unsupported URL scheme, are re-raised at once. Once retries are exhausted
    the last response is returned, or the last exception re-raised, untouched.
    Any other response is returned after the first attempt.
    """

    def __init__(
        self,
        inner: httpx.AsyncBaseTransport,
        policy: RetryPolicy,
        *,
        surface: str = "default",
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._inner = inner
        self._policy = policy
        self._surface = surface
        self._sleep = sleep

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            ATTEMPT_COUNTER.labels(surface=self._surface).inc()
            try:
                response = await self._inner.handle_async_request(request)
            except httpx.TransportError as exc:
                if not is_transient_error(exc) or attempt >= self._policy.max_retries:
                    raise
                reason = type(exc).__name__
            else:
                if not is_transient_status(response.status_code) or attempt >= self._policy.max_retries:
                    return response
                await response.aclose()
                reason = f"status_{response.status_code}"

            attempt += 1
            delay = self._policy.delay_for(attempt)
            RETRY_COUNTER.labels(surface=self._surface, reason=reason).inc()
            logger.warning(
                "Transient failure surface=%s %s %s reason=%s; retry %s/%s in %.1fs",
                self._surface,
                request.method,
                request.url,
                reason,
                attempt,
                self._policy.max_retries,
                delay,
            )
            await self._sleep(delay)

    async def aclose(self) -> None:
        await self._inner.aclose()


__all__ = [
    "RetryPolicy",
    "RetryingTransport",
    "build_retry_policy",
    "exponential_backoff",
    "is_transient_error",
    "is_transient_status",
]
