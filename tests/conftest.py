from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from elsa_sdk.registry import ApiRegistry


class RecordingSleep:
    """Stands in for asyncio.sleep so backoff delays are observable and instant."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture()
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def make_registry(recording_sleep: RecordingSleep) -> Callable[..., ApiRegistry]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> ApiRegistry:
        return ApiRegistry(lambda surface_name: httpx.MockTransport(handler), sleep=recording_sleep, **kwargs)

    return factory
