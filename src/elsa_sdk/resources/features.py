"""Installed features surface."""

from __future__ import annotations

from .base import ApiSurface
from .models import FeatureDescriptor, ListResponse


class FeaturesApi(ApiSurface):
    async def list_installed(self) -> ListResponse[FeatureDescriptor]:
        return await self._send("GET", "/features/installed", response_type=ListResponse[FeatureDescriptor])

    async def get(self, full_name: str) -> FeatureDescriptor:
        return await self._send("GET", f"/features/installed/{full_name}", response_type=FeatureDescriptor)


__all__ = ["FeaturesApi"]
