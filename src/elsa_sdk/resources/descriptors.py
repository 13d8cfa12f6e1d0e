"""Descriptor surfaces: activities, expressions, storage drivers, variable types and strategies."""

from __future__ import annotations

from typing import Optional

from .base import ApiSurface
from .models import (
    ActivityDescriptor,
    ActivityDescriptorOptionsRequest,
    ActivityDescriptorOptionsResponse,
    ExpressionDescriptor,
    IncidentStrategyDescriptor,
    ListResponse,
    StorageDriverDescriptor,
    VariableDescriptor,
    WorkflowActivationStrategyDescriptor,
    WorkflowContextProviderDescriptor,
)


class ActivityDescriptorsApi(ApiSurface):
    async def list(self, refresh: bool = False) -> ListResponse[ActivityDescriptor]:
        return await self._send(
            "GET",
            "/descriptors/activities",
            params={"refresh": refresh or None},
            response_type=ListResponse[ActivityDescriptor],
        )


class ActivityDescriptorOptionsApi(ApiSurface):
    async def get(
        self,
        activity_type_name: str,
        property_name: str,
        request: Optional[ActivityDescriptorOptionsRequest] = None,
    ) -> ActivityDescriptorOptionsResponse:
        return await self._send(
            "POST",
            f"/descriptors/activities/{activity_type_name}/options/{property_name}",
            body=request or ActivityDescriptorOptionsRequest(),
            response_type=ActivityDescriptorOptionsResponse,
        )


class ExpressionDescriptorsApi(ApiSurface):
    async def list(self) -> ListResponse[ExpressionDescriptor]:
        return await self._send(
            "GET",
            "/descriptors/expression-descriptors",
            response_type=ListResponse[ExpressionDescriptor],
        )


class StorageDriversApi(ApiSurface):
    async def list(self) -> ListResponse[StorageDriverDescriptor]:
        return await self._send(
            "GET",
            "/descriptors/storage-drivers",
            response_type=ListResponse[StorageDriverDescriptor],
        )


class VariableTypesApi(ApiSurface):
    async def list(self) -> ListResponse[VariableDescriptor]:
        return await self._send("GET", "/descriptors/variables", response_type=ListResponse[VariableDescriptor])


class WorkflowActivationStrategiesApi(ApiSurface):
    async def list(self) -> ListResponse[WorkflowActivationStrategyDescriptor]:
        return await self._send(
            "GET",
            "/descriptors/workflow-activation-strategies",
            response_type=ListResponse[WorkflowActivationStrategyDescriptor],
        )


class WorkflowContextProviderDescriptorsApi(ApiSurface):
    async def list(self) -> ListResponse[WorkflowContextProviderDescriptor]:
        return await self._send(
            "GET",
            "/descriptors/workflow-context-provider-descriptors",
            response_type=ListResponse[WorkflowContextProviderDescriptor],
        )


class IncidentStrategiesApi(ApiSurface):
    async def list(self) -> ListResponse[IncidentStrategyDescriptor]:
        return await self._send(
            "GET",
            "/incident-strategies",
            response_type=ListResponse[IncidentStrategyDescriptor],
        )


__all__ = [
    "ActivityDescriptorOptionsApi",
    "ActivityDescriptorsApi",
    "ExpressionDescriptorsApi",
    "IncidentStrategiesApi",
    "StorageDriversApi",
    "VariableTypesApi",
    "WorkflowActivationStrategiesApi",
    "WorkflowContextProviderDescriptorsApi",
]
