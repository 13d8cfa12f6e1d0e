"""Aggregate client over every default workflow server surface."""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Type, TypeVar

from .config import ClientOptions
from .registry import ApiRegistry
from .resources import (
    ActivityDescriptorOptionsApi,
    ActivityDescriptorsApi,
    ActivityExecutionsApi,
    ApiSurface,
    ExpressionDescriptorsApi,
    FeaturesApi,
    IncidentStrategiesApi,
    JavaScriptApi,
    StorageDriversApi,
    VariableTypesApi,
    WorkflowActivationStrategiesApi,
    WorkflowContextProviderDescriptorsApi,
    WorkflowDefinitionsApi,
    WorkflowInstancesApi,
)

S = TypeVar("S", bound=ApiSurface)

DEFAULT_SURFACES: Tuple[Type[ApiSurface], ...] = (
    WorkflowDefinitionsApi,
    WorkflowInstancesApi,
    ActivityDescriptorsApi,
    ActivityDescriptorOptionsApi,
    ActivityExecutionsApi,
    StorageDriversApi,
    VariableTypesApi,
    WorkflowActivationStrategiesApi,
    IncidentStrategiesApi,
    FeaturesApi,
    JavaScriptApi,
    ExpressionDescriptorsApi,
    WorkflowContextProviderDescriptorsApi,
)


def add_elsa_client(
    registry: ApiRegistry,
    options: ClientOptions,
    surfaces: Tuple[Type[ApiSurface], ...] = DEFAULT_SURFACES,
) -> ApiRegistry:
    """Register every surface in ``surfaces`` with the same options.

    Surfaces are registered through the authenticated path when
    ``options.credential`` is set, and unauthenticated otherwise.
    """
    register = registry.register_authenticated_api if options.credential else registry.register_api
    for surface in surfaces:
        register(surface, options)
    return registry


class ElsaClient:
    def __init__(self, registry: ApiRegistry, base_address: Optional[str] = None) -> None:
        self._registry = registry
        self._base_address = base_address
        self._clients: Dict[Type[ApiSurface], ApiSurface] = {}

    async def __aenter__(self) -> "ElsaClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def api(self, surface: Type[S]) -> S:
        client = self._clients.get(surface)
        if client is None:
            client = self._registry.create_client(surface, self._base_address)
            self._clients[surface] = client
        return client  # type: ignore[return-value]

    @property
    def workflow_definitions(self) -> WorkflowDefinitionsApi:
        return self.api(WorkflowDefinitionsApi)

    @property
    def workflow_instances(self) -> WorkflowInstancesApi:
        return self.api(WorkflowInstancesApi)

    @property
    def activity_descriptors(self) -> ActivityDescriptorsApi:
        return self.api(ActivityDescriptorsApi)

    @property
    def storage_drivers(self) -> StorageDriversApi:
        return self.api(StorageDriversApi)

    @property
    def variable_types(self) -> VariableTypesApi:
        return self.api(VariableTypesApi)

    @property
    def workflow_activation_strategies(self) -> WorkflowActivationStrategiesApi:
        return self.api(WorkflowActivationStrategiesApi)

    @property
    def incident_strategies(self) -> IncidentStrategiesApi:
        return self.api(IncidentStrategiesApi)

    @property
    def features(self) -> FeaturesApi:
        return self.api(FeaturesApi)

    @property
    def activity_descriptor_options(self) -> ActivityDescriptorOptionsApi:
        return self.api(ActivityDescriptorOptionsApi)

    @property
    def activity_executions(self) -> ActivityExecutionsApi:
        return self.api(ActivityExecutionsApi)

    @property
    def javascript(self) -> JavaScriptApi:
        return self.api(JavaScriptApi)

    @property
    def expression_descriptors(self) -> ExpressionDescriptorsApi:
        return self.api(ExpressionDescriptorsApi)

    @property
    def workflow_context_provider_descriptors(self) -> WorkflowContextProviderDescriptorsApi:
        return self.api(WorkflowContextProviderDescriptorsApi)

    async def aclose(self) -> None:
        clients = list(self._clients.values())
        self._clients.clear()
        for client in clients:
            await client.aclose()


__all__ = ["DEFAULT_SURFACES", "ElsaClient", "add_elsa_client"]
