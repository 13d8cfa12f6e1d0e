"""API surfaces exposed by the workflow server."""

from .activity_executions import ActivityExecutionsApi
from .base import ApiSurface
from .descriptors import (
    ActivityDescriptorOptionsApi,
    ActivityDescriptorsApi,
    ExpressionDescriptorsApi,
    IncidentStrategiesApi,
    StorageDriversApi,
    VariableTypesApi,
    WorkflowActivationStrategiesApi,
    WorkflowContextProviderDescriptorsApi,
)
from .features import FeaturesApi
from .scripting import JavaScriptApi
from .workflow_definitions import WorkflowDefinitionsApi
from .workflow_instances import WorkflowInstancesApi

__all__ = [
    "ActivityDescriptorOptionsApi",
    "ActivityDescriptorsApi",
    "ActivityExecutionsApi",
    "ApiSurface",
    "ExpressionDescriptorsApi",
    "FeaturesApi",
    "IncidentStrategiesApi",
    "JavaScriptApi",
    "StorageDriversApi",
    "VariableTypesApi",
    "WorkflowActivationStrategiesApi",
    "WorkflowContextProviderDescriptorsApi",
    "WorkflowDefinitionsApi",
    "WorkflowInstancesApi",
]
