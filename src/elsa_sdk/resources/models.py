"""Pydantic models for workflow server resources.

Field names are snake_case here and camelCase on the wire. Enum member names
are the wire values, so they follow the server's PascalCase spelling.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class WorkflowStatus(Enum):
    Running = 0
    Finished = 1


class WorkflowSubStatus(Enum):
    Pending = 0
    Executing = 1
    Suspended = 2
    Finished = 3
    Cancelled = 4
    Faulted = 5


class OrderDirection(Enum):
    Ascending = 0
    Descending = 1


class OrderByWorkflowDefinition(Enum):
    Name = 0
    CreatedAt = 1
    Version = 2


class OrderByWorkflowInstance(Enum):
    Name = 0
    CreatedAt = 1
    UpdatedAt = 2
    FinishedAt = 3


class ActivityKind(Enum):
    Action = 0
    Trigger = 1
    Job = 2
    Task = 3


class ActivityStatus(Enum):
    Pending = 0
    Running = 1
    Completed = 2
    Canceled = 3
    Faulted = 4


class PagedList(BaseModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    page: Optional[int] = None
    page_size: Optional[int] = None
    total_count: int = 0


class ListResponse(BaseModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    count: int = 0


class CountResponse(BaseModel):
    count: int


class WorkflowDefinitionSummary(BaseModel):
    id: str
    definition_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    version: int = 1
    is_latest: bool = False
    is_published: bool = False
    materializer_name: Optional[str] = None
    created_at: Optional[datetime] = None


class WorkflowDefinition(WorkflowDefinitionSummary):
    tool_version: Optional[str] = None
    variables: List[Dict[str, Any]] = Field(default_factory=list)
    inputs: List[Dict[str, Any]] = Field(default_factory=list)
    outputs: List[Dict[str, Any]] = Field(default_factory=list)
    custom_properties: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)
    root: Optional[Dict[str, Any]] = None


class WorkflowDefinitionModel(BaseModel):
    definition_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[int] = None
    variables: List[Dict[str, Any]] = Field(default_factory=list)
    custom_properties: Dict[str, Any] = Field(default_factory=dict)
    root: Optional[Dict[str, Any]] = None


class SaveWorkflowDefinitionRequest(BaseModel):
    model: WorkflowDefinitionModel
    publish: Optional[bool] = None


class WorkflowInstanceSummary(BaseModel):
    id: str
    definition_id: str
    definition_version_id: Optional[str] = None
    version: int = 1
    status: WorkflowStatus
    sub_status: WorkflowSubStatus
    correlation_id: Optional[str] = None
    name: Optional[str] = None
    incident_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None


class WorkflowInstance(WorkflowInstanceSummary):
    properties: Dict[str, Any] = Field(default_factory=dict)
    workflow_state: Optional[Dict[str, Any]] = None


class ListWorkflowInstancesRequest(BaseModel):
    page: Optional[int] = None
    page_size: Optional[int] = None
    search_term: Optional[str] = None
    definition_id: Optional[str] = None
    version: Optional[int] = None
    correlation_id: Optional[str] = None
    status: Optional[WorkflowStatus] = None
    sub_status: Optional[WorkflowSubStatus] = None
    order_by: Optional[OrderByWorkflowInstance] = None
    order_direction: Optional[OrderDirection] = None


class ActivityDescriptor(BaseModel):
    type_name: str
    namespace: Optional[str] = None
    name: Optional[str] = None
    version: int = 1
    category: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    kind: ActivityKind = ActivityKind.Action
    is_container: bool = False
    is_browsable: bool = True


class StorageDriverDescriptor(BaseModel):
    type_name: str
    display_name: str
    priority: int = 0
    deprecated: bool = False


class VariableDescriptor(BaseModel):
    type_name: str
    display_name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None


class WorkflowActivationStrategyDescriptor(BaseModel):
    type_name: str
    display_name: Optional[str] = None
    description: Optional[str] = None


class IncidentStrategyDescriptor(BaseModel):
    type_name: str
    display_name: Optional[str] = None
    description: Optional[str] = None


class FeatureDescriptor(BaseModel):
    name: str
    namespace: Optional[str] = None
    full_name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None


class ActivityDescriptorOptionsRequest(BaseModel):
    context: Dict[str, Any] = Field(default_factory=dict)


class ActivityDescriptorOptionsResponse(BaseModel):
    items: Dict[str, Any] = Field(default_factory=dict)


class ActivityExecutionRecord(BaseModel):
    id: str
    workflow_instance_id: str
    activity_id: str
    activity_node_id: str
    activity_type: str
    activity_type_version: int = 1
    activity_name: Optional[str] = None
    status: ActivityStatus = ActivityStatus.Pending
    has_bookmarks: bool = False
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class JavaScriptTypeDefinitionsRequest(BaseModel):
    activity_type_name: Optional[str] = None
    property_name: Optional[str] = None


class ExpressionDescriptor(BaseModel):
    type: str
    display_name: Optional[str] = None
    is_serializable: bool = True
    is_browsable: bool = True
    properties: Dict[str, Any] = Field(default_factory=dict)


class WorkflowContextProviderDescriptor(BaseModel):
    name: str
    type: str


__all__ = [
    "ActivityDescriptor",
    "ActivityDescriptorOptionsRequest",
    "ActivityDescriptorOptionsResponse",
    "ActivityExecutionRecord",
    "ActivityKind",
    "ActivityStatus",
    "CountResponse",
    "ExpressionDescriptor",
    "FeatureDescriptor",
    "IncidentStrategyDescriptor",
    "JavaScriptTypeDefinitionsRequest",
    "ListResponse",
    "ListWorkflowInstancesRequest",
    "OrderByWorkflowDefinition",
    "OrderByWorkflowInstance",
    "OrderDirection",
    "PagedList",
    "SaveWorkflowDefinitionRequest",
    "StorageDriverDescriptor",
    "VariableDescriptor",
    "WorkflowActivationStrategyDescriptor",
    "WorkflowContextProviderDescriptor",
    "WorkflowDefinition",
    "WorkflowDefinitionModel",
    "WorkflowDefinitionSummary",
    "WorkflowInstance",
    "WorkflowInstanceSummary",
    "WorkflowStatus",
    "WorkflowSubStatus",
]
