"""Workflow definitions surface."""

from __future__ import annotations

from typing import Optional

from ..versioning import VersionOptions
from .base import ApiSurface
from .models import (
    CountResponse,
    OrderByWorkflowDefinition,
    OrderDirection,
    PagedList,
    SaveWorkflowDefinitionRequest,
    WorkflowDefinition,
    WorkflowDefinitionSummary,
)


class WorkflowDefinitionsApi(ApiSurface):
    async def list(
        self,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        version_options: Optional[VersionOptions] = None,
        search_term: Optional[str] = None,
        order_by: Optional[OrderByWorkflowDefinition] = None,
        order_direction: Optional[OrderDirection] = None,
        is_system: Optional[bool] = None,
    ) -> PagedList[WorkflowDefinitionSummary]:
        params = {
            "page": page,
            "page_size": page_size,
            "version_options": version_options,
            "search_term": search_term,
            "order_by": order_by,
            "order_direction": order_direction,
            "is_system": is_system,
        }
        return await self._send(
            "GET",
            "/workflow-definitions",
            params=params,
            response_type=PagedList[WorkflowDefinitionSummary],
        )

    async def get_by_definition_id(
        self,
        definition_id: str,
        version_options: Optional[VersionOptions] = None,
    ) -> WorkflowDefinition:
        return await self._send(
            "GET",
            f"/workflow-definitions/by-definition-id/{definition_id}",
            params={"version_options": version_options},
            response_type=WorkflowDefinition,
        )

    async def get_by_id(self, id: str) -> WorkflowDefinition:
        return await self._send("GET", f"/workflow-definitions/by-id/{id}", response_type=WorkflowDefinition)

    async def count(self) -> CountResponse:
        return await self._send("GET", "/workflow-definitions/query/count", response_type=CountResponse)

    async def save(self, request: SaveWorkflowDefinitionRequest) -> WorkflowDefinition:
        return await self._send("POST", "/workflow-definitions", body=request, response_type=WorkflowDefinition)

    async def publish(self, definition_id: str) -> WorkflowDefinitionSummary:
        return await self._send(
            "POST",
            f"/workflow-definitions/{definition_id}/publish",
            response_type=WorkflowDefinitionSummary,
        )

    async def retract(self, definition_id: str) -> WorkflowDefinitionSummary:
        return await self._send(
            "POST",
            f"/workflow-definitions/{definition_id}/retract",
            response_type=WorkflowDefinitionSummary,
        )

    async def delete(self, definition_id: str) -> None:
        await self._send("DELETE", f"/workflow-definitions/{definition_id}")


__all__ = ["WorkflowDefinitionsApi"]
