"""Workflow instances surface."""

from __future__ import annotations

from typing import Optional

from .base import ApiSurface
from .models import ListWorkflowInstancesRequest, PagedList, WorkflowInstance, WorkflowInstanceSummary


class WorkflowInstancesApi(ApiSurface):
    async def list(self, request: Optional[ListWorkflowInstancesRequest] = None) -> PagedList[WorkflowInstanceSummary]:
        return await self._send(
            "POST",
            "/workflow-instances",
            body=request or ListWorkflowInstancesRequest(),
            response_type=PagedList[WorkflowInstanceSummary],
        )

    async def get(self, id: str) -> WorkflowInstance:
        return await self._send("GET", f"/workflow-instances/{id}", response_type=WorkflowInstance)

    async def delete(self, id: str) -> None:
        await self._send("DELETE", f"/workflow-instances/{id}")


__all__ = ["WorkflowInstancesApi"]
