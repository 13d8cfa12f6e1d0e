"""Activity execution records of a workflow instance."""

from __future__ import annotations

from typing import Optional

from .base import ApiSurface
from .models import ActivityExecutionRecord, ListResponse


class ActivityExecutionsApi(ApiSurface):
    async def list(
        self, workflow_instance_id: str, activity_node_id: Optional[str] = None
    ) -> ListResponse[ActivityExecutionRecord]:
        return await self._send(
            "GET",
            "/activity-executions/list",
            params={"workflow_instance_id": workflow_instance_id, "activity_node_id": activity_node_id},
            response_type=ListResponse[ActivityExecutionRecord],
        )


__all__ = ["ActivityExecutionsApi"]
