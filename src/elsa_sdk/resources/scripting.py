"""Scripting support surfaces."""

from __future__ import annotations

from .base import ApiSurface
from .models import JavaScriptTypeDefinitionsRequest


class JavaScriptApi(ApiSurface):
    async def get_type_definitions(
        self, workflow_definition_id: str, request: JavaScriptTypeDefinitionsRequest
    ) -> str:
        """Fetch the TypeScript declarations the designer uses for script editors."""
        return await self._send(
            "POST",
            f"/scripting/javascript/type-definitions/{workflow_definition_id}",
            body=request,
            response_type=str,
        )


__all__ = ["JavaScriptApi"]
