"""
Pydantic schemas for report endpoints.

The wire name of the project reference is `projectId`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core import ids


class CreateReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., max_length=100_000)
    project_id: int = Field(..., alias="projectId", ge=ids.MIN_ID, le=ids.MAX_ID)


class UpdateReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, max_length=100_000)
    project_id: int | None = Field(default=None, alias="projectId", ge=ids.MIN_ID, le=ids.MAX_ID)

    def changes(self) -> dict[str, Any]:
        """
        Column -> value for every supplied field (empty text counts as absent).
        """
        changes: dict[str, Any] = {}
        if self.text:
            changes["text"] = self.text
        if self.project_id is not None:
            changes["project_id"] = self.project_id
        return changes
