"""
Pydantic schemas for project endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CreateProjectRequest(BaseModel):
    name: str = Field(..., max_length=500)
    description: str = Field(default="", max_length=10_000)


class UpdateProjectRequest(BaseModel):
    name: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=10_000)

    def changes(self) -> dict[str, Any]:
        """
        Column -> value for every field that was supplied and is non-empty.
        """
        return {
            column: value
            for column, value in (("name", self.name), ("description", self.description))
            if value
        }
