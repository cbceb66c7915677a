"""
Project business logic: response shaping and status mapping.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core.errors import operation

from . import repository, schemas

logger = logging.getLogger(__name__)


def to_project(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(row["id"]),
        "name": str(row["name"]),
        "description": str(row["description"] or ""),
    }


async def list_projects() -> dict:
    with operation("Failed to retrieve projects"):
        rows = await repository.list_projects()
    return {
        "message": "Projects retrieved successfully.",
        "data": [to_project(row) for row in rows],
    }


async def get_project(project_id: int) -> dict:
    with operation("Failed to retrieve projects"):
        row = await repository.get_project(project_id)
    return {
        "message": "Projects retrieved successfully.",
        "data": [to_project(row)] if row is not None else [],
    }


async def create_project(payload: schemas.CreateProjectRequest) -> dict:
    with operation("Failed to create project"):
        row = await repository.create_project(name=payload.name, description=payload.description)
    logger.info("project_created id=%s", row["id"])
    return {
        "message": "Project created successfully.",
        "result": {"id": str(row["id"]), "changes": 1},
    }


async def update_project(project_id: int, payload: schemas.UpdateProjectRequest) -> dict:
    changes = payload.changes()
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid fields provided to update.",
        )

    with operation("Failed to update project"):
        row = await repository.update_project(project_id, changes)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project with id:{project_id} not found.",
        )

    logger.info("project_updated id=%s fields=%s", project_id, ",".join(sorted(changes)))
    return {
        "message": f"Project with id:{project_id} updated successfully.",
        "data": to_project(row),
    }


async def delete_project(project_id: int) -> dict:
    with operation("Failed to delete project"):
        changes = await repository.delete_project(project_id)
    logger.info("project_deleted id=%s changes=%s", project_id, changes)
    return {
        "message": f"Project with id:{project_id} deleted successfully and IDs reordered.",
        "result": {"changes": changes},
    }
