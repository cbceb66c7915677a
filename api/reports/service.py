"""
Report business logic: project-reference checks, response shaping and status
mapping.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from core.errors import operation
from projects import repository as project_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def to_report(row: dict[str, Any]) -> dict[str, Any]:
    project_id = row.get("project_id")
    return {
        "id": str(row["id"]),
        "text": str(row["text"]),
        "projectId": str(project_id) if project_id is not None else None,
    }


def _project_missing() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Project doesn't exist",
    )


async def list_reports() -> dict:
    with operation("Failed to retrieve reports"):
        rows = await repository.list_reports()
    return {
        "message": "Reports retrieved successfully.",
        "data": [to_report(row) for row in rows],
    }


async def get_report(report_id: int) -> dict:
    with operation("Failed to retrieve reports"):
        row = await repository.get_report(report_id)
    return {
        "message": "Reports retrieved successfully.",
        "data": [to_report(row)] if row is not None else [],
    }


async def reports_by_project(project_id: int) -> dict:
    with operation("Failed to retrieve reports"):
        rows = await repository.list_reports_by_project(project_id)
    return {
        "message": "Reports retrieved successfully.",
        "data": [to_report(row) for row in rows],
    }


async def create_report(payload: schemas.CreateReportRequest) -> dict:
    with operation("Failed to create report"):
        try:
            row = await repository.create_report(text=payload.text, project_id=payload.project_id)
        except asyncpg.ForeignKeyViolationError as exc:
            raise _project_missing() from exc
    if row is None:
        raise _project_missing()

    logger.info("report_created id=%s project_id=%s", row["id"], row["project_id"])
    return {
        "message": "Report created successfully.",
        "result": {"id": str(row["id"]), "changes": 1},
    }


async def update_report(report_id: int, payload: schemas.UpdateReportRequest) -> dict:
    changes = payload.changes()
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid fields provided to update.",
        )

    with operation("Failed to update report"):
        if "project_id" in changes and not await project_repository.project_exists(changes["project_id"]):
            raise _project_missing()
        try:
            row = await repository.update_report(report_id, changes)
        except asyncpg.ForeignKeyViolationError as exc:
            # Project removed between the check and the write.
            raise _project_missing() from exc
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report with id:{report_id} not found.",
        )

    logger.info("report_updated id=%s fields=%s", report_id, ",".join(sorted(changes)))
    return {
        "message": f"Report with id:{report_id} updated successfully.",
        "data": to_report(row),
    }


async def delete_report(report_id: int) -> dict:
    with operation("Failed to delete report"):
        changes = await repository.delete_report(report_id)
    logger.info("report_deleted id=%s changes=%s", report_id, changes)
    return {
        "message": f"Report with id:{report_id} deleted successfully and IDs reordered.",
        "result": {"changes": changes},
    }
