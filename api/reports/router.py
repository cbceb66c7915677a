"""
Report CRUD endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from auth import dependencies as auth_dependencies
from core import ids

from . import schemas, service

router = APIRouter()


@router.get("/allreports")
async def list_reports(
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.list_reports()


@router.get("/getreport/{report_id}")
async def get_report(
    report_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.get_report(report_id)


@router.get("/getreportbyp/{project_id}")
async def get_reports_by_project(
    project_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.reports_by_project(project_id)


@router.delete("/deletereport/{report_id}")
async def delete_report(
    report_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.delete_report(report_id)


@router.post("/createreport", status_code=status.HTTP_201_CREATED)
async def create_report(
    request: schemas.CreateReportRequest,
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    """
    Create a report; rejected with 400 when `projectId` names no project.
    """
    return await service.create_report(request)


@router.patch("/updatereport/{report_id}")
async def update_report(
    request: schemas.UpdateReportRequest,
    report_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.update_report(report_id, request)
