"""
Project CRUD endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from auth import dependencies as auth_dependencies
from core import ids

from . import schemas, service

router = APIRouter()


@router.get("/allprojects")
async def list_projects(
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.list_projects()


@router.get("/getproject/{project_id}")
async def get_project(
    project_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    """
    One-element `data` list, or an empty list when the project is absent.
    """
    return await service.get_project(project_id)


@router.delete("/deleteproject/{project_id}")
async def delete_project(
    project_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.delete_project(project_id)


@router.post("/createproject", status_code=status.HTTP_201_CREATED)
async def create_project(
    request: schemas.CreateProjectRequest,
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.create_project(request)


@router.patch("/updateproject/{project_id}")
async def update_project(
    request: schemas.UpdateProjectRequest,
    project_id: int = Path(..., ge=ids.MIN_ID, le=ids.MAX_ID),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    return await service.update_project(project_id, request)
