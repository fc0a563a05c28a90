"""
FastAPI router for project endpoints.

Mounted under `/api/v1` by `main.py`.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.get("/projects", response_model=schemas.ProjectListResponse)
async def list_projects() -> schemas.ProjectListResponse:
    return service.list_projects()


@router.post(
    "/projects",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.MessageResponse,
)
async def create_project() -> schemas.MessageResponse:
    """
    Create a project (placeholder).

    The request body is never read, so any payload (or none) gets a 201.
    """
    return service.create_project()


@router.get("/projects/{project_id}", response_model=schemas.ProjectMessageResponse)
async def get_project(project_id: str) -> schemas.ProjectMessageResponse:
    return service.get_project(project_id)


@router.put("/projects/{project_id}", response_model=schemas.ProjectMessageResponse)
async def update_project(project_id: str) -> schemas.ProjectMessageResponse:
    return service.update_project(project_id)


@router.delete("/projects/{project_id}", response_model=schemas.ProjectMessageResponse)
async def delete_project(project_id: str) -> schemas.ProjectMessageResponse:
    return service.delete_project(project_id)
