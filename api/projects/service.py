"""
Projects "service layer".

There is no project store yet: every operation returns a fixed
placeholder payload and never fails. The path id is echoed back as given.
"""

from __future__ import annotations

from . import schemas

LIST_MESSAGE = "Projects endpoint - coming soon"
CREATE_MESSAGE = "Create project endpoint - coming soon"
GET_MESSAGE = "Get project endpoint - coming soon"
UPDATE_MESSAGE = "Update project endpoint - coming soon"
DELETE_MESSAGE = "Delete project endpoint - coming soon"


def list_projects() -> schemas.ProjectListResponse:
    return schemas.ProjectListResponse(projects=[], message=LIST_MESSAGE)


def create_project() -> schemas.MessageResponse:
    return schemas.MessageResponse(message=CREATE_MESSAGE)


def get_project(project_id: str) -> schemas.ProjectMessageResponse:
    return schemas.ProjectMessageResponse(id=project_id, message=GET_MESSAGE)


def update_project(project_id: str) -> schemas.ProjectMessageResponse:
    return schemas.ProjectMessageResponse(id=project_id, message=UPDATE_MESSAGE)


def delete_project(project_id: str) -> schemas.ProjectMessageResponse:
    return schemas.ProjectMessageResponse(id=project_id, message=DELETE_MESSAGE)
