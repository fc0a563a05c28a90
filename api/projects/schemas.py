"""
Pydantic schemas for project endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProjectListResponse(BaseModel):
    projects: list[Any] = Field(default_factory=list)
    message: str


class MessageResponse(BaseModel):
    message: str


class ProjectMessageResponse(BaseModel):
    id: str
    message: str
