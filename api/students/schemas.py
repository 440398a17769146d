"""
Pydantic schemas for registration endpoints.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

# Matches the VARCHAR(255) key columns.
Email = Annotated[str, Field(min_length=1, max_length=255)]


class RegisterRequest(BaseModel):
    teacher: Email
    students: list[Email] = Field(..., min_length=1)


class SuspendRequest(BaseModel):
    student: Email


class CommonStudentsResponse(BaseModel):
    students: list[str]
