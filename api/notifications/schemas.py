"""
Pydantic schemas for notification endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    teacher: str = Field(..., min_length=1, max_length=255)
    notification: str


class RecipientsResponse(BaseModel):
    recipients: list[str]
