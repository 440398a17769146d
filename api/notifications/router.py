"""
Notification API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/retrievefornotifications")
async def retrieve_for_notifications(request: schemas.NotificationRequest) -> schemas.RecipientsResponse:
    recipients = await service.retrieve_for_notifications(request)
    return schemas.RecipientsResponse(recipients=recipients)
