"""
Registration API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/register", status_code=status.HTTP_204_NO_CONTENT)
async def register(request: schemas.RegisterRequest) -> Response:
    await service.register(request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/commonstudents")
async def common_students(
    teacher: list[str] = Query(default=[]),
) -> schemas.CommonStudentsResponse:
    students = await service.common_students(teacher)
    return schemas.CommonStudentsResponse(students=students)


@router.post("/suspend", status_code=status.HTTP_204_NO_CONTENT)
async def suspend(request: schemas.SuspendRequest) -> Response:
    await service.suspend(request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
