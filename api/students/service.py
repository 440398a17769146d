"""
Registration business logic.

Scope:
- register students to a teacher (creating either side on first mention)
- students common to a set of teachers
- suspend a student
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


async def register(payload: schemas.RegisterRequest) -> None:
    teacher = payload.teacher
    students = list(dict.fromkeys(payload.students))

    # Rows are written one by one; re-issuing the request completes a partial run.
    await repository.ensure_teacher(teacher)
    for student in students:
        await repository.ensure_student(student)
    for student in students:
        await repository.ensure_registration(teacher, student)

    logger.info("registration_complete teacher=%s students=%s", teacher, len(students))


async def common_students(teacher_emails: list[str]) -> list[str]:
    teachers = list(dict.fromkeys(email for email in teacher_emails if email.strip()))
    if not teachers:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="no teacher emails provided",
        )
    return await repository.common_students(teachers)


async def suspend(payload: schemas.SuspendRequest) -> None:
    updated = await repository.set_suspended(payload.student, True)
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="student does not exist",
        )
    logger.info("student_suspended student=%s", payload.student)
