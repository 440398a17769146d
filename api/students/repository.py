"""
Teacher / Student / TeacherStudent persistence (raw SQL).

Every function is its own short unit of work on one pooled connection.
"Ensure" writes are idempotent through the tables' primary keys.
"""

from __future__ import annotations

from core import db


def _dedupe(emails: list[str]) -> list[str]:
    return list(dict.fromkeys(emails))


async def ensure_teacher(email: str) -> None:
    await db.execute(
        """
        INSERT INTO Teacher (email)
        VALUES ($1)
        ON CONFLICT (email) DO NOTHING
        """,
        email,
    )


async def ensure_student(email: str) -> None:
    await db.execute(
        """
        INSERT INTO Student (email, is_suspended)
        VALUES ($1, false)
        ON CONFLICT (email) DO NOTHING
        """,
        email,
    )


async def ensure_registration(teacher_email: str, student_email: str) -> None:
    await db.execute(
        """
        INSERT INTO TeacherStudent (teacher_email, student_email)
        VALUES ($1, $2)
        ON CONFLICT (teacher_email, student_email) DO NOTHING
        """,
        teacher_email,
        student_email,
    )


async def teacher_exists(email: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM Teacher
        WHERE email = $1
        LIMIT 1
        """,
        email,
    )
    return row is not None


async def student_exists(email: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM Student
        WHERE email = $1
        LIMIT 1
        """,
        email,
    )
    return row is not None


async def is_suspended(email: str) -> bool:
    """
    Unknown students are reported as not suspended.
    """
    row = await db.fetch_one(
        """
        SELECT is_suspended
        FROM Student
        WHERE email = $1
        """,
        email,
    )
    if row is None:
        return False
    return bool(row["is_suspended"])


async def set_suspended(email: str, suspended: bool = True) -> bool:
    """
    Returns False when the student does not exist.
    """
    row = await db.fetch_one(
        """
        UPDATE Student
        SET is_suspended = $2
        WHERE email = $1
        RETURNING email
        """,
        email,
        suspended,
    )
    return row is not None


async def students_of_teacher(teacher_email: str) -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT student_email
        FROM TeacherStudent
        WHERE teacher_email = $1
        """,
        teacher_email,
    )
    return [str(row["student_email"]) for row in rows]


async def common_students(teacher_emails: list[str]) -> list[str]:
    """
    Students registered to every one of the given teachers.

    Duplicates are removed before counting, otherwise the HAVING guard could
    never be satisfied.
    """
    teachers = _dedupe(teacher_emails)
    if not teachers:
        return []

    count_param = len(teachers) + 1
    rows = await db.fetch_all(
        f"""
        SELECT ts.student_email AS common_student
        FROM TeacherStudent ts
        JOIN Teacher t ON t.email = ts.teacher_email
        WHERE t.email IN ({db.placeholders(len(teachers))})
        GROUP BY ts.student_email
        HAVING COUNT(DISTINCT ts.teacher_email) = ${count_param}
        """,
        *teachers,
        len(teachers),
    )
    return [str(row["common_student"]) for row in rows]


async def active_students(emails: list[str]) -> list[str]:
    """
    Subset of `emails` that exist as students and are not suspended.
    """
    candidates = _dedupe(emails)
    if not candidates:
        return []

    rows = await db.fetch_all(
        """
        SELECT email
        FROM Student
        WHERE email = ANY($1::varchar[])
          AND is_suspended = false
        """,
        candidates,
    )
    return [str(row["email"]) for row in rows]
