"""
Schema bootstrap.

The service creates its own tables on startup so it can run against an empty
database. Statements are ordered so foreign keys resolve.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

TEACHER_TABLE = """
CREATE TABLE IF NOT EXISTS Teacher (
  email VARCHAR(255) PRIMARY KEY,
  created_at TIMESTAMP NOT NULL DEFAULT (now() AT TIME ZONE 'utc')
)
"""

STUDENT_TABLE = """
CREATE TABLE IF NOT EXISTS Student (
  email VARCHAR(255) PRIMARY KEY,
  is_suspended BOOLEAN NOT NULL DEFAULT false,
  created_at TIMESTAMP NOT NULL DEFAULT (now() AT TIME ZONE 'utc')
)
"""

TEACHER_STUDENT_TABLE = """
CREATE TABLE IF NOT EXISTS TeacherStudent (
  teacher_email VARCHAR(255) NOT NULL REFERENCES Teacher (email),
  student_email VARCHAR(255) NOT NULL REFERENCES Student (email),
  created_at TIMESTAMP NOT NULL DEFAULT (now() AT TIME ZONE 'utc'),
  PRIMARY KEY (teacher_email, student_email)
)
"""

TABLE_STATEMENTS = (TEACHER_TABLE, STUDENT_TABLE, TEACHER_STUDENT_TABLE)


async def ensure_schema() -> None:
    for statement in TABLE_STATEMENTS:
        await db.execute(statement)
    logger.info("schema_ready tables=%s", len(TABLE_STATEMENTS))
