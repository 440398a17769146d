"""
Shared fixtures.

`FakeStore` stands in for PostgreSQL behind the `core.db` helpers: it
interprets the statements issued by the repositories against in-memory
tables, so requests run end-to-end without a database.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


class FakeStore:
    def __init__(self) -> None:
        self.teachers: dict[str, None] = {}
        self.students: dict[str, bool] = {}
        self.registrations: dict[tuple[str, str], None] = {}
        self.ddl: list[str] = []
        self.statements: list[tuple[str, tuple]] = []
        self.fail_with: Exception | None = None

    def _record(self, sql: str, args: tuple) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        statement = " ".join(sql.split())
        self.statements.append((statement, args))
        return statement

    async def execute(self, sql: str, *args) -> None:
        statement = self._record(sql, args)
        if statement.startswith("CREATE TABLE"):
            self.ddl.append(statement)
        elif statement.startswith("INSERT INTO TeacherStudent"):
            teacher, student = args
            assert teacher in self.teachers, "foreign key violation on teacher_email"
            assert student in self.students, "foreign key violation on student_email"
            self.registrations.setdefault((teacher, student), None)
        elif statement.startswith("INSERT INTO Teacher"):
            self.teachers.setdefault(args[0], None)
        elif statement.startswith("INSERT INTO Student"):
            self.students.setdefault(args[0], False)
        else:
            raise AssertionError(f"unexpected statement: {statement}")

    async def fetch_one(self, sql: str, *args) -> dict | None:
        statement = self._record(sql, args)
        if statement.startswith("UPDATE Student"):
            email, suspended = args
            if email not in self.students:
                return None
            self.students[email] = suspended
            return {"email": email}
        if statement.startswith("SELECT is_suspended FROM Student"):
            if args[0] not in self.students:
                return None
            return {"is_suspended": self.students[args[0]]}
        if statement.startswith("SELECT 1 AS ok FROM Teacher WHERE"):
            return {"ok": 1} if args[0] in self.teachers else None
        if statement.startswith("SELECT 1 AS ok FROM Student WHERE"):
            return {"ok": 1} if args[0] in self.students else None
        raise AssertionError(f"unexpected statement: {statement}")

    async def fetch_all(self, sql: str, *args) -> list[dict]:
        statement = self._record(sql, args)
        if "GROUP BY" in statement:
            *teachers, expected_count = args
            seen: dict[str, set[str]] = {}
            for teacher, student in self.registrations:
                if teacher in teachers and teacher in self.teachers:
                    seen.setdefault(student, set()).add(teacher)
            return [
                {"common_student": student}
                for student, by_teachers in seen.items()
                if len(by_teachers) == expected_count
            ]
        if statement.startswith("SELECT student_email FROM TeacherStudent"):
            return [{"student_email": student} for (teacher, student) in self.registrations if teacher == args[0]]
        if "= ANY($1::varchar[])" in statement:
            return [
                {"email": email}
                for email in args[0]
                if email in self.students and not self.students[email]
            ]
        raise AssertionError(f"unexpected statement: {statement}")


async def _noop() -> None:
    return None


@pytest.fixture
def fake_store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    store = FakeStore()
    monkeypatch.setattr(db, "execute", store.execute)
    monkeypatch.setattr(db, "fetch_one", store.fetch_one)
    monkeypatch.setattr(db, "fetch_all", store.fetch_all)
    monkeypatch.setattr(db, "init_pool", _noop)
    monkeypatch.setattr(db, "close_pool", _noop)
    return store


@pytest.fixture
def client(fake_store: FakeStore):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
