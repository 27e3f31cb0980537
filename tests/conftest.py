from __future__ import annotations

from datetime import date

import pytest

from school_attendance.container import wire
from school_attendance.core.enums import Role
from school_attendance.main import create_app
from tests.api_helpers import login
from tests.fakes import PASSWORD, InMemoryLedger, InMemoryStudents, InMemoryTokens, InMemoryUsers


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 9, 15)


@pytest.fixture
def users() -> InMemoryUsers:
    repo = InMemoryUsers()
    repo.add("Admin", "admin@example.com", PASSWORD, Role.ADMIN)
    repo.add("Teacher", "teacher@example.com", PASSWORD, Role.TEACHER)
    return repo


@pytest.fixture
def students() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def tokens() -> InMemoryTokens:
    return InMemoryTokens()


@pytest.fixture
def container(users, students, ledger, tokens):
    return wire(users_repo=users, tokens_repo=tokens, students_repo=students, attendance_ledger=ledger)


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="school_attendance.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(client) -> dict:
    return login(client, "admin@example.com")


@pytest.fixture
def teacher_headers(client) -> dict:
    return login(client, "teacher@example.com")
