from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.ledger import AttendanceLedger
from .attendance.mysql_attendance_ledger import MySQLAttendanceLedger
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_token_repository import MySQLTokenRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import TokenRepository, UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    tokens_repo: TokenRepository
    students_repo: StudentRepository
    attendance_ledger: AttendanceLedger

    auth_service: AuthService
    user_service: UserService
    student_service: StudentService
    attendance_service: AttendanceService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    users_repo: UserRepository,
    tokens_repo: TokenRepository,
    students_repo: StudentRepository,
    attendance_ledger: AttendanceLedger,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of any set of repositories."""

    return Container(
        users_repo=users_repo,
        tokens_repo=tokens_repo,
        students_repo=students_repo,
        attendance_ledger=attendance_ledger,
        auth_service=AuthService(users_repo, tokens_repo),
        user_service=UserService(users_repo),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_ledger, students_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        users_repo=MySQLUserRepository(conn),
        tokens_repo=MySQLTokenRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_ledger=MySQLAttendanceLedger(conn),
        conn=conn,
    )
