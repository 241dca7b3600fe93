from __future__ import annotations

from dataclasses import dataclass

from .access.service import AccessControlService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .database.connection import DatabaseConnection, DBConfig
from .marks.mysql_mark_repository import MySQLMarkRepository
from .marks.repository import MarkRepository
from .marks.service import MarkService
from .metrics.service import StudentReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    classes_repo: ClassRepository
    subjects_repo: SubjectRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    marks_repo: MarkRepository

    access_control: AccessControlService
    auth_service: AuthService
    user_service: UserService
    class_service: ClassService
    subject_service: SubjectService
    student_service: StudentService
    attendance_service: AttendanceService
    mark_service: MarkService
    student_report_service: StudentReportService


def wire_services(
    *,
    users_repo: UserRepository,
    classes_repo: ClassRepository,
    subjects_repo: SubjectRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    marks_repo: MarkRepository,
) -> Container:
    access_control = AccessControlService(classes_repo, students_repo)
    user_service = UserService(users_repo)

    return Container(
        users_repo=users_repo,
        classes_repo=classes_repo,
        subjects_repo=subjects_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        marks_repo=marks_repo,
        access_control=access_control,
        auth_service=AuthService(users_repo, students_repo),
        user_service=user_service,
        class_service=ClassService(classes_repo, users_repo, user_service),
        subject_service=SubjectService(subjects_repo),
        student_service=StudentService(students_repo, access_control),
        attendance_service=AttendanceService(attendance_repo, students_repo, access_control),
        mark_service=MarkService(marks_repo, subjects_repo, access_control),
        student_report_service=StudentReportService(attendance_repo, marks_repo, access_control),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        subjects_repo=MySQLSubjectRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        marks_repo=MySQLMarkRepository(conn),
    )
