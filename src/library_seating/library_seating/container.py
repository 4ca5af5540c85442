from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.allocator import SeatAllocator
from .attendance.debounce import ScanDebouncer
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.presence import PresenceResolver
from .attendance.repository import AttendanceRepository, TransactionManager
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SCAN_COOLDOWN_SECONDS
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .rooms.mysql_room_repository import MySQLRoomRepository
from .rooms.repository import RoomRepository
from .rooms.service import RoomService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    rooms_repo: RoomRepository
    attendance_repo: AttendanceRepository

    presence: PresenceResolver
    allocator: SeatAllocator
    debouncer: ScanDebouncer

    member_service: MemberService
    room_service: RoomService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def assemble(
    *,
    members_repo: MemberRepository,
    rooms_repo: RoomRepository,
    attendance_repo: AttendanceRepository,
    transactions: TransactionManager,
    conn: Optional[DatabaseConnection] = None,
    scan_cooldown_seconds: float = DEFAULT_SCAN_COOLDOWN_SECONDS,
) -> Container:
    presence = PresenceResolver(members_repo, attendance_repo)
    allocator = SeatAllocator(members_repo, rooms_repo, presence)

    return Container(
        conn=conn,
        members_repo=members_repo,
        rooms_repo=rooms_repo,
        attendance_repo=attendance_repo,
        presence=presence,
        allocator=allocator,
        debouncer=ScanDebouncer(scan_cooldown_seconds),
        member_service=MemberService(members_repo, rooms_repo),
        room_service=RoomService(rooms_repo, members_repo),
        attendance_service=AttendanceService(attendance_repo, members_repo, presence, allocator, transactions),
        dashboard_service=DashboardService(rooms_repo, members_repo, presence),
    )


def build_container(*, db_config: dict, scan_cooldown_seconds: float = DEFAULT_SCAN_COOLDOWN_SECONDS) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        members_repo=MySQLMemberRepository(conn),
        rooms_repo=MySQLRoomRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        transactions=conn,
        conn=conn,
        scan_cooldown_seconds=scan_cooldown_seconds,
    )
