from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import PresenceState
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceLog
from .repository import AttendanceRepository


def _to_log(r: dict) -> AttendanceLog:
    return AttendanceLog(
        log_id=int(r["log_id"]),
        member_id=int(r["member_id"]),
        event_time=r["event_time"],
        status=PresenceState(r["status"]),
        in_time=r.get("in_time"),
        out_time=r.get("out_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, start: datetime, end: datetime) -> Sequence[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, member_id, event_time, status, in_time, out_time
                FROM attendance_logs
                WHERE event_time BETWEEN %s AND %s
                ORDER BY event_time ASC, log_id ASC
                """,
                (start, end),
            )
            return [_to_log(r) for r in fetchall(cur)]

    def list_for_member_between(self, member_id: int, start: datetime, end: datetime) -> Sequence[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, member_id, event_time, status, in_time, out_time
                FROM attendance_logs
                WHERE member_id=%s AND event_time BETWEEN %s AND %s
                ORDER BY event_time ASC, log_id ASC
                """,
                (int(member_id), start, end),
            )
            return [_to_log(r) for r in fetchall(cur)]

    def insert_log(
        self,
        *,
        member_id: int,
        event_time: datetime,
        status: PresenceState,
        in_time: Optional[datetime] = None,
        out_time: Optional[datetime] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(member_id, event_time, status, in_time, out_time)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(member_id), event_time, status.value, in_time, out_time),
            )
            return int(cur.lastrowid)

    def count_days_with_status(self, member_id: int, status: PresenceState) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(DISTINCT DATE(event_time)) AS days
                FROM attendance_logs
                WHERE member_id=%s AND status=%s
                """,
                (int(member_id), status.value),
            )
            r = fetchone(cur)
            return int(r["days"]) if r else 0
