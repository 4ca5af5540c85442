from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import MemberStatus, SeatType, ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Member
from .repository import MemberRepository

_COLUMNS = """
    member_id, name, mobile, status, seat_type, room_id, seat_no,
    shift, start_time, end_time, monthly_fee, admission_date
"""


def _to_member(r: dict) -> Member:
    return Member(
        member_id=int(r["member_id"]),
        name=r["name"],
        mobile=r.get("mobile"),
        status=MemberStatus(r["status"]),
        seat_type=SeatType(r["seat_type"]),
        room_id=int(r["room_id"]) if r.get("room_id") is not None else None,
        seat_no=int(r["seat_no"]) if r.get("seat_no") is not None else None,
        shift=ShiftType(r["shift"]),
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
        monthly_fee=Decimal(r.get("monthly_fee") or 0),
        admission_date=r["admission_date"],
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def get_many(self, member_ids: Sequence[int]) -> Sequence[Member]:
        ids = [int(i) for i in member_ids]
        if not ids:
            return []
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE member_id IN ({placeholders}) ORDER BY member_id",
                tuple(ids),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def list_by_status(self, status: MemberStatus) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE status=%s ORDER BY member_id", (status.value,))
            return [_to_member(r) for r in fetchall(cur)]

    def list_by_seat_type(self, seat_type: SeatType) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE seat_type=%s ORDER BY member_id", (seat_type.value,))
            return [_to_member(r) for r in fetchall(cur)]

    def list_seated_in_room(self, room_id: int) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE room_id=%s AND seat_no IS NOT NULL
                ORDER BY seat_no, member_id
                """,
                (int(room_id),),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        mobile: Optional[str],
        seat_type: SeatType,
        room_id: Optional[int],
        seat_no: Optional[int],
        shift: ShiftType,
        start_time: Optional[time],
        end_time: Optional[time],
        monthly_fee: Decimal,
        admission_date: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(
                    name, mobile, status, seat_type, room_id, seat_no,
                    shift, start_time, end_time, monthly_fee, admission_date
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    name,
                    mobile,
                    MemberStatus.ACTIVE.value,
                    seat_type.value,
                    room_id,
                    seat_no,
                    shift.value,
                    start_time,
                    end_time,
                    monthly_fee,
                    admission_date,
                ),
            )
            return int(cur.lastrowid)

    def update_profile(
        self,
        member_id: int,
        *,
        name: str,
        mobile: Optional[str],
        seat_type: SeatType,
        room_id: Optional[int],
        seat_no: Optional[int],
        shift: ShiftType,
        start_time: Optional[time],
        end_time: Optional[time],
        monthly_fee: Decimal,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET name=%s, mobile=%s, seat_type=%s, room_id=%s, seat_no=%s,
                    shift=%s, start_time=%s, end_time=%s, monthly_fee=%s
                WHERE member_id=%s
                """,
                (
                    name,
                    mobile,
                    seat_type.value,
                    room_id,
                    seat_no,
                    shift.value,
                    start_time,
                    end_time,
                    monthly_fee,
                    int(member_id),
                ),
            )
            return cur.rowcount > 0

    def update_seat(self, member_id: int, *, room_id: Optional[int], seat_no: Optional[int]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE members SET room_id=%s, seat_no=%s WHERE member_id=%s",
                (room_id, seat_no, int(member_id)),
            )
            return cur.rowcount > 0

    def set_status(self, member_id: int, status: MemberStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE members SET status=%s WHERE member_id=%s", (status.value, int(member_id)))
            return cur.rowcount > 0
