from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Room
from .repository import RoomRepository


def _to_room(r: dict) -> Room:
    return Room(
        room_id=int(r["room_id"]),
        name=r["name"],
        capacity=int(r["capacity"]),
        rows=int(r.get("rows") or 1),
        cols=int(r.get("cols") or 1),
    )


class MySQLRoomRepository(RoomRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Room]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT room_id, name, capacity, `rows`, cols
                FROM rooms
                ORDER BY room_id
                """
            )
            return [_to_room(r) for r in fetchall(cur)]

    def get_by_id(self, room_id: int) -> Optional[Room]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT room_id, name, capacity, `rows`, cols
                FROM rooms
                WHERE room_id=%s
                """,
                (int(room_id),),
            )
            r = fetchone(cur)
            return _to_room(r) if r else None

    def create(self, *, name: str, capacity: int, rows: int, cols: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO rooms(name, capacity, `rows`, cols) VALUES(%s,%s,%s,%s)",
                (name, int(capacity), int(rows), int(cols)),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, room_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM rooms WHERE room_id=%s", (int(room_id),))
            return cur.rowcount > 0
