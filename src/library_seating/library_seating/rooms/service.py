from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import DEFAULT_ROOM_CAPACITY, DEFAULT_ROOM_COLS, DEFAULT_ROOM_NAME, DEFAULT_ROOM_ROWS
from ..core.exceptions import NotFoundError, ValidationError
from ..members.repository import MemberRepository
from .model import Room
from .repository import RoomRepository

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(self, rooms: RoomRepository, members: MemberRepository):
        self._rooms = rooms
        self._members = members

    def list_all(self) -> Sequence[Room]:
        return self._rooms.list_all()

    def get(self, room_id: int) -> Room:
        room = self._rooms.get_by_id(int(room_id))
        if room is None:
            raise NotFoundError(f"Room {room_id} not found")
        return room

    def create(self, *, name: str, capacity, rows=None, cols=None) -> int:
        name = require_non_empty(name, "Room name")
        capacity = require_positive_int(capacity, "Capacity")
        cols = require_positive_int(cols, "Columns") if cols else DEFAULT_ROOM_COLS
        rows = require_positive_int(rows, "Rows") if rows else math.ceil(capacity / cols)

        room_id = self._rooms.create(name=name, capacity=capacity, rows=rows, cols=cols)
        logger.info("Created room %s %r (capacity=%s)", room_id, name, capacity)
        return room_id

    def delete(self, room_id: int) -> None:
        room = self.get(room_id)
        if self._members.list_seated_in_room(room.room_id):
            raise ValidationError(f"Room {room.name!r} still has seated members")
        self._rooms.delete_by_id(room.room_id)
        logger.info("Deleted room %s %r", room.room_id, room.name)

    def ensure_default_room(self) -> Optional[int]:
        if self._rooms.list_all():
            return None
        return self._rooms.create(
            name=DEFAULT_ROOM_NAME,
            capacity=DEFAULT_ROOM_CAPACITY,
            rows=DEFAULT_ROOM_ROWS,
            cols=DEFAULT_ROOM_COLS,
        )
