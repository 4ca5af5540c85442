from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.presence import PresenceResolver
from ..common.datetime_utils import now_local
from ..core.enums import SeatStatus
from ..core.exceptions import NotFoundError
from ..members.repository import MemberRepository
from ..rooms.model import Room
from ..rooms.repository import RoomRepository
from .projector import SeatView, project_room


@dataclass(frozen=True)
class RoomSummary:
    room_id: int
    name: str
    capacity: int
    assigned: int
    inside: int
    away: int
    by_status: dict


class DashboardService:
    """Read-only occupancy views; safe to poll from a refresh timer."""

    def __init__(self, rooms: RoomRepository, members: MemberRepository, presence: PresenceResolver):
        self._rooms = rooms
        self._members = members
        self._presence = presence

    def _room_or_raise(self, room_id: int) -> Room:
        room = self._rooms.get_by_id(int(room_id))
        if room is None:
            raise NotFoundError(f"Room {room_id} not found")
        return room

    def get_seat_status(self, room_id: int, *, now: Optional[datetime] = None) -> list[SeatView]:
        now = now or now_local()
        room = self._room_or_raise(room_id)
        members = self._members.list_seated_in_room(room.room_id)
        return project_room(room, members, self._presence.inside_ids(now), now)

    def room_summary(self, room_id: int, *, now: Optional[datetime] = None) -> RoomSummary:
        now = now or now_local()
        room = self._room_or_raise(room_id)
        seats = self.get_seat_status(room.room_id, now=now)

        counts = Counter(s.status for s in seats)
        inside = counts[SeatStatus.INSIDE] + counts[SeatStatus.OVERSTAY]
        assigned = len(seats) - counts[SeatStatus.EMPTY]
        return RoomSummary(
            room_id=room.room_id,
            name=room.name,
            capacity=room.capacity,
            assigned=assigned,
            inside=inside,
            away=assigned - inside,
            by_status={status.value: counts[status] for status in SeatStatus},
        )
