from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from itertools import chain
from typing import Iterable, Optional, Union

from ..core.enums import SeatType
from ..core.exceptions import ValidationError
from ..members.model import Member
from ..members.repository import MemberRepository
from ..rooms.model import Room
from ..rooms.repository import RoomRepository
from .model import SeatAssignment
from .presence import PresenceResolver

logger = logging.getLogger(__name__)


def first_free_seat(room: Room, taken: Iterable[int]) -> Optional[int]:
    """Lowest seat number of ``room`` not in ``taken``."""

    blocked = set(taken)
    return next((seat for seat in room.seat_numbers() if seat not in blocked), None)


class SeatAllocator:
    """Hands out seats to General members while they are inside.

    Reserved members keep the seat fixed at admission and are never modified
    here. Their seats always count as taken, Inactive owners included, so a
    General member is never put on a seat whose owner may walk in later the
    same day.
    """

    def __init__(self, members: MemberRepository, rooms: RoomRepository, presence: PresenceResolver):
        self._members = members
        self._rooms = rooms
        self._presence = presence

    def _taken_seats(self, member_id: int, as_of: Union[date, datetime]) -> dict[int, set[int]]:
        inside = self._presence.inside_ids(as_of)
        inside.discard(member_id)

        occupants = self._members.get_many(sorted(inside))
        reserved = self._members.list_by_seat_type(SeatType.RESERVED)

        taken: dict[int, set[int]] = defaultdict(set)
        for m in chain(occupants, reserved):
            if m.member_id != member_id and m.is_seated:
                taken[m.room_id].add(m.seat_no)
        return taken

    def seat_holder(self, member: Member, *, as_of: Union[date, datetime]) -> Optional[Member]:
        """Another member currently inside on ``member``'s room and seat, if any."""

        if not member.is_seated:
            return None
        inside = self._presence.inside_ids(as_of)
        inside.discard(member.member_id)
        for other in self._members.get_many(sorted(inside)):
            if (other.room_id, other.seat_no) == (member.room_id, member.seat_no):
                return other
        return None

    def find_seat(self, member: Member, *, as_of: Union[date, datetime]) -> Optional[SeatAssignment]:
        """Pick a seat without persisting it: preferred room first, then rooms in stored order."""

        taken = self._taken_seats(member.member_id, as_of)
        rooms = list(self._rooms.list_all())

        preferred = next((r for r in rooms if r.room_id == member.room_id), None)
        ordered = [preferred] if preferred else []
        ordered.extend(r for r in rooms if r is not preferred)

        for room in ordered:
            seat = first_free_seat(room, taken.get(room.room_id, ()))
            if seat is not None:
                return SeatAssignment(room_id=room.room_id, seat_no=seat)
        return None

    def assign_seat(self, member: Member, *, as_of: Union[date, datetime]) -> Optional[SeatAssignment]:
        """Seat a General member who is checking in; ``None`` means the library is full."""

        if not member.is_general:
            raise ValidationError("Only General members are allocated seats dynamically")

        assignment = self.find_seat(member, as_of=as_of)
        if assignment is None:
            return None

        self._members.update_seat(member.member_id, room_id=assignment.room_id, seat_no=assignment.seat_no)
        logger.debug(
            "Member %s seated in room %s seat %s", member.member_id, assignment.room_id, assignment.seat_no
        )
        return assignment

    def release_seat(self, member: Member) -> bool:
        """Clear the seat number of a General member; the room stays as next-visit preference."""

        if not member.is_general or member.seat_no is None:
            return False

        self._members.update_seat(member.member_id, room_id=member.room_id, seat_no=None)
        logger.debug("Member %s released seat %s in room %s", member.member_id, member.seat_no, member.room_id)
        return True
