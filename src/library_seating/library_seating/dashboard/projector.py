from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional

from ..core.enums import SeatStatus, ShiftType
from ..members.model import Member
from ..rooms.model import Room


@dataclass(frozen=True)
class SeatView:
    seat_no: int
    status: SeatStatus
    member_id: Optional[int] = None
    member_name: Optional[str] = None
    shift: Optional[ShiftType] = None


def _within(now: time, start: Optional[time], end: Optional[time]) -> bool:
    return start is not None and end is not None and start <= now <= end


def classify_member(member: Member, *, inside: bool, now: datetime) -> SeatStatus:
    """Status of an occupied seat; time checks compare time of day only."""

    clock = now.time()
    if inside:
        if member.end_time is not None and clock > member.end_time:
            return SeatStatus.OVERSTAY
        return SeatStatus.INSIDE
    if member.is_reserved and _within(clock, member.start_time, member.end_time):
        return SeatStatus.ABSENT
    return SeatStatus.AWAY


def project_room(room: Room, members: Iterable[Member], inside_ids: set[int], now: datetime) -> list[SeatView]:
    """Classify every seat of ``room`` as Empty/Inside/Away/Absent/Overstay.

    A General member only holds a seat while inside; a seat number left over
    from a previous day without a check-out is ignored. When two members
    claim the same seat, the one inside wins.
    """

    holders: dict[int, Member] = {}
    for m in members:
        if m.room_id != room.room_id or m.seat_no is None:
            continue
        if m.is_general and m.member_id not in inside_ids:
            continue
        current = holders.get(m.seat_no)
        if current is None or (m.member_id in inside_ids and current.member_id not in inside_ids):
            holders[m.seat_no] = m

    views = []
    for seat_no in room.seat_numbers():
        member = holders.get(seat_no)
        if member is None:
            views.append(SeatView(seat_no=seat_no, status=SeatStatus.EMPTY))
            continue
        views.append(
            SeatView(
                seat_no=seat_no,
                status=classify_member(member, inside=member.member_id in inside_ids, now=now),
                member_id=member.member_id,
                member_name=member.name,
                shift=member.shift,
            )
        )
    return views
