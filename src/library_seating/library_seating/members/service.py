from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_empty, require_positive_int
from ..core.enums import MemberStatus, SeatType, ShiftType
from ..core.exceptions import MemberNotFound, ValidationError
from ..rooms.repository import RoomRepository
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberForm:
    """Admission/edit input as it arrives from the form or JSON body."""

    name: str
    mobile: str = ""
    seat_type: str = SeatType.GENERAL.value
    room_id: Optional[int] = None
    seat_no: Optional[int] = None
    shift: str = ShiftType.FULL_DAY.value
    start_time: str = ""
    end_time: str = ""
    monthly_fee: str = "0"


@dataclass(frozen=True)
class _CleanForm:
    name: str
    mobile: Optional[str]
    seat_type: SeatType
    room_id: Optional[int]
    seat_no: Optional[int]
    shift: ShiftType
    start_time: Optional[time]
    end_time: Optional[time]
    monthly_fee: Decimal


class MemberService:
    def __init__(self, members: MemberRepository, rooms: RoomRepository):
        self._members = members
        self._rooms = rooms

    def get(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if member is None:
            raise MemberNotFound(member_id)
        return member

    def list_active(self) -> Sequence[Member]:
        return self._members.list_by_status(MemberStatus.ACTIVE)

    def admit(self, form: MemberForm, *, today: Optional[date] = None) -> int:
        clean = self._clean(form, member_id=None)
        member_id = self._members.create(
            name=clean.name,
            mobile=clean.mobile,
            seat_type=clean.seat_type,
            room_id=clean.room_id,
            seat_no=clean.seat_no,
            shift=clean.shift,
            start_time=clean.start_time,
            end_time=clean.end_time,
            monthly_fee=clean.monthly_fee,
            admission_date=today or date.today(),
        )
        logger.info("Admitted member %s %r (%s)", member_id, clean.name, clean.seat_type.value)
        return member_id

    def update(self, member_id: int, form: MemberForm) -> None:
        existing = self.get(member_id)
        clean = self._clean(form, member_id=existing.member_id)

        room_id, seat_no = clean.room_id, clean.seat_no
        if clean.seat_type == SeatType.GENERAL and existing.is_general:
            # The allocator owns the live seat of a General member.
            room_id, seat_no = existing.room_id, existing.seat_no

        self._members.update_profile(
            existing.member_id,
            name=clean.name,
            mobile=clean.mobile,
            seat_type=clean.seat_type,
            room_id=room_id,
            seat_no=seat_no,
            shift=clean.shift,
            start_time=clean.start_time,
            end_time=clean.end_time,
            monthly_fee=clean.monthly_fee,
        )

    def set_status(self, member_id: int, status: MemberStatus) -> None:
        member = self.get(member_id)
        if status == MemberStatus.ACTIVE and not member.is_active and member.is_reserved and member.is_seated:
            # The seat may have been given to someone else while inactive.
            self._check_reserved_seat(member.room_id, member.seat_no, member_id=member.member_id)
        self._members.set_status(member.member_id, status)
        logger.info("Member %s status -> %s", member.member_id, status.value)

    def _clean(self, form: MemberForm, *, member_id: Optional[int]) -> _CleanForm:
        name = require_non_empty(form.name, "Name")

        try:
            seat_type = SeatType(form.seat_type)
            shift = ShiftType(form.shift)
        except ValueError as exc:
            raise ValidationError(str(exc))

        try:
            start_time = parse_hhmm(form.start_time)
            end_time = parse_hhmm(form.end_time)
        except ValueError:
            raise ValidationError("Shift times must use HH:MM")

        try:
            monthly_fee = Decimal(str(form.monthly_fee or "0"))
        except InvalidOperation:
            raise ValidationError("Monthly fee must be a number")
        if monthly_fee < 0:
            raise ValidationError("Monthly fee cannot be negative")

        room_id = None
        if form.room_id not in (None, ""):
            room_id = require_positive_int(form.room_id, "Room")
        if room_id is not None and self._rooms.get_by_id(room_id) is None:
            raise ValidationError(f"Room {room_id} does not exist")

        seat_no = None
        if seat_type == SeatType.RESERVED:
            if room_id is None:
                raise ValidationError("Please select a Room for reserved seat.")
            seat_no = self._check_reserved_seat(room_id, form.seat_no, member_id=member_id)

        return _CleanForm(
            name=name,
            mobile=(form.mobile or "").strip() or None,
            seat_type=seat_type,
            room_id=room_id,
            seat_no=seat_no,
            shift=shift,
            start_time=start_time,
            end_time=end_time,
            monthly_fee=monthly_fee,
        )

    def _check_reserved_seat(self, room_id: int, seat_no, *, member_id: Optional[int]) -> int:
        seat_no = require_positive_int(seat_no, "Seat number")
        room = self._rooms.get_by_id(room_id)
        if seat_no > room.capacity:
            raise ValidationError(f"Seat {seat_no} is outside {room.name!r} (capacity {room.capacity})")

        for other in self._members.list_seated_in_room(room_id):
            if other.member_id == member_id or other.seat_no != seat_no:
                continue
            if other.is_reserved and other.is_active:
                raise ValidationError(f"Seat {seat_no} in {room.name!r} is already reserved by {other.name}")
            if other.is_general:
                raise ValidationError(f"Seat {seat_no} in {room.name!r} is currently occupied by {other.name}")
        return seat_no
