from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import day_bounds, now_local
from ..core.enums import PresenceState
from ..core.exceptions import CapacityExceeded, MemberNotFound, StoreError, ValidationError
from ..members.model import Member
from ..members.repository import MemberRepository
from .allocator import SeatAllocator
from .model import AttendanceLogRow, Presence, ToggleResult
from .presence import PresenceResolver
from .repository import AttendanceRepository, TransactionManager

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in/check-out state machine.

    Every toggle flips the member's state for the day (Out -> In -> Out ...),
    seats or unseats General members and appends one log entry. The seat
    change and the log append share one store transaction.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        presence: PresenceResolver,
        allocator: SeatAllocator,
        transactions: TransactionManager,
    ):
        self._attendance = attendance
        self._members = members
        self._presence = presence
        self._allocator = allocator
        self._transactions = transactions

        self._locks_guard = threading.Lock()
        self._member_locks: dict[int, threading.Lock] = {}
        # Serializes the occupancy scan, seat write and log append of every toggle.
        self._seat_lock = threading.Lock()

    def _member_lock(self, member_id: int) -> threading.Lock:
        with self._locks_guard:
            return self._member_locks.setdefault(member_id, threading.Lock())

    def resolve_presence(self, member_id: int, *, now: Optional[datetime] = None) -> Presence:
        return self._presence.resolve(int(member_id), now or now_local())

    def toggle(self, member_id: int, *, event_time: Optional[datetime] = None) -> ToggleResult:
        event_time = event_time or now_local()
        member_id = int(member_id)

        with self._member_lock(member_id):
            member = self._members.get_by_id(member_id)
            if member is None:
                logger.warning("Toggle rejected: unknown member id %s", member_id)
                raise MemberNotFound(member_id)
            if not member.is_active:
                logger.warning("Toggling inactive member %s (%s)", member_id, member.name)

            try:
                with self._seat_lock, self._transactions.transaction():
                    return self._apply_transition(member, event_time)
            except StoreError:
                logger.exception("Store failure while toggling member %s", member_id)
                raise

    def _apply_transition(self, member: Member, event_time: datetime) -> ToggleResult:
        current = self._presence.resolve(member.member_id, event_time)
        new_state = current.state.flipped()
        room_id, seat_no = member.room_id, member.seat_no

        if member.is_general and new_state == PresenceState.IN:
            assignment = self._allocator.assign_seat(member, as_of=event_time)
            if assignment is None:
                logger.warning("No free seat for member %s (%s)", member.member_id, member.name)
                raise CapacityExceeded(member.member_id)
            room_id, seat_no = assignment.room_id, assignment.seat_no
        elif member.is_reserved and new_state == PresenceState.IN:
            holder = self._allocator.seat_holder(member, as_of=event_time)
            if holder is not None:
                logger.warning(
                    "Member %s (%s) refused: seat %s is in use by member %s",
                    member.member_id,
                    member.name,
                    member.seat_no,
                    holder.member_id,
                )
                raise ValidationError(f"Seat {member.seat_no} is in use by {holder.name}")
        elif member.is_general:
            self._allocator.release_seat(member)
            seat_no = None

        self._attendance.insert_log(
            member_id=member.member_id,
            event_time=event_time,
            status=new_state,
            in_time=event_time if new_state == PresenceState.IN else None,
            out_time=event_time if new_state == PresenceState.OUT else None,
        )

        logger.info(
            "Member %s (%s) -> %s room=%s seat=%s",
            member.member_id,
            member.name,
            new_state.value,
            room_id,
            seat_no,
        )
        return ToggleResult(
            member_id=member.member_id,
            member_name=member.name,
            new_state=new_state,
            event_time=event_time,
            room_id=room_id,
            seat_no=seat_no,
        )

    def list_logs(self, *, start: date, end: date) -> list[AttendanceLogRow]:
        """Logs of the inclusive date range, newest first, with member name and seat info."""

        if end < start:
            raise ValidationError("End date cannot be before start date")

        range_start, _ = day_bounds(start)
        _, range_end = day_bounds(end)
        logs = list(self._attendance.list_between(range_start, range_end))
        members = {m.member_id: m for m in self._members.get_many(sorted({log.member_id for log in logs}))}

        rows = []
        for log in reversed(logs):
            member = members.get(log.member_id)
            rows.append(
                AttendanceLogRow(
                    log_id=log.log_id,
                    member_id=log.member_id,
                    member_name=member.name if member else "Unknown",
                    seat_info=member.seat_label() if member else "General",
                    event_time=log.event_time,
                    status=log.status,
                    in_time=log.in_time,
                    out_time=log.out_time,
                )
            )
        return rows

    def count_attendance_days(self, member_id: int) -> int:
        if self._members.get_by_id(int(member_id)) is None:
            raise MemberNotFound(member_id)
        return self._attendance.count_days_with_status(int(member_id), PresenceState.IN)
