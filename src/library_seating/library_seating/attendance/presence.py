from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Union

from ..common.datetime_utils import day_bounds
from ..core.enums import PresenceState
from ..core.exceptions import MemberNotFound
from ..members.repository import MemberRepository
from .model import AttendanceLog, Presence
from .repository import AttendanceRepository

DayLike = Union[date, datetime]


def _as_day(as_of: DayLike) -> date:
    return as_of.date() if isinstance(as_of, datetime) else as_of


def latest_by_member(logs: Iterable[AttendanceLog]) -> dict[int, AttendanceLog]:
    """Most recent log per member; equal timestamps fall back to insertion order."""

    latest: dict[int, AttendanceLog] = {}
    for log in logs:
        current = latest.get(log.member_id)
        if current is None or (log.event_time, log.log_id) >= (current.event_time, current.log_id):
            latest[log.member_id] = log
    return latest


class PresenceResolver:
    """Derives who is inside from the current day's logs.

    Presence is never stored: each day starts "Out" for everyone and the state
    is the status of the member's latest log of that day. Both the transition
    engine and the occupancy dashboard read presence through this class.
    """

    def __init__(self, members: MemberRepository, attendance: AttendanceRepository):
        self._members = members
        self._attendance = attendance

    def resolve(self, member_id: int, as_of: DayLike) -> Presence:
        if self._members.get_by_id(int(member_id)) is None:
            raise MemberNotFound(member_id)

        start, end = day_bounds(_as_day(as_of))
        logs = self._attendance.list_for_member_between(int(member_id), start, end)
        last = latest_by_member(logs).get(int(member_id))
        if last is None:
            return Presence(member_id=int(member_id), state=PresenceState.OUT)
        return Presence(member_id=int(member_id), state=last.status, last_log=last)

    def inside_ids(self, as_of: DayLike) -> set[int]:
        start, end = day_bounds(_as_day(as_of))
        latest = latest_by_member(self._attendance.list_between(start, end))
        return {member_id for member_id, log in latest.items() if log.status == PresenceState.IN}
