from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

import pytest

from library_seating.attendance.model import AttendanceLog
from library_seating.container import assemble
from library_seating.core.enums import MemberStatus, PresenceState, SeatType, ShiftType
from library_seating.members.model import Member
from library_seating.rooms.model import Room


class InMemoryStore:
    """Shared state behind the in-memory repositories.

    ``transaction()`` restores a snapshot when the block raises, like a
    database rollback.
    """

    def __init__(self):
        self.members: dict[int, Member] = {}
        self.rooms: dict[int, Room] = {}
        self.logs: list[AttendanceLog] = []
        self.next_ids = {"member": 0, "room": 0, "log": 0}
        self.fail_next_log_insert: Optional[Exception] = None
        self.commits = 0

    def next_id(self, kind: str) -> int:
        self.next_ids[kind] += 1
        return self.next_ids[kind]

    @contextmanager
    def transaction(self):
        snapshot = (dict(self.members), dict(self.rooms), list(self.logs), dict(self.next_ids))
        try:
            yield
        except BaseException:
            self.members, self.rooms, self.logs, self.next_ids = snapshot
            raise
        self.commits += 1

    def add_room(self, name: str = "Hall", capacity: int = 2, *, rows: int = 1, cols: int = 5) -> Room:
        room = Room(room_id=self.next_id("room"), name=name, capacity=capacity, rows=rows, cols=cols)
        self.rooms[room.room_id] = room
        return room

    def add_member(
        self,
        name: str,
        *,
        seat_type: SeatType = SeatType.GENERAL,
        room_id: Optional[int] = None,
        seat_no: Optional[int] = None,
        start: Optional[time] = None,
        end: Optional[time] = None,
        status: MemberStatus = MemberStatus.ACTIVE,
        shift: ShiftType = ShiftType.FULL_DAY,
    ) -> Member:
        member = Member(
            member_id=self.next_id("member"),
            name=name,
            mobile=None,
            status=status,
            seat_type=seat_type,
            room_id=room_id,
            seat_no=seat_no,
            shift=shift,
            start_time=start,
            end_time=end,
            monthly_fee=Decimal("0"),
            admission_date=date(2026, 1, 1),
        )
        self.members[member.member_id] = member
        return member

    def add_log(self, member_id: int, when: datetime, status: PresenceState) -> AttendanceLog:
        log = AttendanceLog(
            log_id=self.next_id("log"),
            member_id=member_id,
            event_time=when,
            status=status,
            in_time=when if status == PresenceState.IN else None,
            out_time=when if status == PresenceState.OUT else None,
        )
        self.logs.append(log)
        return log

    def member(self, member_id: int) -> Member:
        return self.members[member_id]


class InMemoryMembers:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, member_id):
        return self._store.members.get(int(member_id))

    def get_many(self, member_ids):
        return [self._store.members[i] for i in sorted(set(member_ids)) if i in self._store.members]

    def list_by_status(self, status):
        return [m for m in self._store.members.values() if m.status == status]

    def list_by_seat_type(self, seat_type):
        return [m for m in self._store.members.values() if m.seat_type == seat_type]

    def list_seated_in_room(self, room_id):
        return [m for m in self._store.members.values() if m.room_id == room_id and m.seat_no is not None]

    def create(self, *, name, mobile, seat_type, room_id, seat_no, shift, start_time, end_time, monthly_fee, admission_date):
        member = Member(
            member_id=self._store.next_id("member"),
            name=name,
            mobile=mobile,
            status=MemberStatus.ACTIVE,
            seat_type=seat_type,
            room_id=room_id,
            seat_no=seat_no,
            shift=shift,
            start_time=start_time,
            end_time=end_time,
            monthly_fee=monthly_fee,
            admission_date=admission_date,
        )
        self._store.members[member.member_id] = member
        return member.member_id

    def update_profile(self, member_id, **fields):
        member = self._store.members.get(int(member_id))
        if member is None:
            return False
        self._store.members[member.member_id] = dataclasses.replace(member, **fields)
        return True

    def update_seat(self, member_id, *, room_id, seat_no):
        return self.update_profile(member_id, room_id=room_id, seat_no=seat_no)

    def set_status(self, member_id, status):
        return self.update_profile(member_id, status=status)


class InMemoryRooms:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self):
        return [self._store.rooms[k] for k in sorted(self._store.rooms)]

    def get_by_id(self, room_id):
        return self._store.rooms.get(int(room_id))

    def create(self, *, name, capacity, rows, cols):
        return self._store.add_room(name, capacity, rows=rows, cols=cols).room_id

    def delete_by_id(self, room_id):
        return self._store.rooms.pop(int(room_id), None) is not None


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_between(self, start, end):
        return sorted(
            (log for log in self._store.logs if start <= log.event_time <= end),
            key=lambda log: (log.event_time, log.log_id),
        )

    def list_for_member_between(self, member_id, start, end):
        return [log for log in self.list_between(start, end) if log.member_id == member_id]

    def insert_log(self, *, member_id, event_time, status, in_time=None, out_time=None):
        if self._store.fail_next_log_insert is not None:
            exc, self._store.fail_next_log_insert = self._store.fail_next_log_insert, None
            raise exc
        log = AttendanceLog(
            log_id=self._store.next_id("log"),
            member_id=member_id,
            event_time=event_time,
            status=status,
            in_time=in_time,
            out_time=out_time,
        )
        self._store.logs.append(log)
        return log.log_id

    def count_days_with_status(self, member_id, status):
        return len({log.event_time.date() for log in self._store.logs if log.member_id == member_id and log.status == status})


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 0, 0)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def make_container(store):
    def _make(scan_cooldown_seconds: float = 0.0):
        return assemble(
            members_repo=InMemoryMembers(store),
            rooms_repo=InMemoryRooms(store),
            attendance_repo=InMemoryAttendance(store),
            transactions=store,
            scan_cooldown_seconds=scan_cooldown_seconds,
        )

    return _make


@pytest.fixture
def container(make_container):
    return make_container()
