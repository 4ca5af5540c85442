from __future__ import annotations

from datetime import datetime, time

from library_seating.core.enums import PresenceState, SeatStatus, SeatType
from library_seating.dashboard.projector import classify_member, project_room


def _reserved(store, room, seat_no=1, start=time(8, 0), end=time(14, 0)):
    return store.add_member("R", seat_type=SeatType.RESERVED, room_id=room.room_id, seat_no=seat_no, start=start, end=end)


def test_inside_after_shift_end_is_overstay(store):
    room = store.add_room("Hall", 1)
    member = _reserved(store, room)

    assert classify_member(member, inside=True, now=datetime(2026, 2, 2, 15, 0)) == SeatStatus.OVERSTAY
    assert classify_member(member, inside=True, now=datetime(2026, 2, 2, 14, 0)) == SeatStatus.INSIDE


def test_reserved_out_during_shift_is_absent_otherwise_away(store):
    room = store.add_room("Hall", 1)
    member = _reserved(store, room)

    assert classify_member(member, inside=False, now=datetime(2026, 2, 2, 10, 0)) == SeatStatus.ABSENT
    assert classify_member(member, inside=False, now=datetime(2026, 2, 2, 20, 0)) == SeatStatus.AWAY


def test_member_without_shift_times_is_never_overstay_or_absent(store):
    room = store.add_room("Hall", 1)
    member = _reserved(store, room, start=None, end=None)

    assert classify_member(member, inside=True, now=datetime(2026, 2, 2, 23, 0)) == SeatStatus.INSIDE
    assert classify_member(member, inside=False, now=datetime(2026, 2, 2, 10, 0)) == SeatStatus.AWAY


def test_project_room_covers_every_seat(store, fixed_now):
    room = store.add_room("Hall", 4)
    reserved = _reserved(store, room, seat_no=2)
    general = store.add_member("G", room_id=room.room_id, seat_no=3)

    views = project_room(room, store.members.values(), {general.member_id}, fixed_now)

    assert [v.seat_no for v in views] == [1, 2, 3, 4]
    assert [v.status for v in views] == [SeatStatus.EMPTY, SeatStatus.ABSENT, SeatStatus.INSIDE, SeatStatus.EMPTY]
    assert views[1].member_id == reserved.member_id
    assert views[2].member_name == "G"


def test_stale_general_seat_is_shown_empty(store, fixed_now):
    room = store.add_room("Hall", 2)
    store.add_member("Ghost", room_id=room.room_id, seat_no=1)

    views = project_room(room, store.members.values(), set(), fixed_now)

    assert views[0].status == SeatStatus.EMPTY


def test_members_of_other_rooms_are_ignored(store, fixed_now):
    hall = store.add_room("Hall", 1)
    balcony = store.add_room("Balcony", 1)
    _reserved(store, balcony)

    views = project_room(hall, store.members.values(), set(), fixed_now)

    assert views[0].status == SeatStatus.EMPTY


def test_seat_claimed_twice_shows_member_inside(store, fixed_now):
    room = store.add_room("Hall", 1)
    _reserved(store, room, seat_no=1)
    general = store.add_member("G", room_id=room.room_id, seat_no=1)
    store.add_log(general.member_id, fixed_now, PresenceState.IN)

    views = project_room(room, store.members.values(), {general.member_id}, fixed_now)

    assert views[0].member_id == general.member_id
    assert views[0].status == SeatStatus.INSIDE
