from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from library_seating.core.enums import MemberStatus, SeatType, ShiftType
from library_seating.core.exceptions import MemberNotFound, ValidationError
from library_seating.members.service import MemberForm


def test_admit_general_member(container, store):
    member_id = container.member_service.admit(
        MemberForm(name="  Asha  ", mobile="9876543210", monthly_fee="500"),
        today=date(2026, 2, 1),
    )

    member = store.member(member_id)
    assert member.name == "Asha"
    assert member.seat_type == SeatType.GENERAL
    assert (member.room_id, member.seat_no) == (None, None)
    assert member.status == MemberStatus.ACTIVE
    assert member.monthly_fee == Decimal("500")
    assert member.admission_date == date(2026, 2, 1)


def test_admit_reserved_member_with_shift(container, store):
    hall = store.add_room("Hall", 10)

    member_id = container.member_service.admit(
        MemberForm(
            name="Ravi",
            seat_type="Reserved",
            room_id=hall.room_id,
            seat_no=5,
            shift="Morning",
            start_time="08:00",
            end_time="14:00",
        )
    )

    member = store.member(member_id)
    assert (member.room_id, member.seat_no) == (hall.room_id, 5)
    assert member.shift == ShiftType.MORNING
    assert (member.start_time, member.end_time) == (time(8, 0), time(14, 0))


@pytest.mark.parametrize(
    "form, message",
    [
        (MemberForm(name=" "), "Name is required"),
        (MemberForm(name="A", seat_type="Reserved"), "Please select a Room for reserved seat."),
        (MemberForm(name="A", start_time="8am"), "Shift times must use HH:MM"),
        (MemberForm(name="A", monthly_fee="-1"), "Monthly fee cannot be negative"),
        (MemberForm(name="A", monthly_fee="abc"), "Monthly fee must be a number"),
        (MemberForm(name="A", room_id=99), "Room 99 does not exist"),
    ],
)
def test_admit_rejects_invalid_forms(container, form, message):
    with pytest.raises(ValidationError, match=message):
        container.member_service.admit(form)


def test_reserved_seat_must_fit_and_be_free(container, store):
    hall = store.add_room("Hall", 5)
    store.add_member("Owner", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=2)
    svc = container.member_service

    with pytest.raises(ValidationError, match="outside"):
        svc.admit(MemberForm(name="A", seat_type="Reserved", room_id=hall.room_id, seat_no=6))
    with pytest.raises(ValidationError, match="already reserved"):
        svc.admit(MemberForm(name="A", seat_type="Reserved", room_id=hall.room_id, seat_no=2))


def test_inactive_owner_frees_reserved_seat(container, store):
    hall = store.add_room("Hall", 5)
    store.add_member(
        "Former", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=2, status=MemberStatus.INACTIVE
    )

    member_id = container.member_service.admit(
        MemberForm(name="New", seat_type="Reserved", room_id=hall.room_id, seat_no=2)
    )

    assert store.member(member_id).seat_no == 2


def test_update_keeps_allocator_seat_of_general_member(container, store):
    hall = store.add_room("Hall", 5)
    m = store.add_member("G", room_id=hall.room_id, seat_no=3)

    container.member_service.update(m.member_id, MemberForm(name="G renamed", mobile="123"))

    updated = store.member(m.member_id)
    assert updated.name == "G renamed"
    assert (updated.room_id, updated.seat_no) == (hall.room_id, 3)


def test_update_reserved_member_may_keep_own_seat(container, store):
    hall = store.add_room("Hall", 5)
    m = store.add_member("R", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=4)

    container.member_service.update(
        m.member_id, MemberForm(name="R", seat_type="Reserved", room_id=hall.room_id, seat_no=4)
    )

    assert store.member(m.member_id).seat_no == 4


def test_set_status_and_active_listing(container, store):
    a = store.add_member("A")
    b = store.add_member("B")

    container.member_service.set_status(b.member_id, MemberStatus.INACTIVE)

    assert [m.member_id for m in container.member_service.list_active()] == [a.member_id]


def test_unknown_member_raises(container):
    with pytest.raises(MemberNotFound):
        container.member_service.get(404)


def test_reactivation_refused_when_reserved_seat_was_reassigned(container, store):
    hall = store.add_room("Hall", 5)
    former = store.add_member(
        "Former", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=1, status=MemberStatus.INACTIVE
    )
    container.member_service.admit(MemberForm(name="New", seat_type="Reserved", room_id=hall.room_id, seat_no=1))

    with pytest.raises(ValidationError, match="already reserved by New"):
        container.member_service.set_status(former.member_id, MemberStatus.ACTIVE)

    assert store.member(former.member_id).status == MemberStatus.INACTIVE


def test_reactivation_keeps_free_reserved_seat(container, store):
    hall = store.add_room("Hall", 5)
    former = store.add_member(
        "Former", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=1, status=MemberStatus.INACTIVE
    )

    container.member_service.set_status(former.member_id, MemberStatus.ACTIVE)

    assert store.member(former.member_id).status == MemberStatus.ACTIVE
    assert store.member(former.member_id).seat_no == 1
