from __future__ import annotations

from datetime import time

import pytest

from library_seating.core.enums import PresenceState, SeatStatus, SeatType
from library_seating.core.exceptions import NotFoundError


def test_seat_status_reflects_toggles(container, store, fixed_now):
    hall = store.add_room("Hall", 3)
    r = store.add_member(
        "R", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=3, start=time(8, 0), end=time(14, 0)
    )
    g = store.add_member("G")

    container.attendance_service.toggle(g.member_id, event_time=fixed_now)
    seats = container.dashboard_service.get_seat_status(hall.room_id, now=fixed_now)

    assert [s.status for s in seats] == [SeatStatus.INSIDE, SeatStatus.EMPTY, SeatStatus.ABSENT]

    container.attendance_service.toggle(r.member_id, event_time=fixed_now.replace(hour=11))
    later = fixed_now.replace(hour=15)
    seats = container.dashboard_service.get_seat_status(hall.room_id, now=later)

    assert seats[2].status == SeatStatus.OVERSTAY


def test_room_summary_counts(container, store, fixed_now):
    hall = store.add_room("Hall", 4)
    store.add_member("R1", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=4)
    r2 = store.add_member("R2", seat_type=SeatType.RESERVED, room_id=hall.room_id, seat_no=3)
    g = store.add_member("G")
    store.add_log(r2.member_id, fixed_now.replace(hour=8), PresenceState.IN)
    container.attendance_service.toggle(g.member_id, event_time=fixed_now)

    summary = container.dashboard_service.room_summary(hall.room_id, now=fixed_now)

    assert (summary.capacity, summary.assigned, summary.inside, summary.away) == (4, 3, 2, 1)
    assert summary.by_status["EMPTY"] == 1
    assert summary.by_status["AWAY"] == 1


def test_unknown_room_raises(container, fixed_now):
    with pytest.raises(NotFoundError):
        container.dashboard_service.get_seat_status(99, now=fixed_now)
