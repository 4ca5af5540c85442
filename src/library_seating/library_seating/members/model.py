from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..core.enums import MemberStatus, SeatType, ShiftType


@dataclass(frozen=True)
class Member:
    """Domain entity: a registered library patron.

    For Reserved members ``room_id``/``seat_no`` are fixed at admission.
    For General members they belong to the seat allocator: ``seat_no`` is set
    only while the member is inside, ``room_id`` is kept between visits as the
    preferred room.
    """

    member_id: int
    name: str
    mobile: Optional[str]
    status: MemberStatus
    seat_type: SeatType
    room_id: Optional[int]
    seat_no: Optional[int]
    shift: ShiftType
    start_time: Optional[time]
    end_time: Optional[time]
    monthly_fee: Decimal
    admission_date: date

    @property
    def is_reserved(self) -> bool:
        return self.seat_type == SeatType.RESERVED

    @property
    def is_general(self) -> bool:
        return self.seat_type == SeatType.GENERAL

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    @property
    def is_seated(self) -> bool:
        return self.room_id is not None and self.seat_no is not None

    def seat_label(self) -> str:
        return f"Seat {self.seat_no}" if self.is_reserved else "General"
