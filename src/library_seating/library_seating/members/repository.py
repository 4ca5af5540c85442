from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import MemberStatus, SeatType, ShiftType
from .model import Member


class MemberRepository(Protocol):
    """Repository interface for Member.

    Note: services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def get_many(self, member_ids: Sequence[int]) -> Sequence[Member]:
        raise NotImplementedError

    def list_by_status(self, status: MemberStatus) -> Sequence[Member]:
        raise NotImplementedError

    def list_by_seat_type(self, seat_type: SeatType) -> Sequence[Member]:
        """All members of ``seat_type`` whatever their status."""

        raise NotImplementedError

    def list_seated_in_room(self, room_id: int) -> Sequence[Member]:
        """Members of ``room_id`` whose seat number is set."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        mobile: Optional[str],
        seat_type: SeatType,
        room_id: Optional[int],
        seat_no: Optional[int],
        shift: ShiftType,
        start_time: Optional[time],
        end_time: Optional[time],
        monthly_fee: Decimal,
        admission_date: date,
    ) -> int:
        raise NotImplementedError

    def update_profile(
        self,
        member_id: int,
        *,
        name: str,
        mobile: Optional[str],
        seat_type: SeatType,
        room_id: Optional[int],
        seat_no: Optional[int],
        shift: ShiftType,
        start_time: Optional[time],
        end_time: Optional[time],
        monthly_fee: Decimal,
    ) -> bool:
        raise NotImplementedError

    def update_seat(self, member_id: int, *, room_id: Optional[int], seat_no: Optional[int]) -> bool:
        raise NotImplementedError

    def set_status(self, member_id: int, status: MemberStatus) -> bool:
        raise NotImplementedError
