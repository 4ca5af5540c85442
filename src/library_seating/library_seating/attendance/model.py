from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PresenceState


@dataclass(frozen=True)
class AttendanceLog:
    """Domain entity: one check-in or check-out event (append-only).

    ``event_time`` is the event timestamp; its calendar day is the day key.
    """

    log_id: int
    member_id: int
    event_time: datetime
    status: PresenceState
    in_time: Optional[datetime] = None
    out_time: Optional[datetime] = None


@dataclass(frozen=True)
class Presence:
    member_id: int
    state: PresenceState
    last_log: Optional[AttendanceLog] = None

    @property
    def is_inside(self) -> bool:
        return self.state == PresenceState.IN


@dataclass(frozen=True)
class SeatAssignment:
    room_id: int
    seat_no: int


@dataclass(frozen=True)
class ToggleResult:
    """Feedback returned to the scan/manual input after a transition."""

    member_id: int
    member_name: str
    new_state: PresenceState
    event_time: datetime
    room_id: Optional[int] = None
    seat_no: Optional[int] = None


@dataclass(frozen=True)
class AttendanceLogRow:
    """Read-model for the attendance log screen."""

    log_id: int
    member_id: int
    member_name: str
    seat_info: str
    event_time: datetime
    status: PresenceState
    in_time: Optional[datetime]
    out_time: Optional[datetime]
