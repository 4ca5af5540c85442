from __future__ import annotations

from enum import Enum


class MemberStatus(str, Enum):
    """Membership state; only Active members show up in the manual list."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class SeatType(str, Enum):
    """Reserved seats are bound to one member, General seats are handed out on entry."""

    RESERVED = "Reserved"
    GENERAL = "General"


class ShiftType(str, Enum):
    MORNING = "Morning"
    EVENING = "Evening"
    FULL_DAY = "FullDay"


class PresenceState(str, Enum):
    """Value stored in attendance logs and derived for the current day."""

    IN = "In"
    OUT = "Out"

    def flipped(self) -> "PresenceState":
        return PresenceState.OUT if self is PresenceState.IN else PresenceState.IN


class SeatStatus(str, Enum):
    """Per-seat classification shown on the occupancy dashboard."""

    EMPTY = "EMPTY"
    INSIDE = "INSIDE"
    AWAY = "AWAY"
    ABSENT = "ABSENT"
    OVERSTAY = "OVERSTAY"
