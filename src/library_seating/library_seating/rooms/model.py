from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """Domain entity: a seating zone (e.g. "Main Hall", "Balcony").

    Seats are numbered 1..capacity; rows/cols only drive the grid layout.
    """

    room_id: int
    name: str
    capacity: int
    rows: int
    cols: int

    def seat_numbers(self) -> range:
        return range(1, self.capacity + 1)
