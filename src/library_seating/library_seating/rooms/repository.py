from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Room


class RoomRepository(Protocol):
    def list_all(self) -> Sequence[Room]:
        """Rooms in their stored (insertion) order."""

        raise NotImplementedError

    def get_by_id(self, room_id: int) -> Optional[Room]:
        raise NotImplementedError

    def create(self, *, name: str, capacity: int, rows: int, cols: int) -> int:
        raise NotImplementedError

    def delete_by_id(self, room_id: int) -> bool:
        raise NotImplementedError
