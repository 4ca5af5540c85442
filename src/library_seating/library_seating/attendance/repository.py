from __future__ import annotations

from datetime import datetime
from typing import ContextManager, Optional, Protocol, Sequence

from ..core.enums import PresenceState
from .model import AttendanceLog


class AttendanceRepository(Protocol):
    def list_between(self, start: datetime, end: datetime) -> Sequence[AttendanceLog]:
        """Logs with ``start <= event_time <= end``, oldest first (ties by log id)."""

        raise NotImplementedError

    def list_for_member_between(self, member_id: int, start: datetime, end: datetime) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def insert_log(
        self,
        *,
        member_id: int,
        event_time: datetime,
        status: PresenceState,
        in_time: Optional[datetime] = None,
        out_time: Optional[datetime] = None,
    ) -> int:
        raise NotImplementedError

    def count_days_with_status(self, member_id: int, status: PresenceState) -> int:
        """Number of distinct calendar days holding at least one log with ``status``."""

        raise NotImplementedError


class TransactionManager(Protocol):
    def transaction(self) -> ContextManager[None]:
        """All store writes inside the block are committed together or not at all."""

        raise NotImplementedError
