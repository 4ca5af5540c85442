class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist in the store."""


class MemberNotFound(NotFoundError):
    """Raised when a scan or toggle references an unknown member id."""

    def __init__(self, member_id):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id


class CapacityExceeded(DomainError):
    """Raised when no seat is free for a General member checking in."""

    def __init__(self, member_id):
        super().__init__("Library full! No seats available.")
        self.member_id = member_id


class ScanIgnored(DomainError):
    """Raised when a scan arrives while the same input channel is still busy."""

    def __init__(self, channel: str):
        super().__init__(f"Input channel {channel!r} is busy, scan ignored")
        self.channel = channel


class StoreError(Exception):
    """Raised when the underlying record store fails."""
