"""Moderation status state machine shared by events and video suggestions."""
import enum
from typing import Any


class ModerationStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"

    @classmethod
    def parse(cls, value: Any) -> "ModerationStatus":
        """Read a stored status; anything outside the known set is pending.

        Matching is exact, so "Approved" or " approved" never reads as approved.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.pending


DEFAULT_STATUS = ModerationStatus.pending
STATUS_VALUES = tuple(s.value for s in ModerationStatus)


def status_check(column: str = "status") -> str:
    """SQL CHECK expression restricting a column to the known statuses."""
    allowed = ", ".join(f"'{v}'" for v in STATUS_VALUES)
    return f"{column} IN ({allowed})"
