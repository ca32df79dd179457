"""Column types shared by the ORM models."""
from datetime import datetime

import pytz
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    return datetime.now(pytz.utc)


class UTCDateTime(TypeDecorator):
    """Stores naive UTC, always hands back an aware UTC datetime.

    SQLite drops tzinfo on the way in; normalising here keeps comparisons
    against `now` consistent on every backend.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value
        return value.astimezone(pytz.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return pytz.utc.localize(value)
        return value.astimezone(pytz.utc)
