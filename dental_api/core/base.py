from datetime import datetime
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator
from .timeutils import as_utc

class Base(DeclarativeBase):
    pass

class UTCDateTime(TypeDecorator):
    """Timestamp column that always stores and returns timezone-aware UTC values.

    SQLite drops tzinfo on the way back, PostgreSQL returns values in the
    session's zone; both come out of here as UTC.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self):
        super().__init__(timezone=True)

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        return as_utc(value)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        return as_utc(value)
