"""Appointment model definitions."""

from datetime import timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.types import TypeDecorator
from backend.database import Base


class UtcDateTime(TypeDecorator):
    """Stores datetimes as naive UTC and reads them back as UTC-aware.

    Aware values are converted to UTC before writing; naive values are taken
    to already be UTC.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Appointment(Base):
    """Stored form of an appointment."""
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    start_time = Column(UtcDateTime, nullable=False)
    end_time = Column(UtcDateTime, nullable=False)
    description = Column(Text)
    status = Column(Integer, nullable=False)
