"""Domain events published after an appointment is created, changed or deleted."""

from datetime import datetime

from pydantic import BaseModel

from backend.domain.appointment import AppointmentStatus


class AppointmentEvent(BaseModel):
    appointment_id: int
    title: str
    start_time: datetime
    end_time: datetime
    description: str | None
    status: AppointmentStatus


class AppointmentCreatedEvent(AppointmentEvent):
    pass


class AppointmentChangedEvent(AppointmentEvent):
    pass


class AppointmentDeletedEvent(AppointmentEvent):
    pass


def get_event_name(event_type: type[AppointmentEvent]) -> str:
    return event_type.__name__
