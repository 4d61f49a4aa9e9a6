"""Conversions from the appointment aggregate to DTOs and event payloads."""

from backend.application.dtos import AppointmentDto
from backend.domain.appointment import AppointmentDomain
from backend.domain.events import (
    AppointmentChangedEvent,
    AppointmentCreatedEvent,
    AppointmentDeletedEvent,
    AppointmentEvent,
)


class AppointmentMapper:
    """Copies appointment fields verbatim; no conversion of times or text."""

    def to_dto(self, appointment: AppointmentDomain) -> AppointmentDto:
        return AppointmentDto(
            id=appointment.id,
            title=appointment.title,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
            description=appointment.description,
            status=appointment.status,
        )

    def to_created_message(self, appointment: AppointmentDomain) -> AppointmentCreatedEvent:
        return self._to_event(AppointmentCreatedEvent, appointment)

    def to_changed_message(self, appointment: AppointmentDomain) -> AppointmentChangedEvent:
        return self._to_event(AppointmentChangedEvent, appointment)

    def to_deleted_message(self, appointment: AppointmentDomain) -> AppointmentDeletedEvent:
        return self._to_event(AppointmentDeletedEvent, appointment)

    @staticmethod
    def _to_event(event_type: type[AppointmentEvent], appointment: AppointmentDomain) -> AppointmentEvent:
        return event_type(
            appointment_id=appointment.id,
            title=appointment.title,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
            description=appointment.description,
            status=appointment.status,
        )
