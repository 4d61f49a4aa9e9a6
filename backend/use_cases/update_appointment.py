import logging
from datetime import datetime

from backend.application.dtos import AppointmentDto
from backend.application.exceptions import BadRequestError, NotFoundError
from backend.application.interfaces import IAppointmentRepository, IEventBus
from backend.application.mapper import AppointmentMapper
from backend.domain.appointment import AppointmentStatus
from backend.domain.events import AppointmentChangedEvent, get_event_name
from backend.domain.exceptions import DomainValidationError
from backend.use_cases.base import require

VALIDATION_ERROR_MESSAGE = 'Validation error occurred while updating an appointment.'


class UpdateAppointmentUseCase:
    """Replaces every editable field of an existing appointment."""

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        appointment_mapper: AppointmentMapper,
        event_bus: IEventBus,
        logger: logging.Logger,
    ) -> None:
        self._appointment_repository = require(appointment_repository, 'appointment_repository')
        self._appointment_mapper = require(appointment_mapper, 'appointment_mapper')
        self._event_bus = require(event_bus, 'event_bus')
        self._logger = require(logger, 'logger')

    async def execute(
        self,
        appointment_id: int,
        title: str,
        start_time: datetime,
        end_time: datetime,
        description: str,
        status: AppointmentStatus,
    ) -> AppointmentDto:
        try:
            appointment = await self._appointment_repository.get(appointment_id)
            if appointment is None:
                raise NotFoundError(f"Appointment with id '{appointment_id}' was not found.")

            appointment.update(title, start_time, end_time, description, status)

            updated = await self._appointment_repository.update(appointment)

            event_message = self._appointment_mapper.to_changed_message(updated)
            await self._event_bus.publish(event_message, get_event_name(AppointmentChangedEvent))

            return self._appointment_mapper.to_dto(updated)
        except DomainValidationError as exc:
            self._logger.warning(VALIDATION_ERROR_MESSAGE, exc_info=exc)
            raise BadRequestError(VALIDATION_ERROR_MESSAGE) from exc
