import logging
from datetime import datetime

from backend.application.dtos import AppointmentDto
from backend.application.exceptions import BadRequestError
from backend.application.interfaces import IAppointmentRepository, IEventBus
from backend.application.mapper import AppointmentMapper
from backend.domain.appointment import AppointmentDomain
from backend.domain.events import AppointmentCreatedEvent, get_event_name
from backend.domain.exceptions import DomainValidationError
from backend.use_cases.base import require

VALIDATION_ERROR_MESSAGE = 'Validation error occurred while creating an appointment.'


class CreateAppointmentUseCase:
    """Creates a scheduled appointment and announces it on the event bus."""

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
        title: str,
        start_time: datetime,
        end_time: datetime,
        description: str,
    ) -> AppointmentDto:
        try:
            appointment = AppointmentDomain(title, start_time, end_time, description)

            created = await self._appointment_repository.add(appointment)

            event_message = self._appointment_mapper.to_created_message(created)
            await self._event_bus.publish(event_message, get_event_name(AppointmentCreatedEvent))

            return self._appointment_mapper.to_dto(created)
        except DomainValidationError as exc:
            self._logger.warning(VALIDATION_ERROR_MESSAGE, exc_info=exc)
            raise BadRequestError(VALIDATION_ERROR_MESSAGE) from exc
