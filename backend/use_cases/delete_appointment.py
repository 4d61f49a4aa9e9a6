import logging

from backend.application.exceptions import BadRequestError, NotFoundError
from backend.application.interfaces import IAppointmentRepository, IEventBus
from backend.application.mapper import AppointmentMapper
from backend.domain.appointment import AppointmentStatus
from backend.domain.events import AppointmentDeletedEvent, get_event_name
from backend.domain.exceptions import DomainValidationError
from backend.use_cases.base import require

VALIDATION_ERROR_MESSAGE = 'Validation error occurred while deleting the appointment.'


class DeleteAppointmentUseCase:
    """Removes an appointment unless it has already been completed."""

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

    async def execute(self, appointment_id: int) -> None:
        try:
            appointment = await self._appointment_repository.get(appointment_id)
            # Wording differs from the other lookups; clients match on it.
            if appointment is None:
                raise NotFoundError(f"Appointment with id '{appointment_id}' not found.")

            if appointment.status == AppointmentStatus.COMPLETED:
                raise DomainValidationError(f'Appointment with id {appointment.id} is completed and cannot be deleted.')

            event_message = self._appointment_mapper.to_deleted_message(appointment)
            await self._appointment_repository.remove(appointment)

            await self._event_bus.publish(event_message, get_event_name(AppointmentDeletedEvent))
        except DomainValidationError as exc:
            self._logger.warning(VALIDATION_ERROR_MESSAGE, exc_info=exc)
            raise BadRequestError(VALIDATION_ERROR_MESSAGE) from exc
