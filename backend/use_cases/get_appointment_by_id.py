from backend.application.dtos import AppointmentDto
from backend.application.exceptions import BadRequestError, NotFoundError
from backend.application.interfaces import IAppointmentRepository
from backend.application.mapper import AppointmentMapper
from backend.use_cases.base import require


def is_valid_appointment_id(appointment_id) -> bool:
    return isinstance(appointment_id, int) and not isinstance(appointment_id, bool) and appointment_id > 0


class GetAppointmentByIdUseCase:
    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        appointment_mapper: AppointmentMapper,
    ) -> None:
        self._appointment_repository = require(appointment_repository, 'appointment_repository')
        self._appointment_mapper = require(appointment_mapper, 'appointment_mapper')

    async def execute(self, appointment_id: int) -> AppointmentDto:
        if not is_valid_appointment_id(appointment_id):
            raise BadRequestError(f"Appointment with id '{appointment_id}' is invalid.")

        appointment = await self._appointment_repository.get(appointment_id)
        if appointment is None:
            raise NotFoundError(f"Appointment with id '{appointment_id}' was not found.")

        return self._appointment_mapper.to_dto(appointment)
