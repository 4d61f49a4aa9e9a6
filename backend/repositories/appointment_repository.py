import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.interfaces import IAppointmentRepository
from backend.domain.appointment import AppointmentDomain, AppointmentStatus
from backend.domain.exceptions import DomainValidationError
from backend.models.appointment import Appointment

logger = logging.getLogger(__name__)


def to_domain(row: Appointment) -> AppointmentDomain:
    return AppointmentDomain.hydrate(
        id=row.id,
        title=row.title,
        start_time=row.start_time,
        end_time=row.end_time,
        description=row.description,
        status=AppointmentStatus(row.status),
    )


class SqlAlchemyAppointmentRepository(IAppointmentRepository):
    """Stores appointments in the ``appointments`` table through one async session."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get(self, appointment_id: int) -> AppointmentDomain | None:
        row = await self._db.get(Appointment, appointment_id)
        if row is None:
            return None
        return to_domain(row)

    async def add(self, appointment: AppointmentDomain) -> AppointmentDomain:
        row = Appointment(
            title=appointment.title,
            start_time=appointment.start_time,
            end_time=appointment.end_time,
            description=appointment.description,
            status=int(appointment.status),
        )
        self._db.add(row)
        try:
            await self._db.flush()
            appointment.assign_id(row.id)
        except (SQLAlchemyError, DomainValidationError):
            await self._db.rollback()
            raise
        await self._commit()
        await self._db.refresh(row)

        logger.info('Stored appointment %s', row.id)
        return to_domain(row)

    async def update(self, appointment: AppointmentDomain) -> AppointmentDomain:
        row = await self._db.get(Appointment, appointment.id)
        if row is None:
            raise LookupError(f'Appointment {appointment.id} does not exist.')

        row.title = appointment.title
        row.start_time = appointment.start_time
        row.end_time = appointment.end_time
        row.description = appointment.description
        row.status = int(appointment.status)
        await self._commit()
        await self._db.refresh(row)

        return to_domain(row)

    async def remove(self, appointment: AppointmentDomain) -> None:
        row = await self._db.get(Appointment, appointment.id)
        if row is None:
            return

        await self._db.delete(row)
        await self._commit()
        logger.info('Removed appointment %s', appointment.id)

    async def _commit(self) -> None:
        try:
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            raise
