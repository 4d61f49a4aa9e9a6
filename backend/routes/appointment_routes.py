import logging
from datetime import datetime

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.mapper import AppointmentMapper
from backend.database import get_db
from backend.domain.appointment import AppointmentStatus
from backend.events.in_memory_event_bus import InMemoryEventBus
from backend.repositories.appointment_repository import SqlAlchemyAppointmentRepository
from backend.use_cases.create_appointment import CreateAppointmentUseCase
from backend.use_cases.delete_appointment import DeleteAppointmentUseCase
from backend.use_cases.get_appointment_by_id import GetAppointmentByIdUseCase
from backend.use_cases.update_appointment import UpdateAppointmentUseCase
from backend.use_cases.update_appointment_status import UpdateAppointmentStatusUseCase

router = APIRouter(tags=['appointments'])

event_bus = InMemoryEventBus()
appointment_mapper = AppointmentMapper()


class CreateAppointmentRequest(BaseModel):
    title: str
    start_time: datetime
    end_time: datetime
    description: str = ''

    @field_validator('title', 'description')
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class UpdateAppointmentRequest(CreateAppointmentRequest):
    status: int


class UpdateAppointmentStatusRequest(BaseModel):
    status: int


class AppointmentResponse(BaseModel):
    id: int
    title: str
    start_time: datetime
    end_time: datetime
    description: str | None = None
    status: AppointmentStatus


def get_event_bus() -> InMemoryEventBus:
    return event_bus


def get_repository(db: AsyncSession = Depends(get_db)) -> SqlAlchemyAppointmentRepository:
    return SqlAlchemyAppointmentRepository(db)


def get_create_use_case(
    repository: SqlAlchemyAppointmentRepository = Depends(get_repository),
    bus: InMemoryEventBus = Depends(get_event_bus),
) -> CreateAppointmentUseCase:
    return CreateAppointmentUseCase(
        repository, appointment_mapper, bus, logging.getLogger(CreateAppointmentUseCase.__module__)
    )


def get_by_id_use_case(
    repository: SqlAlchemyAppointmentRepository = Depends(get_repository),
) -> GetAppointmentByIdUseCase:
    return GetAppointmentByIdUseCase(repository, appointment_mapper)


def get_update_use_case(
    repository: SqlAlchemyAppointmentRepository = Depends(get_repository),
    bus: InMemoryEventBus = Depends(get_event_bus),
) -> UpdateAppointmentUseCase:
    return UpdateAppointmentUseCase(
        repository, appointment_mapper, bus, logging.getLogger(UpdateAppointmentUseCase.__module__)
    )


def get_update_status_use_case(
    repository: SqlAlchemyAppointmentRepository = Depends(get_repository),
    bus: InMemoryEventBus = Depends(get_event_bus),
) -> UpdateAppointmentStatusUseCase:
    return UpdateAppointmentStatusUseCase(
        repository, appointment_mapper, bus, logging.getLogger(UpdateAppointmentStatusUseCase.__module__)
    )


def get_delete_use_case(
    repository: SqlAlchemyAppointmentRepository = Depends(get_repository),
    bus: InMemoryEventBus = Depends(get_event_bus),
) -> DeleteAppointmentUseCase:
    return DeleteAppointmentUseCase(
        repository, appointment_mapper, bus, logging.getLogger(DeleteAppointmentUseCase.__module__)
    )


@router.post('', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    data: CreateAppointmentRequest,
    use_case: CreateAppointmentUseCase = Depends(get_create_use_case),
):
    return await use_case.execute(data.title, data.start_time, data.end_time, data.description)


@router.get('/{appointment_id}', response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    use_case: GetAppointmentByIdUseCase = Depends(get_by_id_use_case),
):
    return await use_case.execute(appointment_id)


@router.put('/{appointment_id}', response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    data: UpdateAppointmentRequest,
    use_case: UpdateAppointmentUseCase = Depends(get_update_use_case),
):
    return await use_case.execute(
        appointment_id,
        data.title,
        data.start_time,
        data.end_time,
        data.description,
        data.status,
    )


@router.patch('/{appointment_id}/status', response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    data: UpdateAppointmentStatusRequest,
    use_case: UpdateAppointmentStatusUseCase = Depends(get_update_status_use_case),
):
    return await use_case.execute(appointment_id, data.status)


@router.delete('/{appointment_id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    appointment_id: int,
    use_case: DeleteAppointmentUseCase = Depends(get_delete_use_case),
):
    await use_case.execute(appointment_id)
