import logging
from datetime import datetime, timedelta

import pytest

from backend.application.interfaces import IAppointmentRepository, IEventBus
from backend.application.mapper import AppointmentMapper
from backend.domain.appointment import AppointmentDomain, AppointmentStatus

START = datetime(2026, 1, 5, 9, 0)
END = START + timedelta(hours=1)


class FakeAppointmentRepository(IAppointmentRepository):
    def __init__(self) -> None:
        self.appointments: dict[int, AppointmentDomain] = {}
        self.calls: list[tuple[str, object]] = []
        self.errors: dict[str, Exception] = {}
        self.next_id = 100

    def call_count(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)

    def _record(self, name: str, argument) -> None:
        self.calls.append((name, argument))
        if name in self.errors:
            raise self.errors[name]

    async def get(self, appointment_id: int) -> AppointmentDomain | None:
        self._record('get', appointment_id)
        return self.appointments.get(appointment_id)

    async def add(self, appointment: AppointmentDomain) -> AppointmentDomain:
        self._record('add', appointment)
        appointment.assign_id(self.next_id)
        self.next_id += 1
        self.appointments[appointment.id] = appointment
        return appointment

    async def update(self, appointment: AppointmentDomain) -> AppointmentDomain:
        self._record('update', appointment)
        stored = AppointmentDomain.hydrate(
            appointment.id,
            appointment.title,
            appointment.start_time,
            appointment.end_time,
            appointment.description,
            appointment.status,
        )
        self.appointments[stored.id] = stored
        return stored

    async def remove(self, appointment: AppointmentDomain) -> None:
        self._record('remove', appointment)
        self.appointments.pop(appointment.id, None)


class FakeEventBus(IEventBus):
    def __init__(self) -> None:
        self.published: list[tuple[object, str]] = []
        self.error: Exception | None = None

    async def publish(self, event, event_name: str) -> None:
        self.published.append((event, event_name))
        if self.error is not None:
            raise self.error


@pytest.fixture
def repository() -> FakeAppointmentRepository:
    return FakeAppointmentRepository()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def mapper() -> AppointmentMapper:
    return AppointmentMapper()


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger('tests.use_cases')


@pytest.fixture
def stored_appointment(repository: FakeAppointmentRepository):
    def store(appointment_id: int = 7, status: AppointmentStatus = AppointmentStatus.SCHEDULED) -> AppointmentDomain:
        appointment = AppointmentDomain.hydrate(appointment_id, 'Checkup', START, END, 'Annual physical', status)
        repository.appointments[appointment_id] = appointment
        return appointment

    return store
