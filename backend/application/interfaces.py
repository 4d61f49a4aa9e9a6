"""Collaborator contracts the use cases depend on."""

from abc import ABC, abstractmethod

from backend.domain.appointment import AppointmentDomain
from backend.domain.events import AppointmentEvent


class IAppointmentRepository(ABC):
    """Persistence contract for appointments."""

    @abstractmethod
    async def get(self, appointment_id: int) -> AppointmentDomain | None:
        """Return the stored appointment, or ``None`` when there is no such id."""

    @abstractmethod
    async def add(self, appointment: AppointmentDomain) -> AppointmentDomain:
        """Persist a new appointment and return it with its id assigned."""

    @abstractmethod
    async def update(self, appointment: AppointmentDomain) -> AppointmentDomain:
        """Persist changes to an existing appointment and return the stored state."""

    @abstractmethod
    async def remove(self, appointment: AppointmentDomain) -> None:
        """Delete a stored appointment."""


class IEventBus(ABC):
    """Publish contract for appointment domain events."""

    @abstractmethod
    async def publish(self, event: AppointmentEvent, event_name: str) -> None:
        pass
