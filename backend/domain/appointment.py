"""Appointment aggregate and its status enumeration."""

from datetime import datetime
from enum import IntEnum

from backend.domain.exceptions import DomainValidationError


class AppointmentStatus(IntEnum):
    SCHEDULED = 0
    COMPLETED = 1
    CANCELED = 2


def parse_status(value) -> AppointmentStatus:
    """Return ``value`` as an ``AppointmentStatus`` or raise if it is not a member."""
    if isinstance(value, AppointmentStatus):
        return value
    if isinstance(value, bool):
        raise DomainValidationError(f'Invalid appointment status: {value!r}.')
    try:
        return AppointmentStatus(value)
    except (ValueError, TypeError) as exc:
        raise DomainValidationError(f'Invalid appointment status: {value!r}.') from exc


class AppointmentDomain:
    """An appointment and the rules that govern changes to it.

    New appointments are built through the constructor, which validates the
    title and the time range and starts them as ``SCHEDULED``. Appointments
    loaded from storage go through :meth:`hydrate` instead, which trusts the
    stored values as-is.
    """

    def __init__(self, title: str, start_time: datetime, end_time: datetime, description: str) -> None:
        self._validate_title(title)
        self._validate_dates(start_time, end_time)

        self._id: int | None = None
        self._title = title
        self._start_time = start_time
        self._end_time = end_time
        self._description = description
        self._status = AppointmentStatus.SCHEDULED

    @classmethod
    def hydrate(
        cls,
        id: int,
        title: str,
        start_time: datetime,
        end_time: datetime,
        description: str,
        status: AppointmentStatus,
    ) -> 'AppointmentDomain':
        appointment = cls.__new__(cls)
        appointment._id = id
        appointment._title = title
        appointment._start_time = start_time
        appointment._end_time = end_time
        appointment._description = description
        appointment._status = status
        return appointment

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def end_time(self) -> datetime:
        return self._end_time

    @property
    def description(self) -> str:
        return self._description

    @property
    def status(self) -> AppointmentStatus:
        return self._status

    def assign_id(self, id: int) -> None:
        if id <= 0:
            raise DomainValidationError(f'Appointment id must be greater than 0. Provided value: {id}')

        if self._id is not None:
            raise DomainValidationError(
                f'Appointment id has already been assigned for this appointment. Current id: {self._id}'
            )

        self._id = id

    def complete(self) -> None:
        if self._status == AppointmentStatus.COMPLETED:
            raise DomainValidationError(f'Appointment with id {self._id} is already completed.')

        self._status = AppointmentStatus.COMPLETED

    def cancel(self) -> None:
        if self._status == AppointmentStatus.CANCELED:
            raise DomainValidationError(f'Appointment with id {self._id} is already canceled.')

        self._status = AppointmentStatus.CANCELED

    def update_status(self, new_status) -> None:
        status = parse_status(new_status)
        if status == self._status:
            return

        self._status = status

    def update(
        self,
        title: str,
        start_time: datetime,
        end_time: datetime,
        description: str,
        new_status,
    ) -> None:
        self._validate_title(title)
        self._validate_dates(start_time, end_time)
        status = parse_status(new_status)

        self._title = title
        self._start_time = start_time
        self._end_time = end_time
        self._description = description
        self._status = status

    @staticmethod
    def _validate_title(title: str) -> None:
        if title is None or not title.strip():
            raise DomainValidationError('title cannot be null or empty.')

    @staticmethod
    def _validate_dates(start_time: datetime, end_time: datetime) -> None:
        if (start_time.tzinfo is None) != (end_time.tzinfo is None):
            raise DomainValidationError(
                f'start_time ({start_time}) and end_time ({end_time}) must both be timezone-aware or both naive.'
            )
        if start_time >= end_time:
            raise DomainValidationError(
                f'start_time ({start_time}) must be earlier than end_time ({end_time}).'
            )

    def __repr__(self) -> str:
        return (
            f'AppointmentDomain(id={self._id!r}, title={self._title!r}, '
            f'start_time={self._start_time!r}, end_time={self._end_time!r}, status={self._status.name})'
        )
