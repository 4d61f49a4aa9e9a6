import asyncio

import pytest

from backend.application.exceptions import BadRequestError, NotFoundError
from backend.domain.appointment import AppointmentStatus
from backend.domain.events import AppointmentChangedEvent
from backend.domain.exceptions import DomainValidationError
from backend.use_cases.update_appointment_status import UpdateAppointmentStatusUseCase

VALIDATION_ERROR_MESSAGE = 'Validation error occurred while updating the appointment status.'


def test_execute_changes_status_and_publishes_changed_event(
    repository, mapper, event_bus, logger, stored_appointment
) -> None:
    stored_appointment(7)
    use_case = UpdateAppointmentStatusUseCase(repository, mapper, event_bus, logger)

    result = asyncio.run(use_case.execute(7, AppointmentStatus.COMPLETED))

    assert result.id == 7
    assert result.status == AppointmentStatus.COMPLETED
    assert repository.call_count('update') == 1

    event, event_name = event_bus.published[0]
    assert isinstance(event, AppointmentChangedEvent)
    assert event_name == 'AppointmentChangedEvent'
    assert event.status == AppointmentStatus.COMPLETED


def test_execute_with_same_status_still_persists_and_publishes(
    repository, mapper, event_bus, logger, stored_appointment
) -> None:
    stored_appointment(7, AppointmentStatus.CANCELED)
    use_case = UpdateAppointmentStatusUseCase(repository, mapper, event_bus, logger)

    result = asyncio.run(use_case.execute(7, AppointmentStatus.CANCELED))

    assert result.status == AppointmentStatus.CANCELED
    assert repository.call_count('update') == 1
    assert len(event_bus.published) == 1


def test_execute_raises_not_found_for_missing_appointment(repository, mapper, event_bus, logger) -> None:
    use_case = UpdateAppointmentStatusUseCase(repository, mapper, event_bus, logger)

    with pytest.raises(NotFoundError) as exception_info:
        asyncio.run(use_case.execute(42, AppointmentStatus.COMPLETED))

    assert str(exception_info.value) == "Appointment with id '42' was not found."


def test_execute_rejects_unknown_status_without_persisting(
    repository, mapper, event_bus, logger, stored_appointment
) -> None:
    stored_appointment(7)
    use_case = UpdateAppointmentStatusUseCase(repository, mapper, event_bus, logger)

    with pytest.raises(BadRequestError) as exception_info:
        asyncio.run(use_case.execute(7, 999))

    assert str(exception_info.value) == VALIDATION_ERROR_MESSAGE
    assert isinstance(exception_info.value.__cause__, DomainValidationError)
    assert repository.call_count('update') == 0
    assert event_bus.published == []


def test_execute_propagates_event_bus_failure(repository, mapper, event_bus, logger, stored_appointment) -> None:
    stored_appointment(7)
    failure = RuntimeError('Event bus failure')
    event_bus.error = failure
    use_case = UpdateAppointmentStatusUseCase(repository, mapper, event_bus, logger)

    with pytest.raises(RuntimeError) as exception_info:
        asyncio.run(use_case.execute(7, AppointmentStatus.CANCELED))

    assert exception_info.value is failure
    assert repository.appointments[7].status == AppointmentStatus.CANCELED


@pytest.mark.parametrize('missing', ['appointment_repository', 'appointment_mapper', 'event_bus', 'logger'])
def test_constructor_rejects_missing_collaborators(repository, mapper, event_bus, logger, missing: str) -> None:
    collaborators = {
        'appointment_repository': repository,
        'appointment_mapper': mapper,
        'event_bus': event_bus,
        'logger': logger,
    }
    collaborators[missing] = None

    with pytest.raises(ValueError, match=missing):
        UpdateAppointmentStatusUseCase(**collaborators)
