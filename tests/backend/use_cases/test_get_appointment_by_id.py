import asyncio

import pytest

from backend.application.exceptions import BadRequestError, NotFoundError
from backend.domain.appointment import AppointmentStatus
from backend.use_cases.get_appointment_by_id import GetAppointmentByIdUseCase


@pytest.mark.parametrize('invalid_id', [0, -1, True, '7'])
def test_execute_rejects_invalid_ids_without_touching_repository(repository, mapper, invalid_id) -> None:
    use_case = GetAppointmentByIdUseCase(repository, mapper)

    with pytest.raises(BadRequestError) as exception_info:
        asyncio.run(use_case.execute(invalid_id))

    assert str(exception_info.value) == f"Appointment with id '{invalid_id}' is invalid."
    assert repository.calls == []


def test_execute_raises_not_found_for_missing_appointment(repository, mapper) -> None:
    use_case = GetAppointmentByIdUseCase(repository, mapper)

    with pytest.raises(NotFoundError) as exception_info:
        asyncio.run(use_case.execute(42))

    assert str(exception_info.value) == "Appointment with id '42' was not found."
    assert repository.calls == [('get', 42)]


def test_execute_returns_mapped_appointment(repository, mapper, stored_appointment) -> None:
    stored_appointment(7, AppointmentStatus.CANCELED)
    use_case = GetAppointmentByIdUseCase(repository, mapper)

    result = asyncio.run(use_case.execute(7))

    assert result.id == 7
    assert result.title == 'Checkup'
    assert result.status == AppointmentStatus.CANCELED


def test_constructor_rejects_missing_collaborators(repository, mapper) -> None:
    with pytest.raises(ValueError):
        GetAppointmentByIdUseCase(None, mapper)

    with pytest.raises(ValueError):
        GetAppointmentByIdUseCase(repository, None)
