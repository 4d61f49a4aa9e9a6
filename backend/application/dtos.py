from datetime import datetime

from pydantic import BaseModel

from backend.domain.appointment import AppointmentStatus


class AppointmentDto(BaseModel):
    id: int | None
    title: str
    start_time: datetime
    end_time: datetime
    description: str | None
    status: AppointmentStatus
