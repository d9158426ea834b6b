from datetime import datetime
from typing import Literal, Optional
from pydantic import field_validator
from hospitalcare.schemas.base import CamelModel, PartialModel, as_utc

AppointmentStatus = Literal["scheduled", "completed", "cancelled"]


class AppointmentCreate(CamelModel):
    patient_id: int
    doctor_id: int
    appointment_date: datetime
    duration: int  # minutes
    status: AppointmentStatus
    type: str  # "consultation", "follow-up", "check-up"
    notes: Optional[str] = None

    @field_validator("appointment_date")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class AppointmentUpdate(PartialModel):
    nullable_fields = frozenset({"notes"})

    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    appointment_date: Optional[datetime] = None
    duration: Optional[int] = None
    status: Optional[AppointmentStatus] = None
    type: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("appointment_date")
    @classmethod
    def _utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class Appointment(AppointmentCreate):
    id: int
