from datetime import datetime
from typing import Literal, Optional
from pydantic import field_validator
from hospitalcare.schemas.base import CamelModel, PartialModel, as_utc

PrescriptionStatus = Literal["active", "completed"]


class PrescriptionCreate(CamelModel):
    patient_id: int
    doctor_id: int
    prescription_date: datetime
    status: PrescriptionStatus
    notes: Optional[str] = None
    file_data: Optional[str] = None  # base64 encoded PDF, stored inline
    file_name: Optional[str] = None

    @field_validator("prescription_date")
    @classmethod
    def _utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class PrescriptionUpdate(PartialModel):
    nullable_fields = frozenset({"notes", "file_data", "file_name"})

    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    prescription_date: Optional[datetime] = None
    status: Optional[PrescriptionStatus] = None
    notes: Optional[str] = None
    file_data: Optional[str] = None
    file_name: Optional[str] = None

    @field_validator("prescription_date")
    @classmethod
    def _utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class Prescription(PrescriptionCreate):
    id: int
