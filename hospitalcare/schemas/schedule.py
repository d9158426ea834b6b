from typing import Literal, Optional
from pydantic import Field
from hospitalcare.schemas.base import CamelModel, PartialModel

Day = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class DoctorScheduleCreate(CamelModel):
    doctor_id: int
    day: Day
    start_time: str = Field(pattern=TIME_PATTERN)  # "09:00"
    end_time: str = Field(pattern=TIME_PATTERN)  # "17:00"
    activity_type: str  # "clinic", "surgery", "rounds", "meeting"


class DoctorScheduleUpdate(PartialModel):
    doctor_id: Optional[int] = None
    day: Optional[Day] = None
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    activity_type: Optional[str] = None


class DoctorSchedule(DoctorScheduleCreate):
    id: int
