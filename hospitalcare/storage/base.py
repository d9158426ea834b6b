"""
Storage interface shared by the in-memory and relational backends.

Every method is async so routes can await either backend the same way.
Lookups return None for a missing id; updates return None (and change
nothing) for a missing id; deletes return False.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from hospitalcare.schemas import (
    User, UserCreate,
    Appointment, AppointmentCreate,
    Bed, BedCreate,
    Prescription, PrescriptionCreate,
    DoctorSchedule, DoctorScheduleCreate,
)

WARDS = ["general", "icu", "pediatric", "maternity"]
SEED_BED_COUNT = 20


def initial_beds() -> list[BedCreate]:
    """Twenty available beds, round-robin over the wards: G01, I02, P03, M04, G05..."""
    beds = []
    for i in range(1, SEED_BED_COUNT + 1):
        ward = WARDS[(i - 1) % len(WARDS)]
        beds.append(BedCreate(
            bed_number=f"{ward[0].upper()}{i:02d}",
            ward=ward,
            status="available",
            patient_id=None,
        ))
    return beds


def day_window(day: date) -> tuple[datetime, Optional[datetime]]:
    """Half-open [00:00, next 00:00) UTC interval for a calendar day.

    The end is None for 9999-12-31, which has no representable next day;
    the window is then open-ended.
    """
    start = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    if day == date.max:
        return start, None
    return start, start + timedelta(days=1)


def in_window(value: datetime, window: tuple[datetime, Optional[datetime]]) -> bool:
    start, end = window
    return start <= value and (end is None or value < end)


class Storage(ABC):
    name = "abstract"

    async def startup(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass

    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def get_users_by_role(self, role: str) -> list[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    # Appointments
    @abstractmethod
    async def get_appointment(self, appointment_id: int) -> Optional[Appointment]: ...

    @abstractmethod
    async def get_appointments_by_patient(self, patient_id: int) -> list[Appointment]: ...

    @abstractmethod
    async def get_appointments_by_doctor(self, doctor_id: int) -> list[Appointment]: ...

    @abstractmethod
    async def get_appointments_by_date(self, day: date) -> list[Appointment]: ...

    @abstractmethod
    async def create_appointment(self, data: AppointmentCreate) -> Appointment: ...

    @abstractmethod
    async def update_appointment(self, appointment_id: int, changes: dict) -> Optional[Appointment]: ...

    @abstractmethod
    async def delete_appointment(self, appointment_id: int) -> bool: ...

    # Beds
    @abstractmethod
    async def get_bed(self, bed_id: int) -> Optional[Bed]: ...

    @abstractmethod
    async def get_bed_by_number(self, bed_number: str) -> Optional[Bed]: ...

    @abstractmethod
    async def get_beds_by_ward(self, ward: str) -> list[Bed]: ...

    @abstractmethod
    async def get_beds_by_status(self, status: str) -> list[Bed]: ...

    @abstractmethod
    async def get_all_beds(self) -> list[Bed]: ...

    @abstractmethod
    async def create_bed(self, data: BedCreate) -> Bed: ...

    @abstractmethod
    async def update_bed(self, bed_id: int, changes: dict) -> Optional[Bed]: ...

    # Prescriptions
    @abstractmethod
    async def get_prescription(self, prescription_id: int) -> Optional[Prescription]: ...

    @abstractmethod
    async def get_prescriptions_by_patient(self, patient_id: int) -> list[Prescription]: ...

    @abstractmethod
    async def get_prescriptions_by_doctor(self, doctor_id: int) -> list[Prescription]: ...

    @abstractmethod
    async def create_prescription(self, data: PrescriptionCreate) -> Prescription: ...

    @abstractmethod
    async def update_prescription(self, prescription_id: int, changes: dict) -> Optional[Prescription]: ...

    # Doctor schedules
    @abstractmethod
    async def get_doctor_schedule(self, schedule_id: int) -> Optional[DoctorSchedule]: ...

    @abstractmethod
    async def get_doctor_schedules_by_doctor(self, doctor_id: int) -> list[DoctorSchedule]: ...

    @abstractmethod
    async def create_doctor_schedule(self, data: DoctorScheduleCreate) -> DoctorSchedule: ...

    @abstractmethod
    async def update_doctor_schedule(self, schedule_id: int, changes: dict) -> Optional[DoctorSchedule]: ...

    @abstractmethod
    async def delete_doctor_schedule(self, schedule_id: int) -> bool: ...
