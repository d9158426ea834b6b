import logging
import threading
from datetime import date
from typing import Callable, Optional, TypeVar
from pydantic import BaseModel
from hospitalcare.schemas import (
    User, UserCreate,
    Appointment, AppointmentCreate,
    Bed, BedCreate,
    Prescription, PrescriptionCreate,
    DoctorSchedule, DoctorScheduleCreate,
)
from hospitalcare.schemas.base import as_utc
from hospitalcare.storage.base import Storage, initial_beds, day_window, in_window

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class _Table:
    """Insertion-ordered records of one kind with a never-reused id counter."""

    def __init__(self, record_type: type[R], lock: threading.RLock):
        self.record_type = record_type
        self.rows: dict[int, R] = {}
        self.next_id = 1
        self.lock = lock

    def get(self, record_id: int) -> Optional[R]:
        return self.rows.get(record_id)

    def scan(self, predicate: Callable[[R], bool] = None) -> list[R]:
        return [r for r in list(self.rows.values()) if predicate is None or predicate(r)]

    def insert(self, data: BaseModel) -> R:
        with self.lock:
            record_id = self.next_id
            self.next_id += 1
            record = self.record_type(id=record_id, **data.model_dump())
            self.rows[record_id] = record
            return record

    def update(self, record_id: int, changes: dict) -> Optional[R]:
        with self.lock:
            current = self.rows.get(record_id)
            if current is None:
                return None
            merged = {**current.model_dump(), **changes, "id": record_id}
            record = self.record_type.model_validate(merged)
            self.rows[record_id] = record
            return record

    def delete(self, record_id: int) -> bool:
        with self.lock:
            return self.rows.pop(record_id, None) is not None


class MemStorage(Storage):
    """Process-lifetime store. Construct one per application (or per test)."""

    name = "memory"

    def __init__(self, seed: bool = True):
        self._lock = threading.RLock()
        self.users = _Table(User, self._lock)
        self.appointments = _Table(Appointment, self._lock)
        self.beds = _Table(Bed, self._lock)
        self.prescriptions = _Table(Prescription, self._lock)
        self.schedules = _Table(DoctorSchedule, self._lock)
        if seed:
            for bed in initial_beds():
                self.beds.insert(bed)
            logger.debug("Seeded %d beds", len(self.beds.rows))

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        matches = self.users.scan(lambda u: u.username == username)
        return matches[0] if matches else None

    async def get_users_by_role(self, role: str) -> list[User]:
        return self.users.scan(lambda u: u.role == role)

    async def create_user(self, data: UserCreate) -> User:
        return self.users.insert(data)

    # Appointments
    async def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return self.appointments.get(appointment_id)

    async def get_appointments_by_patient(self, patient_id: int) -> list[Appointment]:
        return self.appointments.scan(lambda a: a.patient_id == patient_id)

    async def get_appointments_by_doctor(self, doctor_id: int) -> list[Appointment]:
        return self.appointments.scan(lambda a: a.doctor_id == doctor_id)

    async def get_appointments_by_date(self, day: date) -> list[Appointment]:
        window = day_window(day)
        return self.appointments.scan(lambda a: in_window(as_utc(a.appointment_date), window))

    async def create_appointment(self, data: AppointmentCreate) -> Appointment:
        return self.appointments.insert(data)

    async def update_appointment(self, appointment_id: int, changes: dict) -> Optional[Appointment]:
        return self.appointments.update(appointment_id, changes)

    async def delete_appointment(self, appointment_id: int) -> bool:
        return self.appointments.delete(appointment_id)

    # Beds
    async def get_bed(self, bed_id: int) -> Optional[Bed]:
        return self.beds.get(bed_id)

    async def get_bed_by_number(self, bed_number: str) -> Optional[Bed]:
        matches = self.beds.scan(lambda b: b.bed_number == bed_number)
        return matches[0] if matches else None

    async def get_beds_by_ward(self, ward: str) -> list[Bed]:
        return self.beds.scan(lambda b: b.ward == ward)

    async def get_beds_by_status(self, status: str) -> list[Bed]:
        return self.beds.scan(lambda b: b.status == status)

    async def get_all_beds(self) -> list[Bed]:
        return self.beds.scan()

    async def create_bed(self, data: BedCreate) -> Bed:
        return self.beds.insert(data)

    async def update_bed(self, bed_id: int, changes: dict) -> Optional[Bed]:
        return self.beds.update(bed_id, changes)

    # Prescriptions
    async def get_prescription(self, prescription_id: int) -> Optional[Prescription]:
        return self.prescriptions.get(prescription_id)

    async def get_prescriptions_by_patient(self, patient_id: int) -> list[Prescription]:
        return self.prescriptions.scan(lambda p: p.patient_id == patient_id)

    async def get_prescriptions_by_doctor(self, doctor_id: int) -> list[Prescription]:
        return self.prescriptions.scan(lambda p: p.doctor_id == doctor_id)

    async def create_prescription(self, data: PrescriptionCreate) -> Prescription:
        return self.prescriptions.insert(data)

    async def update_prescription(self, prescription_id: int, changes: dict) -> Optional[Prescription]:
        return self.prescriptions.update(prescription_id, changes)

    # Doctor schedules
    async def get_doctor_schedule(self, schedule_id: int) -> Optional[DoctorSchedule]:
        return self.schedules.get(schedule_id)

    async def get_doctor_schedules_by_doctor(self, doctor_id: int) -> list[DoctorSchedule]:
        return self.schedules.scan(lambda s: s.doctor_id == doctor_id)

    async def create_doctor_schedule(self, data: DoctorScheduleCreate) -> DoctorSchedule:
        return self.schedules.insert(data)

    async def update_doctor_schedule(self, schedule_id: int, changes: dict) -> Optional[DoctorSchedule]:
        return self.schedules.update(schedule_id, changes)

    async def delete_doctor_schedule(self, schedule_id: int) -> bool:
        return self.schedules.delete(schedule_id)
