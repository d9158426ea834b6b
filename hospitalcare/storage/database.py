"""
Relational backend on SQLAlchemy's async ORM.

Each call opens its own session and commits before returning, so there are
no transactions spanning several store operations.
"""

import logging
from datetime import date
from typing import Optional
from pydantic import BaseModel
from sqlalchemy import select, func
from hospitalcare.database import Base, make_engine, make_sessionmaker
from hospitalcare.models import UserRow, AppointmentRow, BedRow, PrescriptionRow, DoctorScheduleRow
from hospitalcare.schemas import (
    User, UserCreate,
    Appointment, AppointmentCreate,
    Bed, BedCreate,
    Prescription, PrescriptionCreate,
    DoctorSchedule, DoctorScheduleCreate,
)
from hospitalcare.storage.base import Storage, initial_beds, day_window

logger = logging.getLogger(__name__)


def _to_record(row, record_type: type[BaseModel]):
    return record_type(**{c.key: getattr(row, c.key) for c in row.__table__.columns})


class DatabaseStorage(Storage):
    name = "database"

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = make_engine(database_url)
        self.session_factory = make_sessionmaker(self.engine)

    async def startup(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with self.session_factory() as session:
            bed_count = await session.scalar(select(func.count(BedRow.id))) or 0
            if bed_count == 0:
                for bed in initial_beds():
                    session.add(BedRow(**bed.model_dump()))
                await session.commit()
                logger.info("Seeded %d beds", len(initial_beds()))

    async def shutdown(self) -> None:
        await self.engine.dispose()

    # Generic helpers

    async def _get(self, row_type, record_type, record_id: int):
        async with self.session_factory() as session:
            row = await session.get(row_type, record_id)
            return _to_record(row, record_type) if row is not None else None

    async def _scan(self, row_type, record_type, *criteria) -> list:
        query = select(row_type)
        if criteria:
            query = query.where(*criteria)
        async with self.session_factory() as session:
            result = await session.execute(query.order_by(row_type.id))
            return [_to_record(r, record_type) for r in result.scalars().all()]

    async def _insert(self, row_type, record_type, data: BaseModel):
        async with self.session_factory() as session:
            row = row_type(**data.model_dump())
            session.add(row)
            await session.commit()
            return _to_record(row, record_type)

    async def _update(self, row_type, record_type, record_id: int, changes: dict):
        async with self.session_factory() as session:
            row = await session.get(row_type, record_id)
            if row is None:
                return None
            current = _to_record(row, record_type)
            merged = record_type.model_validate({**current.model_dump(), **changes, "id": record_id})
            for key, value in merged.model_dump(exclude={"id"}).items():
                setattr(row, key, value)
            await session.commit()
            return merged

    async def _delete(self, row_type, record_id: int) -> bool:
        async with self.session_factory() as session:
            row = await session.get(row_type, record_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._get(UserRow, User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        matches = await self._scan(UserRow, User, UserRow.username == username)
        return matches[0] if matches else None

    async def get_users_by_role(self, role: str) -> list[User]:
        return await self._scan(UserRow, User, UserRow.role == role)

    async def create_user(self, data: UserCreate) -> User:
        return await self._insert(UserRow, User, data)

    # Appointments
    async def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return await self._get(AppointmentRow, Appointment, appointment_id)

    async def get_appointments_by_patient(self, patient_id: int) -> list[Appointment]:
        return await self._scan(AppointmentRow, Appointment, AppointmentRow.patient_id == patient_id)

    async def get_appointments_by_doctor(self, doctor_id: int) -> list[Appointment]:
        return await self._scan(AppointmentRow, Appointment, AppointmentRow.doctor_id == doctor_id)

    async def get_appointments_by_date(self, day: date) -> list[Appointment]:
        start, end = day_window(day)
        criteria = [AppointmentRow.appointment_date >= start]
        if end is not None:
            criteria.append(AppointmentRow.appointment_date < end)
        return await self._scan(AppointmentRow, Appointment, *criteria)

    async def create_appointment(self, data: AppointmentCreate) -> Appointment:
        return await self._insert(AppointmentRow, Appointment, data)

    async def update_appointment(self, appointment_id: int, changes: dict) -> Optional[Appointment]:
        return await self._update(AppointmentRow, Appointment, appointment_id, changes)

    async def delete_appointment(self, appointment_id: int) -> bool:
        return await self._delete(AppointmentRow, appointment_id)

    # Beds
    async def get_bed(self, bed_id: int) -> Optional[Bed]:
        return await self._get(BedRow, Bed, bed_id)

    async def get_bed_by_number(self, bed_number: str) -> Optional[Bed]:
        matches = await self._scan(BedRow, Bed, BedRow.bed_number == bed_number)
        return matches[0] if matches else None

    async def get_beds_by_ward(self, ward: str) -> list[Bed]:
        return await self._scan(BedRow, Bed, BedRow.ward == ward)

    async def get_beds_by_status(self, status: str) -> list[Bed]:
        return await self._scan(BedRow, Bed, BedRow.status == status)

    async def get_all_beds(self) -> list[Bed]:
        return await self._scan(BedRow, Bed)

    async def create_bed(self, data: BedCreate) -> Bed:
        return await self._insert(BedRow, Bed, data)

    async def update_bed(self, bed_id: int, changes: dict) -> Optional[Bed]:
        return await self._update(BedRow, Bed, bed_id, changes)

    # Prescriptions
    async def get_prescription(self, prescription_id: int) -> Optional[Prescription]:
        return await self._get(PrescriptionRow, Prescription, prescription_id)

    async def get_prescriptions_by_patient(self, patient_id: int) -> list[Prescription]:
        return await self._scan(PrescriptionRow, Prescription, PrescriptionRow.patient_id == patient_id)

    async def get_prescriptions_by_doctor(self, doctor_id: int) -> list[Prescription]:
        return await self._scan(PrescriptionRow, Prescription, PrescriptionRow.doctor_id == doctor_id)

    async def create_prescription(self, data: PrescriptionCreate) -> Prescription:
        return await self._insert(PrescriptionRow, Prescription, data)

    async def update_prescription(self, prescription_id: int, changes: dict) -> Optional[Prescription]:
        return await self._update(PrescriptionRow, Prescription, prescription_id, changes)

    # Doctor schedules
    async def get_doctor_schedule(self, schedule_id: int) -> Optional[DoctorSchedule]:
        return await self._get(DoctorScheduleRow, DoctorSchedule, schedule_id)

    async def get_doctor_schedules_by_doctor(self, doctor_id: int) -> list[DoctorSchedule]:
        return await self._scan(DoctorScheduleRow, DoctorSchedule, DoctorScheduleRow.doctor_id == doctor_id)

    async def create_doctor_schedule(self, data: DoctorScheduleCreate) -> DoctorSchedule:
        return await self._insert(DoctorScheduleRow, DoctorSchedule, data)

    async def update_doctor_schedule(self, schedule_id: int, changes: dict) -> Optional[DoctorSchedule]:
        return await self._update(DoctorScheduleRow, DoctorSchedule, schedule_id, changes)

    async def delete_doctor_schedule(self, schedule_id: int) -> bool:
        return await self._delete(DoctorScheduleRow, schedule_id)
