"""
Role and ownership rules for each resource.

Role gates that depend only on the caller live in `auth.require_roles`.
The rules here also need the record being touched, or decide which slice
of the store a caller may list.
"""

import logging
from hospitalcare.auth import UserPrincipal
from hospitalcare.exceptions import Forbidden
from hospitalcare.schemas import Appointment, Prescription, DoctorSchedule
from hospitalcare.storage import Storage

logger = logging.getLogger(__name__)


def deny(current_user: UserPrincipal, message: str):
    logger.info("Denied %s (id=%s, role=%s): %s",
                current_user.username, current_user.id, current_user.role, message)
    raise Forbidden(message)


async def _for_every_doctor(storage: Storage, fetch) -> list:
    """Concatenate fetch(doctor_id) over all doctors, in store order."""
    records = []
    for doctor in await storage.get_users_by_role("doctor"):
        records.extend(await fetch(doctor.id))
    return records


# Appointments

async def visible_appointments(storage: Storage, current_user: UserPrincipal) -> list[Appointment]:
    if current_user.role == "patient":
        return await storage.get_appointments_by_patient(current_user.id)
    if current_user.role == "doctor":
        return await storage.get_appointments_by_doctor(current_user.id)
    # Nurses see every doctor's appointments
    return await _for_every_doctor(storage, storage.get_appointments_by_doctor)


def check_appointment_create(current_user: UserPrincipal, patient_id: int) -> None:
    if current_user.is_patient and patient_id != current_user.id:
        deny(current_user, "You can only create appointments for yourself")


def check_appointment_change(current_user: UserPrincipal, appointment: Appointment, action: str) -> None:
    if current_user.is_patient and appointment.patient_id != current_user.id:
        deny(current_user, f"You can only {action} your own appointments")


# Prescriptions

async def visible_prescriptions(storage: Storage, current_user: UserPrincipal) -> list[Prescription]:
    if current_user.role == "patient":
        return await storage.get_prescriptions_by_patient(current_user.id)
    if current_user.role == "doctor":
        return await storage.get_prescriptions_by_doctor(current_user.id)
    return await _for_every_doctor(storage, storage.get_prescriptions_by_doctor)


def check_prescription_view(current_user: UserPrincipal, prescription: Prescription) -> None:
    if current_user.is_patient and prescription.patient_id != current_user.id:
        deny(current_user, "You can only view your own prescriptions")


def check_prescription_create(current_user: UserPrincipal, doctor_id: int) -> None:
    if doctor_id != current_user.id:
        deny(current_user, "You can only create prescriptions as yourself")


def check_prescription_change(current_user: UserPrincipal, prescription: Prescription) -> None:
    # Ownership is judged on the stored record, not on the submitted payload
    if prescription.doctor_id != current_user.id:
        deny(current_user, "You can only modify your own prescriptions")


# Doctor schedules

async def visible_schedules(storage: Storage, current_user: UserPrincipal) -> list[DoctorSchedule]:
    if current_user.role == "doctor":
        return await storage.get_doctor_schedules_by_doctor(current_user.id)
    return await _for_every_doctor(storage, storage.get_doctor_schedules_by_doctor)


def check_schedule_owner(current_user: UserPrincipal, doctor_id: int, action: str) -> None:
    """Doctors act only on their own timetable; nurses act on anyone's."""
    if current_user.is_doctor and doctor_id != current_user.id:
        if action == "create":
            deny(current_user, "You can only create schedules for yourself")
        deny(current_user, f"You can only {action} your own schedules")


# Users

def check_patient_profile_view(current_user: UserPrincipal, patient_id: int) -> None:
    if not current_user.is_staff and current_user.id != patient_id:
        deny(current_user, "Forbidden")
