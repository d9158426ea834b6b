from datetime import date, datetime
from typing import Optional
from fastapi import APIRouter, Body, Depends, Response
from hospitalcare import policy
from hospitalcare.auth import UserPrincipal, get_current_user
from hospitalcare.exceptions import NotFound, ValidationFailed
from hospitalcare.schemas import Appointment, AppointmentCreate, AppointmentUpdate
from hospitalcare.schemas.base import as_utc
from hospitalcare.storage import Storage, get_storage
from hospitalcare.validation import parse

router = APIRouter()


def parse_day(value: str) -> Optional[date]:
    """Accept YYYY-MM-DD or a full ISO-8601 timestamp (taken to its UTC day)."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return as_utc(datetime.fromisoformat(value)).date()
    except (ValueError, OverflowError):
        return None


@router.get("", response_model=list[Appointment])
async def list_appointments(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await policy.visible_appointments(storage, current_user)


@router.get("/date/{day}", response_model=list[Appointment])
async def list_appointments_on_date(
    day: str,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    target = parse_day(day)
    if target is None:
        raise ValidationFailed("Invalid date format")
    return await storage.get_appointments_by_date(target)


@router.post("", response_model=Appointment, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    policy.check_appointment_create(current_user, data.patient_id)
    return await storage.create_appointment(data)


@router.put("/{appointment_id}", response_model=Appointment)
async def update_appointment(
    appointment_id: int,
    payload: dict = Body(...),
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    appointment = await storage.get_appointment(appointment_id)
    if not appointment:
        raise NotFound("Appointment not found")
    policy.check_appointment_change(current_user, appointment, "modify")

    changes = parse(AppointmentUpdate, payload).changes()
    updated = await storage.update_appointment(appointment_id, changes)
    if not updated:
        raise NotFound("Appointment not found")
    return updated


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    appointment = await storage.get_appointment(appointment_id)
    if not appointment:
        raise NotFound("Appointment not found")
    policy.check_appointment_change(current_user, appointment, "delete")

    if not await storage.delete_appointment(appointment_id):
        raise NotFound("Appointment not found")
    return Response(status_code=204)
