from fastapi import APIRouter, Body, Depends, Response
from hospitalcare import policy
from hospitalcare.auth import UserPrincipal, get_current_user, require_roles, STAFF_ROLES
from hospitalcare.exceptions import NotFound
from hospitalcare.schemas import DoctorSchedule, DoctorScheduleCreate, DoctorScheduleUpdate
from hospitalcare.storage import Storage, get_storage
from hospitalcare.validation import parse

router = APIRouter()


@router.get("", response_model=list[DoctorSchedule])
async def list_schedules(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await policy.visible_schedules(storage, current_user)


@router.get("/doctor/{doctor_id}", response_model=list[DoctorSchedule])
async def list_schedules_for_doctor(
    doctor_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await storage.get_doctor_schedules_by_doctor(doctor_id)


@router.post("", response_model=DoctorSchedule, status_code=201)
async def create_schedule(
    data: DoctorScheduleCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    policy.check_schedule_owner(current_user, data.doctor_id, "create")
    return await storage.create_doctor_schedule(data)


@router.put("/{schedule_id}", response_model=DoctorSchedule)
async def update_schedule(
    schedule_id: int,
    payload: dict = Body(...),
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    schedule = await storage.get_doctor_schedule(schedule_id)
    if not schedule:
        raise NotFound("Schedule not found")
    policy.check_schedule_owner(current_user, schedule.doctor_id, "update")

    changes = parse(DoctorScheduleUpdate, payload).changes()
    updated = await storage.update_doctor_schedule(schedule_id, changes)
    if not updated:
        raise NotFound("Schedule not found")
    return updated


@router.delete("/{schedule_id}", status_code=204)
async def delete_schedule(
    schedule_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    schedule = await storage.get_doctor_schedule(schedule_id)
    if not schedule:
        raise NotFound("Schedule not found")
    policy.check_schedule_owner(current_user, schedule.doctor_id, "delete")

    if not await storage.delete_doctor_schedule(schedule_id):
        raise NotFound("Schedule not found")
    return Response(status_code=204)
