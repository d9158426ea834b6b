from fastapi import APIRouter, Body, Depends
from hospitalcare import policy
from hospitalcare.auth import UserPrincipal, get_current_user, require_roles
from hospitalcare.exceptions import NotFound
from hospitalcare.schemas import Prescription, PrescriptionCreate, PrescriptionUpdate
from hospitalcare.storage import Storage, get_storage
from hospitalcare.validation import parse

router = APIRouter()


@router.get("", response_model=list[Prescription])
async def list_prescriptions(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await policy.visible_prescriptions(storage, current_user)


@router.get("/{prescription_id}", response_model=Prescription)
async def get_prescription(
    prescription_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    prescription = await storage.get_prescription(prescription_id)
    if not prescription:
        raise NotFound("Prescription not found")
    policy.check_prescription_view(current_user, prescription)
    return prescription


@router.post("", response_model=Prescription, status_code=201)
async def create_prescription(
    data: PrescriptionCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles("doctor")),
):
    policy.check_prescription_create(current_user, data.doctor_id)
    return await storage.create_prescription(data)


@router.put("/{prescription_id}", response_model=Prescription)
async def update_prescription(
    prescription_id: int,
    payload: dict = Body(...),
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles("doctor")),
):
    prescription = await storage.get_prescription(prescription_id)
    if not prescription:
        raise NotFound("Prescription not found")
    policy.check_prescription_change(current_user, prescription)

    changes = parse(PrescriptionUpdate, payload).changes()
    updated = await storage.update_prescription(prescription_id, changes)
    if not updated:
        raise NotFound("Prescription not found")
    return updated
