from fastapi import APIRouter, Body, Depends
from hospitalcare.auth import UserPrincipal, get_current_user, require_roles, STAFF_ROLES
from hospitalcare.exceptions import NotFound
from hospitalcare.schemas import Bed, BedCreate, BedUpdate
from hospitalcare.storage import Storage, get_storage
from hospitalcare.validation import parse

router = APIRouter()


@router.get("", response_model=list[Bed])
async def list_beds(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await storage.get_all_beds()


@router.get("/ward/{ward}", response_model=list[Bed])
async def list_beds_in_ward(
    ward: str,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await storage.get_beds_by_ward(ward)


@router.get("/status/{status}", response_model=list[Bed])
async def list_beds_with_status(
    status: str,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return await storage.get_beds_by_status(status)


@router.post("", response_model=Bed, status_code=201)
async def create_bed(
    data: BedCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    return await storage.create_bed(data)


@router.put("/{bed_id}", response_model=Bed)
async def update_bed(
    bed_id: int,
    payload: dict = Body(...),
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    if not await storage.get_bed(bed_id):
        raise NotFound("Bed not found")

    updated = await storage.update_bed(bed_id, parse(BedUpdate, payload).changes())
    if not updated:
        raise NotFound("Bed not found")
    return updated
