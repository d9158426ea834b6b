from fastapi import APIRouter, Depends
from hospitalcare import policy
from hospitalcare.auth import UserPrincipal, get_current_user, require_roles, STAFF_ROLES
from hospitalcare.exceptions import NotFound
from hospitalcare.schemas import User, UserResponse
from hospitalcare.storage import Storage, get_storage

router = APIRouter()


def _public(user: User) -> UserResponse:
    """Strip the password hash before a user leaves the server."""
    return UserResponse.model_validate(user.model_dump(exclude={"password"}))


@router.get("/doctors", response_model=list[UserResponse])
async def list_doctors(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    return [_public(u) for u in await storage.get_users_by_role("doctor")]


@router.get("/doctors/{doctor_id}", response_model=UserResponse)
async def get_doctor(
    doctor_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    user = await storage.get_user(doctor_id)
    if not user or user.role != "doctor":
        raise NotFound("Doctor not found")
    return _public(user)


@router.get("/patients", response_model=list[UserResponse])
async def list_patients(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(require_roles(*STAFF_ROLES)),
):
    return [_public(u) for u in await storage.get_users_by_role("patient")]


@router.get("/patients/{patient_id}", response_model=UserResponse)
async def get_patient(
    patient_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    policy.check_patient_profile_view(current_user, patient_id)
    user = await storage.get_user(patient_id)
    if not user or user.role != "patient":
        raise NotFound("Patient not found")
    return _public(user)
