import logging
from fastapi import APIRouter, Depends, Response
from hospitalcare.auth import (
    UserPrincipal, create_token, get_current_user, get_settings_dep, hash_password, verify_password,
)
from hospitalcare.config import Settings
from hospitalcare.exceptions import NotFound, Unauthorized, ValidationFailed
from hospitalcare.schemas import LoginRequest, LoginResponse, UserCreate, UserResponse
from hospitalcare.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.token_expire_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    data: UserCreate,
    response: Response,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings_dep),
):
    if await storage.get_user_by_username(data.username):
        raise ValidationFailed("Username already exists")

    user = await storage.create_user(data.model_copy(update={"password": hash_password(data.password)}))
    _set_session(response, create_token(user, settings), settings)
    logger.info("Registered %s as %s (id=%s)", user.username, user.role, user.id)
    return UserResponse.model_validate(user.model_dump(exclude={"password"}))


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings_dep),
):
    user = await storage.get_user_by_username(body.username)
    if not user or not verify_password(body.password, user.password):
        logger.info("Failed login for %r", body.username)
        raise Unauthorized("Invalid username or password")

    token = create_token(user, settings)
    _set_session(response, token, settings)
    return LoginResponse(**user.model_dump(exclude={"password"}), token=token)


@router.post("/logout")
async def logout(response: Response, settings: Settings = Depends(get_settings_dep)):
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
async def current_user_profile(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    user = await storage.get_user(current_user.id)
    if not user:
        raise NotFound("User not found")
    return UserResponse.model_validate(user.model_dump(exclude={"password"}))
