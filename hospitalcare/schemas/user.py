from typing import Literal, Optional
from pydantic import Field
from hospitalcare.schemas.base import CamelModel

Role = Literal["patient", "doctor", "nurse"]


class UserBase(CamelModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    role: Role
    specialization: Optional[str] = None  # doctors only
    contact_number: Optional[str] = None
    address: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class User(UserCreate):
    """Stored user record. `password` holds the werkzeug password hash."""
    id: int


class UserResponse(UserBase):
    id: int


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(UserResponse):
    token: str
