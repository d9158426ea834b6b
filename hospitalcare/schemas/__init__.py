from hospitalcare.schemas.user import User, UserCreate, UserResponse, LoginRequest, LoginResponse
from hospitalcare.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from hospitalcare.schemas.bed import Bed, BedCreate, BedUpdate
from hospitalcare.schemas.prescription import Prescription, PrescriptionCreate, PrescriptionUpdate
from hospitalcare.schemas.schedule import DoctorSchedule, DoctorScheduleCreate, DoctorScheduleUpdate

__all__ = ["User", "UserCreate", "UserResponse", "LoginRequest", "LoginResponse",
           "Appointment", "AppointmentCreate", "AppointmentUpdate",
           "Bed", "BedCreate", "BedUpdate",
           "Prescription", "PrescriptionCreate", "PrescriptionUpdate",
           "DoctorSchedule", "DoctorScheduleCreate", "DoctorScheduleUpdate"]
