from hospitalcare.models.user import UserRow
from hospitalcare.models.appointment import AppointmentRow
from hospitalcare.models.bed import BedRow
from hospitalcare.models.prescription import PrescriptionRow
from hospitalcare.models.schedule import DoctorScheduleRow

__all__ = ["UserRow", "AppointmentRow", "BedRow", "PrescriptionRow", "DoctorScheduleRow"]
