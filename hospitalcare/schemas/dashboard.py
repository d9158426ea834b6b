from typing import Optional
from hospitalcare.schemas.base import CamelModel


class AppointmentStats(CamelModel):
    total: int
    today: int


class PrescriptionStats(CamelModel):
    total: int
    active: int


class WardStats(CamelModel):
    total: int = 0
    available: int = 0


class BedStats(CamelModel):
    total: int
    available: int
    by_ward: dict[str, WardStats] = {}


class DashboardStats(CamelModel):
    appointments: AppointmentStats
    prescriptions: PrescriptionStats
    beds: Optional[BedStats] = None
