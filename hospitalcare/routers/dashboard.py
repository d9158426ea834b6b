from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from hospitalcare import policy
from hospitalcare.auth import UserPrincipal, get_current_user
from hospitalcare.schemas.base import as_utc
from hospitalcare.schemas.dashboard import (
    AppointmentStats, BedStats, DashboardStats, PrescriptionStats, WardStats,
)
from hospitalcare.storage import Storage, get_storage

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    storage: Storage = Depends(get_storage),
    current_user: UserPrincipal = Depends(get_current_user),
):
    today = datetime.now(timezone.utc).date()
    appointments = await policy.visible_appointments(storage, current_user)
    prescriptions = await policy.visible_prescriptions(storage, current_user)

    beds = None
    if current_user.is_staff:
        all_beds = await storage.get_all_beds()
        by_ward: dict[str, WardStats] = {}
        for bed in all_beds:
            ward = by_ward.setdefault(bed.ward, WardStats())
            ward.total += 1
            if bed.status == "available":
                ward.available += 1
        beds = BedStats(
            total=len(all_beds),
            available=sum(1 for b in all_beds if b.status == "available"),
            by_ward=by_ward,
        )

    return DashboardStats(
        appointments=AppointmentStats(
            total=len(appointments),
            today=sum(1 for a in appointments if as_utc(a.appointment_date).date() == today),
        ),
        prescriptions=PrescriptionStats(
            total=len(prescriptions),
            active=sum(1 for p in prescriptions if p.status == "active"),
        ),
        beds=beds,
    )
