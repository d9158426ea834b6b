"""
Load demo accounts (and optionally a weekday clinic timetable) into the database.
Run with: python -m scripts.seed_demo
Run with: python -m scripts.seed_demo --with-schedules
"""

import argparse
import asyncio
from hospitalcare.config import get_settings
from hospitalcare.main import DEMO_PASSWORD, seed_demo_users
from hospitalcare.schemas import DoctorScheduleCreate
from hospitalcare.storage.database import DatabaseStorage

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]


async def seed(with_schedules: bool = False):
    storage = DatabaseStorage(get_settings().database_url)
    await storage.startup()

    await seed_demo_users(storage)
    print(f"Demo users ready (password: {DEMO_PASSWORD})")

    if with_schedules:
        doctor = await storage.get_user_by_username("dr.smith")
        existing = await storage.get_doctor_schedules_by_doctor(doctor.id)
        if existing:
            print(f"dr.smith already has {len(existing)} schedule entries. Skipping.")
        else:
            for day in WEEKDAYS:
                await storage.create_doctor_schedule(DoctorScheduleCreate(
                    doctor_id=doctor.id, day=day, start_time="09:00", end_time="17:00", activity_type="clinic",
                ))
            print(f"Created {len(WEEKDAYS)} clinic entries for dr.smith.")

    await storage.shutdown()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo accounts into the HospitalCare database")
    parser.add_argument(
        "--with-schedules",
        action="store_true",
        help="Also create a Monday-Friday clinic timetable for the demo doctor",
    )
    args = parser.parse_args()

    asyncio.run(seed(with_schedules=args.with_schedules))
