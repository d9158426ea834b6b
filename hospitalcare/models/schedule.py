from sqlalchemy import Column, Integer, String
from hospitalcare.database import Base


class DoctorScheduleRow(Base):
    __tablename__ = "doctor_schedules"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    day = Column(String(10), nullable=False)  # "monday" .. "sunday"
    start_time = Column(String(5), nullable=False)  # "09:00"
    end_time = Column(String(5), nullable=False)  # "17:00"
    activity_type = Column(String(50), nullable=False)
