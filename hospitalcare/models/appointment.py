from sqlalchemy import Column, Integer, String, Text, DateTime
from hospitalcare.database import Base


class AppointmentRow(Base):
    __tablename__ = "appointments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Foreign keys are informational only; nothing checks they name a user
    patient_id = Column(Integer, nullable=False, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    appointment_date = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutes
    status = Column(String(20), nullable=False)
    type = Column(String(50), nullable=False)
    notes = Column(Text)
