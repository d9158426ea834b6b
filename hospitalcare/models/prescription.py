from sqlalchemy import Column, Integer, String, Text, DateTime
from hospitalcare.database import Base


class PrescriptionRow(Base):
    __tablename__ = "prescriptions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, nullable=False, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    prescription_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False)
    notes = Column(Text)
    file_data = Column(Text)  # base64 encoded PDF
    file_name = Column(String(255))
