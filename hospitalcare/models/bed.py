from sqlalchemy import Column, Integer, String
from hospitalcare.database import Base


class BedRow(Base):
    __tablename__ = "beds"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    bed_number = Column(String(20), nullable=False)
    ward = Column(String(20), nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True)
    patient_id = Column(Integer)  # null unless occupied
