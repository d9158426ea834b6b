from sqlalchemy import Column, Integer, String, Text
from hospitalcare.database import Base


class UserRow(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False, index=True)
    password = Column(Text, nullable=False)  # werkzeug "method$salt$hash"
    email = Column(String(200), nullable=False)
    full_name = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False, index=True)  # "patient" | "doctor" | "nurse"
    specialization = Column(String(200))
    contact_number = Column(String(50))
    address = Column(Text)
