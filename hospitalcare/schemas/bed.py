from typing import Literal, Optional
from pydantic import Field
from hospitalcare.schemas.base import CamelModel, PartialModel

Ward = Literal["general", "icu", "pediatric", "maternity"]
BedStatus = Literal["available", "occupied", "reserved", "maintenance"]


class BedCreate(CamelModel):
    bed_number: str = Field(min_length=1)
    ward: Ward
    status: BedStatus
    patient_id: Optional[int] = None  # only meaningful when occupied


class BedUpdate(PartialModel):
    nullable_fields = frozenset({"patient_id"})

    bed_number: Optional[str] = None
    ward: Optional[Ward] = None
    status: Optional[BedStatus] = None
    patient_id: Optional[int] = None


class Bed(BedCreate):
    id: int
