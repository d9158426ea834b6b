from datetime import datetime, timezone
from typing import ClassVar
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted to UTC.

    Raises ValueError when the UTC instant falls outside year 1..9999, so
    pydantic validators report it as an ordinary validation error.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        raise ValueError("datetime is out of range once converted to UTC")


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON in camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PartialModel(CamelModel):
    """Update payload: only fields the client actually sent are merged."""

    # Fields that may be explicitly cleared with null
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self.nullable_fields
        }
