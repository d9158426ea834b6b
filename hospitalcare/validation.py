from typing import TypeVar
from pydantic import BaseModel, ValidationError
from hospitalcare.exceptions import ValidationFailed

M = TypeVar("M", bound=BaseModel)

# Leading loc segments FastAPI adds for request validation errors
_REQUEST_PARTS = {"body", "path", "query", "header", "cookie"}


def format_errors(errors) -> str:
    """Turn pydantic's structured errors into one readable line."""
    parts = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        field = ".".join(str(p) for p in loc)
        message = error.get("msg", "Invalid value")
        parts.append(f'{message} at "{field}"' if field else message)
    return "Validation error: " + "; ".join(parts)


def parse(model: type[M], payload) -> M:
    """Validate an untrusted payload into `model`, raising ValidationFailed."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailed(format_errors(e.errors()))
