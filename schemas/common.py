import re
from datetime import datetime, timezone
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, StrictInt

DataT = TypeVar("DataT")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Largest value an INTEGER primary key can hold
MAX_ID = 2**63 - 1

# Foreign keys in request bodies: JSON integers only, booleans and numeric strings rejected
RecordId = Annotated[StrictInt, Field(gt=0, le=MAX_ID)]


class ApiResponse(BaseModel, Generic[DataT]):
    message: str
    status: bool = True
    data: Optional[DataT] = None


def reject_null(value):
    """Used by update schemas: a field may be omitted but not explicitly nulled."""
    if value is None:
        raise ValueError("may not be null")
    return value


def validate_email_format(value):
    if value is not None and not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format")
    return value


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise a timestamp to UTC. Naive values are taken to already be UTC."""
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
