"""Shared request/response building blocks for the Pydantic schemas.

Timestamps are kept as naive UTC in the store. Inputs carrying an offset are
converted on the way in, and outputs are tagged as UTC on the way out.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_naive_utc(value: datetime) -> datetime:
    # Naive inputs are taken as UTC already.
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_to_naive_utc)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Pagination(BaseModel):
    limit: Optional[int] = Field(default=None, gt=0)
    offset: Optional[int] = Field(default=None, ge=0)


class DeleteResult(BaseModel):
    success: bool


class HealthOut(BaseModel):
    status: str
    timestamp: datetime
