"""Agenda event request/response contracts."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.schemas.common import NonEmptyStr, Timestamp, UtcDatetime


class EventCreate(BaseModel):
    event_name: NonEmptyStr
    start_date: Timestamp
    end_date: Timestamp
    time: NonEmptyStr
    location: NonEmptyStr
    description: NonEmptyStr
    organizer: NonEmptyStr


class EventUpdate(BaseModel):
    event_name: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None
    time: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    organizer: Optional[str] = Field(default=None, min_length=1)


class EventOut(BaseModel):
    id: int
    event_name: str
    start_date: UtcDatetime
    end_date: UtcDatetime
    time: str
    location: str
    description: str
    organizer: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
