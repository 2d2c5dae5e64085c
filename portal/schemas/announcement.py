"""Announcement request/response contracts."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.schemas.common import NonEmptyStr, Timestamp, UtcDatetime


class AnnouncementCreate(BaseModel):
    title: NonEmptyStr
    description: NonEmptyStr
    publish_date: Timestamp
    attachment_file: Optional[str] = None
    status: bool = True


class AnnouncementUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    publish_date: Optional[Timestamp] = None
    attachment_file: Optional[str] = None
    status: Optional[bool] = None


class AnnouncementOut(BaseModel):
    id: int
    title: str
    description: str
    publish_date: UtcDatetime
    attachment_file: Optional[str] = None
    status: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
