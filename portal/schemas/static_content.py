"""Static page content request/response contracts."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.schemas.common import UtcDatetime


class StaticContentUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    image_path: Optional[str] = None


class StaticContentOut(BaseModel):
    id: int
    key: str
    title: str
    content: str
    image_path: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
