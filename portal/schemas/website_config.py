"""Website configuration request/response contracts."""

from pydantic import BaseModel

from portal.schemas.common import UtcDatetime


class WebsiteConfigUpdate(BaseModel):
    value: str


class WebsiteConfigOut(BaseModel):
    id: int
    key: str
    value: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
