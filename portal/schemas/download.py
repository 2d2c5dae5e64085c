"""Download center request/response contracts."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from portal.schemas.common import NonEmptyStr, Pagination, UtcDatetime

DOWNLOAD_CATEGORIES = ("peraturan", "formulir", "panduan", "laporan", "lainnya")
DownloadCategory = Literal["peraturan", "formulir", "panduan", "laporan", "lainnya"]


class DownloadCreate(BaseModel):
    document_name: NonEmptyStr
    publisher: NonEmptyStr
    category: DownloadCategory
    file_path: NonEmptyStr
    description: NonEmptyStr


class DownloadUpdate(BaseModel):
    document_name: Optional[str] = Field(default=None, min_length=1)
    publisher: Optional[str] = Field(default=None, min_length=1)
    category: Optional[DownloadCategory] = None
    file_path: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)


class DownloadFilter(Pagination):
    category: Optional[DownloadCategory] = None


class DownloadOut(BaseModel):
    id: int
    document_name: str
    publisher: str
    category: DownloadCategory
    hits: int = Field(ge=0)
    file_path: str
    upload_date: UtcDatetime
    description: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
