"""News request/response contracts."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from portal.schemas.common import NonEmptyStr, Pagination, Timestamp, UtcDatetime

NEWS_CATEGORIES = ("umum", "kepegawaian", "pengembangan", "pengumuman", "kegiatan")
NewsCategory = Literal["umum", "kepegawaian", "pengembangan", "pengumuman", "kegiatan"]


class NewsCreate(BaseModel):
    title: NonEmptyStr
    content: NonEmptyStr
    publish_date: Timestamp
    author: NonEmptyStr
    category: NewsCategory
    featured_image: Optional[str] = None
    status: bool = False


class NewsUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    publish_date: Optional[Timestamp] = None
    author: Optional[str] = Field(default=None, min_length=1)
    category: Optional[NewsCategory] = None
    featured_image: Optional[str] = None
    status: Optional[bool] = None


class NewsFilter(Pagination):
    category: Optional[NewsCategory] = None
    status: Optional[bool] = None


class NewsOut(BaseModel):
    id: int
    title: str
    content: str
    publish_date: UtcDatetime
    author: str
    category: NewsCategory
    featured_image: Optional[str] = None
    status: bool
    view_count: int = Field(ge=0)
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}
