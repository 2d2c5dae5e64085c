"""News article model. ``status`` False means draft, True means published."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import func

from portal.database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    publish_date = Column(DateTime, nullable=False)
    author = Column(Text, nullable=False)
    category = Column(String(20), nullable=False)  # umum/kepegawaian/pengembangan/pengumuman/kegiatan
    featured_image = Column(Text, nullable=True)
    status = Column(Boolean, nullable=False, default=False)
    view_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_news_publish_date", "publish_date"),
        Index("idx_news_view_count", "view_count"),
    )
