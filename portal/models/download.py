"""Download center document model."""

from sqlalchemy import Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import func

from portal.database import Base


class Download(Base):
    __tablename__ = "downloads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_name = Column(Text, nullable=False)
    publisher = Column(Text, nullable=False)
    category = Column(String(20), nullable=False)  # peraturan/formulir/panduan/laporan/lainnya
    hits = Column(Integer, nullable=False, default=0, server_default="0")
    file_path = Column(Text, nullable=False)
    upload_date = Column(DateTime, server_default=func.now(), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_downloads_category", "category"),
    )
