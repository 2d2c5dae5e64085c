"""Keyed static page content (visi_misi, struktur_organisasi, ...)."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from portal.database import Base


class StaticContent(Base):
    __tablename__ = "static_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(100), unique=True, nullable=False)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    image_path = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
