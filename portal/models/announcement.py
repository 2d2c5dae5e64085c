"""Announcement model. ``status`` True means active (publicly listed)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text
from sqlalchemy.sql import func

from portal.database import Base


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    publish_date = Column(DateTime, nullable=False)
    attachment_file = Column(Text, nullable=True)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
