"""Agenda event model."""

from sqlalchemy import Column, DateTime, Index, Integer, Text
from sqlalchemy.sql import func

from portal.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_name = Column(Text, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    time = Column(Text, nullable=False)  # free text, e.g. "09:00 - 12:00 WIB"
    location = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    organizer = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_events_start_date", "start_date"),
    )
