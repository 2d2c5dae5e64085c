"""Agenda event service layer."""

import logging
from datetime import date, datetime, time, timezone
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portal.errors import ConstraintError
from portal.models.event import Event
from portal.schemas.event import EventCreate, EventUpdate
from portal.utils.query import paginate, patch_fields

logger = logging.getLogger(__name__)

UPCOMING_LIMIT = 5


def _validate_range(start_date: datetime, end_date: datetime):
    if end_date < start_date:
        raise ConstraintError("End date must not be before start date", field="end_date")


def start_of_today() -> datetime:
    """Midnight of the server's local day, as naive UTC to match stored dates."""
    local_midnight = datetime.combine(date.today(), time.min).astimezone()
    return local_midnight.astimezone(timezone.utc).replace(tzinfo=None)


def create_event(db: Session, data: EventCreate) -> Event:
    _validate_range(data.start_date, data.end_date)
    event = Event(**data.model_dump())
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("[event] created id=%s start=%s", event.id, event.start_date.isoformat())
    return event


def get_events(db: Session, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Event]:
    q = db.query(Event).order_by(Event.start_date.asc(), Event.id.asc())
    return paginate(q, limit, offset).all()


def get_upcoming_events(db: Session, limit: int = UPCOMING_LIMIT) -> List[Event]:
    return (
        db.query(Event)
        .filter(Event.start_date >= start_of_today())
        .order_by(Event.start_date.asc(), Event.id.asc())
        .limit(limit)
        .all()
    )


def get_event_by_id(db: Session, event_id: int) -> Optional[Event]:
    return db.query(Event).filter(Event.id == event_id).first()


def update_event(db: Session, event_id: int, data: EventUpdate) -> Optional[Event]:
    event = get_event_by_id(db, event_id)
    if not event:
        return None
    payload = patch_fields(data)
    _validate_range(
        payload.get("start_date", event.start_date),
        payload.get("end_date", event.end_date),
    )
    for key, value in payload.items():
        setattr(event, key, value)
    event.updated_at = func.now()
    db.commit()
    db.refresh(event)
    logger.info("[event] updated id=%s fields=%s", event_id, sorted(payload))
    return event


def delete_event(db: Session, event_id: int) -> bool:
    deleted = db.query(Event).filter(Event.id == event_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("[event] deleted id=%s", event_id)
    return bool(deleted)
