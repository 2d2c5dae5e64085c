"""Agenda events API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.common import DeleteResult
from portal.schemas.event import EventCreate, EventOut, EventUpdate
from portal.services import event_service

router = APIRouter(prefix="/api/events", tags=["events"])


@router.post("", response_model=EventOut, operation_id="createEvent")
def create_event(data: EventCreate, db: Session = Depends(get_db)):
    return event_service.create_event(db, data)


@router.get("", response_model=List[EventOut], operation_id="getEvents")
def get_events(
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    return event_service.get_events(db, limit, offset)


@router.get("/upcoming", response_model=List[EventOut], operation_id="getUpcomingEvents")
def get_upcoming_events(
    limit: int = Query(default=event_service.UPCOMING_LIMIT, gt=0),
    db: Session = Depends(get_db),
):
    return event_service.get_upcoming_events(db, limit)


@router.get("/{event_id}", response_model=Optional[EventOut], operation_id="getEventById")
def get_event_by_id(event_id: int, db: Session = Depends(get_db)):
    return event_service.get_event_by_id(db, event_id)


@router.put("/{event_id}", response_model=Optional[EventOut], operation_id="updateEvent")
def update_event(event_id: int, data: EventUpdate, db: Session = Depends(get_db)):
    return event_service.update_event(db, event_id, data)


@router.delete("/{event_id}", response_model=DeleteResult, operation_id="deleteEvent")
def delete_event(event_id: int, db: Session = Depends(get_db)):
    return DeleteResult(success=event_service.delete_event(db, event_id))
