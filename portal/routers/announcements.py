"""Announcements API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.announcement import AnnouncementCreate, AnnouncementOut, AnnouncementUpdate
from portal.schemas.common import DeleteResult
from portal.services import announcement_service

router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.post("", response_model=AnnouncementOut, operation_id="createAnnouncement")
def create_announcement(data: AnnouncementCreate, db: Session = Depends(get_db)):
    return announcement_service.create_announcement(db, data)


@router.get("", response_model=List[AnnouncementOut], operation_id="getAnnouncements")
def get_announcements(
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    return announcement_service.get_announcements(db, limit, offset)


@router.get("/all", response_model=List[AnnouncementOut], operation_id="getAllAnnouncements")
def get_all_announcements(
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    return announcement_service.get_all_announcements(db, limit, offset)


@router.get("/{announcement_id}", response_model=Optional[AnnouncementOut], operation_id="getAnnouncementById")
def get_announcement_by_id(announcement_id: int, db: Session = Depends(get_db)):
    return announcement_service.get_announcement_by_id(db, announcement_id)


@router.put("/{announcement_id}", response_model=Optional[AnnouncementOut], operation_id="updateAnnouncement")
def update_announcement(announcement_id: int, data: AnnouncementUpdate, db: Session = Depends(get_db)):
    return announcement_service.update_announcement(db, announcement_id, data)


@router.delete("/{announcement_id}", response_model=DeleteResult, operation_id="deleteAnnouncement")
def delete_announcement(announcement_id: int, db: Session = Depends(get_db)):
    return DeleteResult(success=announcement_service.delete_announcement(db, announcement_id))
