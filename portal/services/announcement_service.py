"""Announcement service layer. Public listing shows active rows only."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portal.models.announcement import Announcement
from portal.schemas.announcement import AnnouncementCreate, AnnouncementUpdate
from portal.utils.query import paginate, patch_fields

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def create_announcement(db: Session, data: AnnouncementCreate) -> Announcement:
    announcement = Announcement(**data.model_dump())
    db.add(announcement)
    db.commit()
    db.refresh(announcement)
    logger.info("[announcement] created id=%s status=%s", announcement.id, announcement.status)
    return announcement


def get_announcements(db: Session, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Announcement]:
    q = (
        db.query(Announcement)
        .filter(Announcement.status == True)  # noqa: E712
        .order_by(Announcement.publish_date.desc(), Announcement.id.desc())
    )
    return paginate(q, limit or DEFAULT_PAGE_SIZE, offset).all()


def get_all_announcements(db: Session, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Announcement]:
    q = db.query(Announcement).order_by(Announcement.created_at.desc(), Announcement.id.desc())
    return paginate(q, limit or DEFAULT_PAGE_SIZE, offset).all()


def get_announcement_by_id(db: Session, announcement_id: int) -> Optional[Announcement]:
    return db.query(Announcement).filter(Announcement.id == announcement_id).first()


def update_announcement(db: Session, announcement_id: int, data: AnnouncementUpdate) -> Optional[Announcement]:
    announcement = get_announcement_by_id(db, announcement_id)
    if not announcement:
        return None
    payload = patch_fields(data, nullable=("attachment_file",))
    for key, value in payload.items():
        setattr(announcement, key, value)
    announcement.updated_at = func.now()
    db.commit()
    db.refresh(announcement)
    logger.info("[announcement] updated id=%s fields=%s", announcement_id, sorted(payload))
    return announcement


def delete_announcement(db: Session, announcement_id: int) -> bool:
    deleted = (
        db.query(Announcement)
        .filter(Announcement.id == announcement_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("[announcement] deleted id=%s", announcement_id)
    return bool(deleted)
