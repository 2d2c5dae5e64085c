"""Download center service layer. Reading a document by id counts a hit."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portal.models.download import Download
from portal.schemas.download import DownloadCreate, DownloadFilter, DownloadOut, DownloadUpdate
from portal.utils.query import paginate, patch_fields

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


def create_download(db: Session, data: DownloadCreate) -> Download:
    download = Download(**data.model_dump(), hits=0)
    db.add(download)
    db.commit()
    db.refresh(download)
    logger.info("[download] created id=%s category=%s", download.id, download.category)
    return download


def get_downloads(db: Session, filters: Optional[DownloadFilter] = None) -> List[Download]:
    filters = filters or DownloadFilter()
    q = db.query(Download)
    if filters.category is not None:
        q = q.filter(Download.category == filters.category)
    q = q.order_by(Download.upload_date.desc(), Download.id.desc())
    return paginate(q, filters.limit or DEFAULT_PAGE_SIZE, filters.offset).all()


def get_download_by_id(db: Session, download_id: int) -> Optional[DownloadOut]:
    updated = (
        db.query(Download)
        .filter(Download.id == download_id)
        .update({Download.hits: Download.hits + 1}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        return None
    download = db.query(Download).filter(Download.id == download_id).populate_existing().one()
    result = DownloadOut.model_validate(download)
    db.commit()
    return result


def update_download(db: Session, download_id: int, data: DownloadUpdate) -> Optional[Download]:
    download = db.query(Download).filter(Download.id == download_id).first()
    if not download:
        return None
    payload = patch_fields(data)
    for key, value in payload.items():
        setattr(download, key, value)
    download.updated_at = func.now()
    db.commit()
    db.refresh(download)
    logger.info("[download] updated id=%s fields=%s", download_id, sorted(payload))
    return download


def delete_download(db: Session, download_id: int) -> bool:
    deleted = db.query(Download).filter(Download.id == download_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("[download] deleted id=%s", download_id)
    return bool(deleted)
