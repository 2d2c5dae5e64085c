"""Download center API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.common import DeleteResult
from portal.schemas.download import (
    DownloadCategory,
    DownloadCreate,
    DownloadFilter,
    DownloadOut,
    DownloadUpdate,
)
from portal.services import download_service

router = APIRouter(prefix="/api/downloads", tags=["downloads"])


@router.post("", response_model=DownloadOut, operation_id="createDownload")
def create_download(data: DownloadCreate, db: Session = Depends(get_db)):
    return download_service.create_download(db, data)


@router.get("", response_model=List[DownloadOut], operation_id="getDownloads")
def get_downloads(
    category: Optional[DownloadCategory] = None,
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    filters = DownloadFilter(category=category, limit=limit, offset=offset)
    return download_service.get_downloads(db, filters)


@router.get("/{download_id}", response_model=Optional[DownloadOut], operation_id="getDownloadById")
def get_download_by_id(download_id: int, db: Session = Depends(get_db)):
    return download_service.get_download_by_id(db, download_id)


@router.put("/{download_id}", response_model=Optional[DownloadOut], operation_id="updateDownload")
def update_download(download_id: int, data: DownloadUpdate, db: Session = Depends(get_db)):
    return download_service.update_download(db, download_id, data)


@router.delete("/{download_id}", response_model=DeleteResult, operation_id="deleteDownload")
def delete_download(download_id: int, db: Session = Depends(get_db)):
    return DeleteResult(success=download_service.delete_download(db, download_id))
