"""Static page content API router (visi_misi, struktur_organisasi, ...)."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.static_content import StaticContentOut, StaticContentUpdate
from portal.services import static_content_service

router = APIRouter(prefix="/api/static-content", tags=["static-content"])


@router.get("", response_model=List[StaticContentOut], operation_id="getAllStaticContent")
def get_all_static_content(db: Session = Depends(get_db)):
    return static_content_service.get_all_static_content(db)


@router.get("/{key}", response_model=Optional[StaticContentOut], operation_id="getStaticContentByKey")
def get_static_content_by_key(key: str, db: Session = Depends(get_db)):
    return static_content_service.get_static_content_by_key(db, key)


@router.put("/{key}", response_model=StaticContentOut, operation_id="updateStaticContent")
def update_static_content(key: str, data: StaticContentUpdate, db: Session = Depends(get_db)):
    return static_content_service.update_static_content(db, key, data)
