"""Website configuration API router (header_logo, footer_content, ...)."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.website_config import WebsiteConfigOut, WebsiteConfigUpdate
from portal.services import website_config_service

router = APIRouter(prefix="/api/website-config", tags=["website-config"])


@router.get("", response_model=List[WebsiteConfigOut], operation_id="getAllWebsiteConfig")
def get_all_website_config(db: Session = Depends(get_db)):
    return website_config_service.get_all_website_config(db)


@router.get("/{key}", response_model=Optional[WebsiteConfigOut], operation_id="getWebsiteConfigByKey")
def get_website_config_by_key(key: str, db: Session = Depends(get_db)):
    return website_config_service.get_website_config_by_key(db, key)


@router.put("/{key}", response_model=WebsiteConfigOut, operation_id="updateWebsiteConfig")
def update_website_config(key: str, data: WebsiteConfigUpdate, db: Session = Depends(get_db)):
    return website_config_service.update_website_config(db, key, data)
