"""Website configuration service layer. Settings are keyed and upserted."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from portal.models.website_config import WebsiteConfig
from portal.schemas.website_config import WebsiteConfigUpdate
from portal.services.static_content_service import normalize_key
from portal.utils.query import upsert_by_key

logger = logging.getLogger(__name__)


def get_website_config_by_key(db: Session, key: str) -> Optional[WebsiteConfig]:
    return db.query(WebsiteConfig).filter(WebsiteConfig.key == normalize_key(key)).first()


def get_all_website_config(db: Session) -> List[WebsiteConfig]:
    return db.query(WebsiteConfig).order_by(WebsiteConfig.key.asc()).all()


def update_website_config(db: Session, key: str, data: WebsiteConfigUpdate) -> WebsiteConfig:
    config_key = normalize_key(key)
    row = upsert_by_key(
        db,
        WebsiteConfig,
        config_key,
        insert_values={"value": data.value},
        update_values={"value": data.value},
    )
    logger.info("[website_config] saved key=%s", config_key)
    return row
