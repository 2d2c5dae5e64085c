"""Static page content service layer. Pages are materialized on first write."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from portal.errors import ValidationError
from portal.models.static_content import StaticContent
from portal.schemas.static_content import StaticContentUpdate
from portal.utils.query import patch_fields, upsert_by_key

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    text = (key or "").strip()
    if not text:
        raise ValidationError("Key must not be empty", field="key")
    return text


def get_static_content_by_key(db: Session, key: str) -> Optional[StaticContent]:
    return db.query(StaticContent).filter(StaticContent.key == normalize_key(key)).first()


def get_all_static_content(db: Session) -> List[StaticContent]:
    return db.query(StaticContent).order_by(StaticContent.key.asc()).all()


def update_static_content(db: Session, key: str, data: StaticContentUpdate) -> StaticContent:
    content_key = normalize_key(key)
    payload = patch_fields(data, nullable=("image_path",))
    row = upsert_by_key(
        db,
        StaticContent,
        content_key,
        insert_values={
            "title": payload.get("title", ""),
            "content": payload.get("content", ""),
            "image_path": payload.get("image_path"),
        },
        update_values=payload,
    )
    logger.info("[static_content] saved key=%s fields=%s", content_key, sorted(payload))
    return row
