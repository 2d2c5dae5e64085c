"""News service layer. Encapsulates the news queries and the view counter."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from portal.models.news import News
from portal.schemas.news import NewsCreate, NewsFilter, NewsOut, NewsUpdate
from portal.utils.query import paginate, patch_fields

logger = logging.getLogger(__name__)

HIGHLIGHT_LIMIT = 5


def create_news(db: Session, data: NewsCreate) -> News:
    news = News(**data.model_dump(), view_count=0)
    db.add(news)
    db.commit()
    db.refresh(news)
    logger.info("[news] created id=%s status=%s", news.id, news.status)
    return news


def get_news(db: Session, filters: Optional[NewsFilter] = None) -> List[News]:
    filters = filters or NewsFilter()
    q = db.query(News)
    if filters.category is not None:
        q = q.filter(News.category == filters.category)
    if filters.status is not None:
        q = q.filter(News.status == filters.status)
    q = q.order_by(News.publish_date.desc(), News.id.desc())
    return paginate(q, filters.limit, filters.offset).all()


def get_news_by_id(db: Session, news_id: int) -> Optional[NewsOut]:
    """Return the article with its view counter already bumped by one.

    The increment is one ``UPDATE`` statement; the row read that follows sits
    in the same transaction, so the returned count is this call's own value.
    """
    updated = (
        db.query(News)
        .filter(News.id == news_id)
        .update({News.view_count: News.view_count + 1}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        return None
    news = db.query(News).filter(News.id == news_id).populate_existing().one()
    result = NewsOut.model_validate(news)
    db.commit()
    return result


def get_popular_news(db: Session, limit: int = HIGHLIGHT_LIMIT) -> List[News]:
    return (
        db.query(News)
        .order_by(News.view_count.desc(), News.id.asc())
        .limit(limit)
        .all()
    )


def get_latest_news(db: Session, limit: int = HIGHLIGHT_LIMIT) -> List[News]:
    return (
        db.query(News)
        .filter(News.status == True)  # noqa: E712
        .order_by(News.publish_date.desc(), News.id.desc())
        .limit(limit)
        .all()
    )


def update_news(db: Session, news_id: int, data: NewsUpdate) -> Optional[News]:
    news = db.query(News).filter(News.id == news_id).first()
    if not news:
        return None
    payload = patch_fields(data, nullable=("featured_image",))
    for key, value in payload.items():
        setattr(news, key, value)
    # An empty patch still counts as a touch of an existing row.
    news.updated_at = func.now()
    db.commit()
    db.refresh(news)
    logger.info("[news] updated id=%s fields=%s", news_id, sorted(payload))
    return news


def delete_news(db: Session, news_id: int) -> bool:
    deleted = db.query(News).filter(News.id == news_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("[news] deleted id=%s", news_id)
    return bool(deleted)
