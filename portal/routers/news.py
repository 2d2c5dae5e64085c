"""News API router. Validates requests and delegates to the news service."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.common import DeleteResult
from portal.schemas.news import NewsCategory, NewsCreate, NewsFilter, NewsOut, NewsUpdate
from portal.services import news_service

router = APIRouter(prefix="/api/news", tags=["news"])


@router.post("", response_model=NewsOut, operation_id="createNews")
def create_news(data: NewsCreate, db: Session = Depends(get_db)):
    return news_service.create_news(db, data)


@router.get("", response_model=List[NewsOut], operation_id="getNews")
def get_news(
    category: Optional[NewsCategory] = None,
    status: Optional[bool] = None,
    limit: Optional[int] = Query(default=None, gt=0),
    offset: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
):
    filters = NewsFilter(category=category, status=status, limit=limit, offset=offset)
    return news_service.get_news(db, filters)


@router.get("/popular", response_model=List[NewsOut], operation_id="getPopularNews")
def get_popular_news(
    limit: int = Query(default=news_service.HIGHLIGHT_LIMIT, gt=0),
    db: Session = Depends(get_db),
):
    return news_service.get_popular_news(db, limit)


@router.get("/latest", response_model=List[NewsOut], operation_id="getLatestNews")
def get_latest_news(
    limit: int = Query(default=news_service.HIGHLIGHT_LIMIT, gt=0),
    db: Session = Depends(get_db),
):
    return news_service.get_latest_news(db, limit)


@router.get("/{news_id}", response_model=Optional[NewsOut], operation_id="getNewsById")
def get_news_by_id(news_id: int, db: Session = Depends(get_db)):
    return news_service.get_news_by_id(db, news_id)


@router.put("/{news_id}", response_model=Optional[NewsOut], operation_id="updateNews")
def update_news(news_id: int, data: NewsUpdate, db: Session = Depends(get_db)):
    return news_service.update_news(db, news_id, data)


@router.delete("/{news_id}", response_model=DeleteResult, operation_id="deleteNews")
def delete_news(news_id: int, db: Session = Depends(get_db)):
    return DeleteResult(success=news_service.delete_news(db, news_id))
