"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.config import settings
from portal.database import Base, engine
from portal.errors import register_exception_handlers
import portal.models  # noqa: F401 - registers models on the metadata
from portal.routers import (
    announcements, auth, downloads, events, news, static_content, users, website_config,
)
from portal.schemas.common import HealthOut

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Agency Portal API",
    description="Content API for the agency website: news, announcements, downloads, agenda and site settings",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register all routers
app.include_router(auth.router)
app.include_router(news.router)
app.include_router(announcements.router)
app.include_router(downloads.router)
app.include_router(events.router)
app.include_router(static_content.router)
app.include_router(website_config.router)
app.include_router(users.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health", response_model=HealthOut, operation_id="healthcheck")
def health_check():
    return HealthOut(status="ok", timestamp=datetime.now(timezone.utc))
