"""SQLAlchemy model package initialization."""

from portal.models.news import News
from portal.models.announcement import Announcement
from portal.models.download import Download
from portal.models.event import Event
from portal.models.static_content import StaticContent
from portal.models.website_config import WebsiteConfig
from portal.models.user import User

__all__ = [
    "News",
    "Announcement",
    "Download",
    "Event",
    "StaticContent",
    "WebsiteConfig",
    "User",
]
