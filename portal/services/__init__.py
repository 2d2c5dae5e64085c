"""Service (repository) layer package initialization."""

from portal.services import (
    announcement_service,
    auth_service,
    download_service,
    event_service,
    news_service,
    static_content_service,
    user_service,
    website_config_service,
)
