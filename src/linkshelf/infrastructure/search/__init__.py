"""Full-text search index clients."""

from linkshelf.core.config import Settings, get_settings
from linkshelf.infrastructure.search.base import SearchIndex
from linkshelf.infrastructure.search.meilisearch_index import MeilisearchIndex


def get_search_index(settings: Settings | None = None) -> SearchIndex | None:
    """Build the configured search index, or None when search is disabled."""
    settings = settings or get_settings()
    if not settings.search_enabled:
        return None
    return MeilisearchIndex(
        base_url=settings.search_url,
        api_key=settings.search_api_key,
        index_name=settings.search_index,
        timeout=settings.search_timeout_seconds,
    )


__all__ = ["MeilisearchIndex", "SearchIndex", "get_search_index"]
