"""Folder layout of the assets kept for a collection."""

from linkshelf.core.config import Settings, get_settings


def collection_asset_folders(collection_id: int, settings: Settings | None = None) -> list[str]:
    """Return the archive and preview folders of a collection.

    Example:
        >>> collection_asset_folders(12)
        ['archives/12', 'archives/preview/12']
    """
    settings = settings or get_settings()
    return [
        f"{settings.archive_dir}/{collection_id}",
        f"{settings.preview_dir}/{collection_id}",
    ]
