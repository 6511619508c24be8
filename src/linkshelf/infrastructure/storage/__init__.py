"""Asset stores for archived collection files."""

from linkshelf.core.config import Settings, get_settings
from linkshelf.infrastructure.storage.asset_paths import collection_asset_folders
from linkshelf.infrastructure.storage.base import AssetStore
from linkshelf.infrastructure.storage.local_asset_store import LocalAssetStore
from linkshelf.infrastructure.storage.s3_asset_store import (
    S3AssetStore,
    S3AssetStoreSettings,
)


def get_asset_store(settings: Settings | None = None) -> AssetStore:
    """Build the asset store selected by ``storage_provider``."""
    settings = settings or get_settings()
    if settings.storage_provider == "s3":
        if not settings.s3_bucket:
            raise ValueError("LINKSHELF_S3_BUCKET is required when storage_provider is 's3'")
        return S3AssetStore(
            S3AssetStoreSettings(
                bucket=settings.s3_bucket,
                region=settings.s3_region,
                access_key_id=settings.s3_access_key_id,
                secret_access_key=settings.s3_secret_access_key,
                endpoint_url=settings.s3_endpoint_url,
                prefix=settings.s3_prefix,
            )
        )
    return LocalAssetStore(settings.storage_path)


__all__ = [
    "AssetStore",
    "LocalAssetStore",
    "S3AssetStore",
    "S3AssetStoreSettings",
    "collection_asset_folders",
    "get_asset_store",
]
