"""Tests for configuration loading."""

import pytest

from linkshelf.core.config import Settings
from linkshelf.infrastructure.search import MeilisearchIndex, get_search_index
from linkshelf.infrastructure.storage import (
    LocalAssetStore,
    S3AssetStore,
    collection_asset_folders,
    get_asset_store,
)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.api_prefix == "/api/v1"
    assert settings.archive_dir == "archives"
    assert settings.preview_dir == "archives/preview"
    assert settings.search_enabled is False
    assert settings.is_development


def test_environment_variables_use_prefix(monkeypatch):
    monkeypatch.setenv("LINKSHELF_ENVIRONMENT", "production")
    monkeypatch.setenv("LINKSHELF_SEARCH_URL", "http://search:7700/")
    monkeypatch.setenv("LINKSHELF_ARCHIVE_DIR", "/data/archives/")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.search_url == "http://search:7700"
    assert settings.search_enabled is True
    assert settings.archive_dir == "data/archives"


def test_collection_asset_folders_follow_settings():
    settings = Settings(_env_file=None, archive_dir="a", preview_dir="p/")

    assert collection_asset_folders(5, settings) == ["a/5", "p/5"]


def test_asset_store_selection(tmp_path):
    local = get_asset_store(Settings(_env_file=None, storage_path=str(tmp_path)))
    s3 = get_asset_store(
        Settings(_env_file=None, storage_provider="s3", s3_bucket="assets")
    )

    assert isinstance(local, LocalAssetStore)
    assert isinstance(s3, S3AssetStore)
    assert s3.settings.bucket == "assets"


def test_s3_asset_store_requires_bucket():
    with pytest.raises(ValueError, match="S3_BUCKET"):
        get_asset_store(Settings(_env_file=None, storage_provider="s3"))


def test_search_index_selection():
    assert get_search_index(Settings(_env_file=None)) is None

    index = get_search_index(
        Settings(_env_file=None, search_url="http://search:7700", search_index="bookmarks")
    )

    assert isinstance(index, MeilisearchIndex)
    assert index.index_name == "bookmarks"
