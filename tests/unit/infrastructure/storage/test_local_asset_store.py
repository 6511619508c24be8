"""Unit tests for local asset store."""

import pytest

from linkshelf.infrastructure.storage.base import AssetStore
from linkshelf.infrastructure.storage.local_asset_store import LocalAssetStore


@pytest.fixture
def store(tmp_path) -> LocalAssetStore:
    return LocalAssetStore(storage_path=str(tmp_path))


@pytest.mark.asyncio
async def test_remove_folder_deletes_tree(store: LocalAssetStore, tmp_path) -> None:
    folder = tmp_path / "archives" / "12"
    (folder / "nested").mkdir(parents=True)
    (folder / "1.pdf").write_bytes(b"%PDF")
    (folder / "nested" / "1.png").write_bytes(b"png")
    sibling = tmp_path / "archives" / "13"
    sibling.mkdir()

    await store.remove_folder("archives/12")

    assert not folder.exists()
    assert sibling.exists()


@pytest.mark.asyncio
async def test_remove_missing_folder_is_a_no_op(store: LocalAssetStore, tmp_path) -> None:
    await store.remove_folder("archives/preview/99")

    assert not (tmp_path / "archives").exists()


@pytest.mark.asyncio
async def test_remove_folder_removes_plain_file(store: LocalAssetStore, tmp_path) -> None:
    target = tmp_path / "archives" / "5"
    target.parent.mkdir()
    target.write_text("stray", encoding="utf-8")

    await store.remove_folder("archives/5")

    assert not target.exists()


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["../outside", "archives/../../outside", "", "."])
async def test_remove_folder_rejects_paths_outside_storage(
    store: LocalAssetStore, path: str
) -> None:
    with pytest.raises(ValueError, match="Invalid folder path"):
        await store.remove_folder(path)


def test_asset_store_contract_is_folder_removal_only():
    assert AssetStore.__abstractmethods__ == frozenset({"remove_folder"})
    assert issubclass(LocalAssetStore, AssetStore)
