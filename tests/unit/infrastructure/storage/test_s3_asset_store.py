"""Unit tests for S3 asset store."""

from unittest import mock

import pytest
from botocore.exceptions import ClientError

from linkshelf.domain.exceptions import AssetStoreError
from linkshelf.infrastructure.storage.s3_asset_store import (
    S3AssetStore,
    S3AssetStoreSettings,
)


def _client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def _pages(*key_groups: list[str]) -> list[dict]:
    return [{"Contents": [{"Key": key} for key in keys]} for keys in key_groups]


@pytest.fixture
def s3_store() -> S3AssetStore:
    return S3AssetStore(
        S3AssetStoreSettings(
            bucket="test-bucket",
            region="us-east-1",
            access_key_id="AKIATEST",
            secret_access_key="secret",
            prefix="linkshelf",
        )
    )


@pytest.mark.asyncio
async def test_remove_folder_deletes_every_object_under_prefix(s3_store: S3AssetStore) -> None:
    with mock.patch("linkshelf.infrastructure.storage.s3_asset_store.boto3.client") as mock_client:
        client = mock.MagicMock()
        client.get_paginator.return_value.paginate.return_value = _pages(
            ["linkshelf/archives/7/1.pdf", "linkshelf/archives/7/1.png"],
            ["linkshelf/archives/7/2.html"],
        )
        mock_client.return_value = client

        await s3_store.remove_folder("archives/7")

    client.get_paginator.return_value.paginate.assert_called_once_with(
        Bucket="test-bucket", Prefix="linkshelf/archives/7/"
    )
    client.delete_objects.assert_called_once_with(
        Bucket="test-bucket",
        Delete={
            "Objects": [
                {"Key": "linkshelf/archives/7/1.pdf"},
                {"Key": "linkshelf/archives/7/1.png"},
                {"Key": "linkshelf/archives/7/2.html"},
            ],
            "Quiet": True,
        },
    )


@pytest.mark.asyncio
async def test_remove_folder_batches_large_folders(s3_store: S3AssetStore) -> None:
    keys = [f"linkshelf/archives/1/{i}.pdf" for i in range(2500)]
    with mock.patch("linkshelf.infrastructure.storage.s3_asset_store.boto3.client") as mock_client:
        client = mock.MagicMock()
        client.get_paginator.return_value.paginate.return_value = _pages(keys[:1000], keys[1000:])
        mock_client.return_value = client

        await s3_store.remove_folder("archives/1")

    batch_sizes = [
        len(c.kwargs["Delete"]["Objects"]) for c in client.delete_objects.call_args_list
    ]
    assert batch_sizes == [1000, 1000, 500]


@pytest.mark.asyncio
async def test_remove_missing_folder_is_a_no_op(s3_store: S3AssetStore) -> None:
    with mock.patch("linkshelf.infrastructure.storage.s3_asset_store.boto3.client") as mock_client:
        client = mock.MagicMock()
        client.get_paginator.return_value.paginate.return_value = [{"KeyCount": 0}]
        mock_client.return_value = client

        await s3_store.remove_folder("archives/preview/3")

    client.delete_objects.assert_not_called()


@pytest.mark.asyncio
async def test_remove_folder_rejects_empty_path(s3_store: S3AssetStore) -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        await s3_store.remove_folder("/")


@pytest.mark.asyncio
async def test_remove_folder_wraps_client_errors(s3_store: S3AssetStore) -> None:
    with mock.patch("linkshelf.infrastructure.storage.s3_asset_store.boto3.client") as mock_client:
        client = mock.MagicMock()
        client.get_paginator.return_value.paginate.side_effect = _client_error(
            "AccessDenied", "denied", "ListObjectsV2"
        )
        mock_client.return_value = client

        with pytest.raises(AssetStoreError, match="archives/4"):
            await s3_store.remove_folder("archives/4")

