"""Amazon S3 asset store."""

import asyncio

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict

from linkshelf.core.logging import get_logger
from linkshelf.domain.exceptions import AssetStoreError
from linkshelf.infrastructure.storage.base import AssetStore

logger = get_logger(__name__)

# delete_objects accepts at most 1000 keys per request.
_DELETE_BATCH_SIZE = 1000


class S3AssetStoreSettings(BaseModel):
    """Configuration settings for the S3 asset store."""

    model_config = ConfigDict(from_attributes=True)

    bucket: str
    region: str
    access_key_id: str | None = None
    secret_access_key: str | None = None
    endpoint_url: str | None = None
    prefix: str = ""


class S3AssetStore(AssetStore):
    """Asset store where a folder is every object under a key prefix."""

    def __init__(self, settings: S3AssetStoreSettings) -> None:
        self.settings = settings
        self._client = None

    def _get_client(self):
        """Get or create the S3 client."""
        if self._client is None:
            client_kwargs = {"region_name": self.settings.region}
            if self.settings.access_key_id:
                client_kwargs["aws_access_key_id"] = self.settings.access_key_id
                client_kwargs["aws_secret_access_key"] = self.settings.secret_access_key
            if self.settings.endpoint_url:
                client_kwargs["endpoint_url"] = self.settings.endpoint_url

            self._client = boto3.client("s3", **client_kwargs)
        return self._client

    def _folder_prefix(self, file_path: str) -> str:
        folder = file_path.strip("/")
        if not folder:
            raise ValueError("Folder path must not be empty")
        prefix = self.settings.prefix.strip("/")
        return f"{prefix}/{folder}/" if prefix else f"{folder}/"

    def _delete_prefix(self, prefix: str) -> int:
        client = self._get_client()
        paginator = client.get_paginator("list_objects_v2")
        deleted = 0
        batch: list[dict[str, str]] = []

        for page in paginator.paginate(Bucket=self.settings.bucket, Prefix=prefix):
            for obj in page.get("Contents", []):
                batch.append({"Key": obj["Key"]})
                if len(batch) == _DELETE_BATCH_SIZE:
                    client.delete_objects(
                        Bucket=self.settings.bucket,
                        Delete={"Objects": batch, "Quiet": True},
                    )
                    deleted += len(batch)
                    batch = []

        if batch:
            client.delete_objects(
                Bucket=self.settings.bucket,
                Delete={"Objects": batch, "Quiet": True},
            )
            deleted += len(batch)
        return deleted

    async def remove_folder(self, file_path: str) -> None:
        prefix = self._folder_prefix(file_path)
        try:
            deleted = await asyncio.to_thread(self._delete_prefix, prefix)
        except (ClientError, BotoCoreError) as e:
            raise AssetStoreError(f"Failed to remove folder '{file_path}' from S3: {e}") from e

        logger.debug("Asset folder removed", path=file_path, objects=deleted)
