"""Local filesystem asset store."""

import asyncio
import shutil
from pathlib import Path

from linkshelf.core.config import get_settings
from linkshelf.core.logging import get_logger
from linkshelf.domain.exceptions import AssetStoreError
from linkshelf.infrastructure.storage.base import AssetStore

logger = get_logger(__name__)


class LocalAssetStore(AssetStore):
    """Asset store backed by a directory on the local filesystem."""

    def __init__(self, storage_path: str | None = None) -> None:
        self.storage_path = Path(storage_path or get_settings().storage_path)

    def _resolve(self, file_path: str) -> Path:
        root = self.storage_path.resolve()
        absolute_path = (root / file_path).resolve()
        if absolute_path == root or not absolute_path.is_relative_to(root):
            raise ValueError(f"Invalid folder path: {file_path}")
        return absolute_path

    async def remove_folder(self, file_path: str) -> None:
        absolute_path = self._resolve(file_path)
        if not absolute_path.exists():
            return

        try:
            if absolute_path.is_dir():
                await asyncio.to_thread(shutil.rmtree, absolute_path)
            else:
                await asyncio.to_thread(absolute_path.unlink, missing_ok=True)
        except OSError as e:
            raise AssetStoreError(f"Failed to remove folder '{file_path}': {e}") from e

        logger.debug("Asset folder removed", path=file_path)
