"""Base abstraction for collection asset stores."""

from abc import ABC, abstractmethod


class AssetStore(ABC):
    """Removes archived documents and previews stored per collection."""

    @abstractmethod
    async def remove_folder(self, file_path: str) -> None:
        """Remove a folder and everything under it.

        Removing a folder that does not exist is a no-op.

        Args:
            file_path: Folder path relative to the store root,
                e.g. ``archives/12``.
        """
        ...
