"""Base abstraction for the full-text link index."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class SearchIndex(ABC):
    """Full-text index of links, keyed by link id."""

    @abstractmethod
    async def delete_documents(self, ids: Sequence[int]) -> None:
        """Remove documents from the index.

        An empty sequence is a no-op.
        """
        ...
