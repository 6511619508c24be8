"""Meilisearch client for the link index, spoken over its HTTP API."""

from collections.abc import Sequence

import httpx

from linkshelf.core.logging import get_logger
from linkshelf.domain.exceptions import SearchIndexError
from linkshelf.infrastructure.search.base import SearchIndex

logger = get_logger(__name__)


class MeilisearchIndex(SearchIndex):
    """Link index hosted by a Meilisearch server.

    Deletions are enqueued by Meilisearch as asynchronous tasks; a successful
    call means the task was accepted, not that it has been processed.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        index_name: str = "links",
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.index_name = index_name
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def delete_documents(self, ids: Sequence[int]) -> None:
        if not ids:
            return

        url = f"{self.base_url}/indexes/{self.index_name}/documents/delete-batch"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(url, json=list(ids), headers=self._headers())
            except httpx.HTTPError as e:
                raise SearchIndexError(f"Search index unreachable: {e}") from e

        if response.status_code >= 400:
            try:
                error_msg = response.json().get("message", response.text)
            except ValueError:
                error_msg = response.text
            raise SearchIndexError(
                f"Failed to delete documents from index '{self.index_name}': {error_msg}"
            )

        logger.debug(
            "Search documents deletion enqueued",
            index=self.index_name,
            count=len(ids),
            status_code=response.status_code,
        )
