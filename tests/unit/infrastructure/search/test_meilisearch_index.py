"""Unit tests for the Meilisearch link index."""

import json

import httpx
import pytest
import respx

from linkshelf.domain.exceptions import SearchIndexError
from linkshelf.infrastructure.search import MeilisearchIndex

DELETE_BATCH_URL = "http://search:7700/indexes/links/documents/delete-batch"


@pytest.mark.asyncio
@respx.mock
async def test_delete_documents_posts_batch():
    route = respx.post(DELETE_BATCH_URL).respond(
        status_code=202, json={"taskUid": 1, "status": "enqueued"}
    )

    await MeilisearchIndex("http://search:7700/", api_key="master").delete_documents([3, 1, 2])

    assert route.call_count == 1
    request = route.calls.last.request
    assert json.loads(request.content) == [3, 1, 2]
    assert request.headers["Authorization"] == "Bearer master"


@pytest.mark.asyncio
@respx.mock
async def test_no_authorization_header_without_api_key():
    route = respx.post(DELETE_BATCH_URL).respond(status_code=202, json={"taskUid": 2})

    await MeilisearchIndex("http://search:7700").delete_documents([1])

    assert "Authorization" not in route.calls.last.request.headers


@pytest.mark.asyncio
@respx.mock
async def test_empty_id_list_sends_nothing():
    route = respx.post(DELETE_BATCH_URL).respond(status_code=202, json={})

    await MeilisearchIndex("http://search:7700").delete_documents([])

    assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_error_response_raises_with_server_message():
    respx.post(DELETE_BATCH_URL).respond(
        status_code=404,
        json={"message": "Index `links` not found.", "code": "index_not_found"},
    )

    with pytest.raises(SearchIndexError, match="Index `links` not found"):
        await MeilisearchIndex("http://search:7700").delete_documents([1])


@pytest.mark.asyncio
@respx.mock
async def test_non_json_error_response_raises():
    respx.post(DELETE_BATCH_URL).respond(status_code=502, text="Bad Gateway")

    with pytest.raises(SearchIndexError, match="Bad Gateway"):
        await MeilisearchIndex("http://search:7700").delete_documents([1])


@pytest.mark.asyncio
@respx.mock
async def test_unreachable_server_raises():
    respx.post(DELETE_BATCH_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(SearchIndexError, match="unreachable"):
        await MeilisearchIndex("http://search:7700").delete_documents([1])
