"""Collection removal routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from linkshelf.core.logging import get_logger
from linkshelf.domain.exceptions import CollectionNotFoundError, MembershipNotFoundError
from linkshelf.domain.services import CollectionDeletionService
from linkshelf.infrastructure.api.dependencies import (
    AuthenticatedUser,
    get_asset_store_dependency,
    get_search_index_dependency,
)
from linkshelf.infrastructure.api.schemas import (
    CollectionResponse,
    ErrorResponse,
    MembershipResponse,
)
from linkshelf.infrastructure.persistence.database import get_db_session
from linkshelf.infrastructure.persistence.models import UsersAndCollectionsModel
from linkshelf.infrastructure.search import SearchIndex
from linkshelf.infrastructure.storage import AssetStore

logger = get_logger(__name__)

router = APIRouter()


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_200_OK,
    responses={
        401: {
            "model": ErrorResponse,
            "description": "Invalid collection id or collection not accessible",
        },
        404: {"model": ErrorResponse, "description": "Membership or collection not found"},
    },
)
async def remove_or_delete_collection(
    collection_id: int,
    current_user: AuthenticatedUser,
    session: AsyncSession = Depends(get_db_session),
    asset_store: AssetStore = Depends(get_asset_store_dependency),
    search_index: SearchIndex | None = Depends(get_search_index_dependency),
) -> JSONResponse:
    """Leave a shared collection, or delete an owned one with its subtree."""
    service = CollectionDeletionService(
        session,
        asset_store=asset_store,
        search_index=search_index,
    )

    try:
        outcome = await service.remove_or_delete_collection(current_user.user_id, collection_id)
    except (MembershipNotFoundError, CollectionNotFoundError) as e:
        logger.info(
            "Collection removal failed: not found",
            collection_id=collection_id,
            user_id=current_user.user_id,
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error="Not Found", message=str(e)).model_dump(),
        )

    if not outcome.ok:
        return JSONResponse(
            status_code=outcome.status,
            content=ErrorResponse(error="Unauthorized", message=outcome.response).model_dump(),
        )

    if isinstance(outcome.response, UsersAndCollectionsModel):
        body = MembershipResponse.model_validate(outcome.response)
    else:
        body = CollectionResponse.model_validate(outcome.response)

    return JSONResponse(status_code=outcome.status, content=body.model_dump(mode="json"))
