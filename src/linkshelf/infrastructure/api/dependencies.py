"""FastAPI dependencies for authentication and collaborator wiring."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from linkshelf.core.logging import get_logger
from linkshelf.infrastructure.auth import InvalidTokenError, TokenExpiredError, jwt_service
from linkshelf.infrastructure.search import SearchIndex, get_search_index
from linkshelf.infrastructure.storage import AssetStore, get_asset_store

logger = get_logger(__name__)


@dataclass
class CurrentUser:
    """The authenticated caller, extracted from a valid access token."""

    user_id: int


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Extract and validate the current user from the Authorization header.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or expired.
    """
    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = jwt_service.validate_access_token(parts[1])
    except TokenExpiredError:
        logger.info("Authentication failed: token expired")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidTokenError:
        logger.info("Authentication failed: invalid token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentUser(user_id=user_id)


def get_asset_store_dependency() -> AssetStore:
    return get_asset_store()


def get_search_index_dependency() -> SearchIndex | None:
    return get_search_index()


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
