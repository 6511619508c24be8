"""API request and response schemas."""

from linkshelf.infrastructure.api.schemas.collection_schemas import (
    CollectionResponse,
    ErrorResponse,
    MembershipResponse,
)

__all__ = ["CollectionResponse", "ErrorResponse", "MembershipResponse"]
