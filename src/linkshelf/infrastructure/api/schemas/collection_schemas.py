"""Pydantic schemas for collection removal responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CollectionResponse(BaseModel):
    """A deleted collection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    color: str
    is_public: bool
    owner_id: int
    parent_id: int | None
    created_at: datetime
    updated_at: datetime


class MembershipResponse(BaseModel):
    """A membership removed when a member leaves a collection."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    collection_id: int
    can_create: bool
    can_update: bool
    can_delete: bool
    created_at: datetime
    updated_at: datetime


class ErrorResponse(BaseModel):
    """Error body returned when a removal is refused."""

    error: str
    message: str
