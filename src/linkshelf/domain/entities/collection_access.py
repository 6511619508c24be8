"""Relationship of a user to a collection.

The permission lookup returns a ``CollectionAccess`` snapshot. It is reduced
once into an ``AccessRole`` which decides whether the caller leaves or
deletes the collection.
"""

from dataclasses import dataclass, field
from enum import Enum


class AccessRole(str, Enum):
    """What a user may do to a collection they asked to remove."""

    UNAUTHORIZED = "unauthorized"
    MEMBER = "member"
    OWNER = "owner"


@dataclass(frozen=True)
class CollectionAccess:
    """Owner and members of a collection visible to a user.

    Attributes:
        collection_id: The collection looked up.
        owner_id: The collection's owner.
        member_ids: Users holding a membership row for the collection.
    """

    collection_id: int
    owner_id: int
    member_ids: frozenset[int] = field(default_factory=frozenset)

    def is_member(self, user_id: int) -> bool:
        return user_id in self.member_ids


def resolve_access_role(access: CollectionAccess | None, user_id: int) -> AccessRole:
    """Reduce a permission lookup to the role of *user_id*.

    Membership is only considered for non-owners, so an owner that also has
    a membership row is still an owner.
    """
    if access is None:
        return AccessRole.UNAUTHORIZED
    if access.owner_id != user_id:
        if access.is_member(user_id):
            return AccessRole.MEMBER
        return AccessRole.UNAUTHORIZED
    return AccessRole.OWNER
