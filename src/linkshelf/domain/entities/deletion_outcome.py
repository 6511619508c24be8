"""Result returned to callers of the collection deletion workflow."""

from dataclasses import dataclass
from typing import Any

INVALID_COLLECTION_MESSAGE = "Please choose a valid collection."
NOT_ACCESSIBLE_MESSAGE = "Collection is not accessible."


@dataclass(frozen=True)
class DeletionOutcome:
    """Response payload and status of a remove-or-delete request.

    Attributes:
        response: The deleted record (collection or membership) on success,
            otherwise a message for the user.
        status: 200 on success, 401 when the request was refused.
    """

    response: Any
    status: int

    @property
    def ok(self) -> bool:
        return self.status == 200

    @classmethod
    def success(cls, record: Any) -> "DeletionOutcome":
        return cls(response=record, status=200)

    @classmethod
    def invalid_collection(cls) -> "DeletionOutcome":
        return cls(response=INVALID_COLLECTION_MESSAGE, status=401)

    @classmethod
    def not_accessible(cls) -> "DeletionOutcome":
        return cls(response=NOT_ACCESSIBLE_MESSAGE, status=401)
