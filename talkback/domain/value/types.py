"""Domain value objects for Talkback.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, Field

from talkback.domain.error import InvalidPaginationError
from talkback.domain.value.common import ValueObject


class CommentSortOrder(str, Enum):
    """Sort orders accepted by the comment listing.

    popular: most liked first, newest first among equally liked
    newest: most recent first
    oldest: earliest first
    """

    POPULAR = "popular"
    NEWEST = "newest"
    OLDEST = "oldest"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["CommentSortOrder"]:
        """Resolve a client supplied sort key.

        Unknown or missing keys mean "store order" and resolve to None.
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ParentScope(str, Enum):
    """Parent filter that is not a concrete comment id."""

    ANY = "any"  # No filter on parent at all
    ROOT = "root"  # Only comments without a parent


class AuthorSnapshot(ValueObject):
    """Author details copied onto a comment when it is written.

    The snapshot is never refreshed, later profile changes do not reach
    existing comments. Accepts the `_id`/`img` spellings older widgets send.
    """

    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "_id"))
    name: str = Field(min_length=1)
    image: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("image", "img")
    )


def _as_number(name: str, raw: Any) -> float:
    """Coerce a query value to a number the way the widget sends it."""
    if isinstance(raw, bool):
        raise InvalidPaginationError(f"Invalid request: {name} must be a number")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            raise InvalidPaginationError(f"Invalid request: {name} must be a number")
    if math.isnan(value):
        raise InvalidPaginationError(f"Invalid request: {name} must be a number")
    return value


def _as_whole_number(name: str, raw: Any) -> int:
    value = _as_number(name, raw)
    if not math.isfinite(value) or value < 1 or value % 1 != 0:
        raise InvalidPaginationError(
            f"Invalid request: '{name}' must be a whole number greater than 0"
        )
    return int(value)


class Pagination(ValueObject):
    """Page/limit pair for listing endpoints.

    Pages are 1-based: page 2 with limit 5 covers items 6-10.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=5, ge=1)

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit

    @classmethod
    def parse(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = 5,
        max_limit: Optional[int] = None,
    ) -> "Pagination":
        """Validate raw page/limit values.

        Args:
            page: Raw page value (string from the query, or a number)
            limit: Raw limit value
            default_limit: Limit used when none is given
            max_limit: Largest accepted limit, unbounded when None

        Returns:
            Validated pagination

        Raises:
            InvalidPaginationError: If either value is not a number, or is
                not a whole number greater than 0, or limit exceeds max_limit
        """
        limit_value = _as_whole_number("limit", default_limit if limit is None else limit)
        page_value = _as_whole_number("page", 1 if page is None else page)

        if max_limit is not None and limit_value > max_limit:
            raise InvalidPaginationError(
                f"Invalid request: 'limit' must not exceed {max_limit}"
            )

        return cls(page=page_value, limit=limit_value)
