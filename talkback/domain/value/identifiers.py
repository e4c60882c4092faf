"""Strongly typed identifiers for Talkback domain entities.

Articles and users are owned by the embedding site, so their identifiers are
opaque strings. Comments are ours and use generated UUIDs.
"""

from typing import NewType
from uuid import UUID

ArticleId = NewType("ArticleId", str)
UserId = NewType("UserId", str)
CommentId = NewType("CommentId", UUID)
