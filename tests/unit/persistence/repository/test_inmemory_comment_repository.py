"""Unit tests for InMemoryCommentRepository listing."""

import pytest
import pytest_asyncio

from talkback.domain.value import ArticleId, CommentSortOrder, ParentScope, UserId
from talkback.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, minutes_ago

ARTICLE = ArticleId("listing")


@pytest_asyncio.fixture
async def seeded():
    """Twelve root comments, one per minute, oldest first, plus a reply."""
    repo = InMemoryCommentRepository()
    comments = []
    for i in range(12):
        comment = make_comment(ARTICLE, body=f"#{i}", created_at=minutes_ago(12 - i))
        comments.append(await repo.save(comment))
    await repo.save(make_comment(ARTICLE, parent=comments[0].id, created_at=minutes_ago(0)))
    await repo.save(make_comment("elsewhere"))
    return repo, comments


class TestFindByArticle:
    """Tests for filtering, sorting and paging."""

    @pytest.mark.asyncio
    async def test_second_page_of_newest(self, seeded):
        """Page 2 with limit 5 holds the 6th to 10th newest roots."""
        repo, comments = seeded

        page = await repo.find_by_article(
            ARTICLE,
            parent=ParentScope.ROOT,
            sort=CommentSortOrder.NEWEST,
            limit=5,
            offset=5,
        )

        newest_first = list(reversed(comments))
        assert [c.id for c in page] == [c.id for c in newest_first[5:10]]

    @pytest.mark.asyncio
    async def test_oldest_sort(self, seeded):
        repo, comments = seeded

        page = await repo.find_by_article(
            ARTICLE, parent=ParentScope.ROOT, sort=CommentSortOrder.OLDEST, limit=3
        )

        assert [c.id for c in page] == [c.id for c in comments[:3]]

    @pytest.mark.asyncio
    async def test_any_scope_includes_replies_in_insertion_order(self, seeded):
        """Without a parent filter or sort, store order is kept."""
        repo, comments = seeded

        page = await repo.find_by_article(ARTICLE, limit=20)

        assert len(page) == 13
        assert [c.id for c in page[:12]] == [c.id for c in comments]
        assert page[12].parent == comments[0].id

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, seeded):
        repo, _ = seeded

        assert await repo.find_by_article(ARTICLE, limit=5, offset=50) == []

    @pytest.mark.asyncio
    async def test_same_query_is_deterministic(self, seeded):
        """Repeating a query without writes yields the same page."""
        repo, _ = seeded

        first = await repo.find_by_article(ARTICLE, sort=CommentSortOrder.POPULAR, limit=5)
        second = await repo.find_by_article(ARTICLE, sort=CommentSortOrder.POPULAR, limit=5)

        assert first == second


class TestGuardedUpdates:
    """Tests for the guarded like updates."""

    @pytest.mark.asyncio
    async def test_add_like_is_guarded(self):
        repo = InMemoryCommentRepository()
        comment = await repo.save(make_comment(ARTICLE))

        assert (await repo.add_like(comment.id, UserId("alice"))).likes_count == 1
        assert await repo.add_like(comment.id, UserId("alice")) is None

    @pytest.mark.asyncio
    async def test_remove_like_is_guarded(self):
        repo = InMemoryCommentRepository()
        comment = await repo.save(make_comment(ARTICLE))

        assert await repo.remove_like(comment.id, UserId("alice")) is None
        assert (await repo.find_by_id(comment.id)).likes_count == 0
