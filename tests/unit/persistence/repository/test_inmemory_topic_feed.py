"""Unit tests for feed ordering in the in-memory topic repository."""

import pytest
import pytest_asyncio

from forum.domain.service import FeedRanker
from forum.domain.value import TopicSortOrder
from forum.persistence.repository.inmemory import InMemoryTopicRepository
from tests.factories import NOW, make_topic


@pytest_asyncio.fixture
async def repo():
    """Repository seeded with topics of different age and score."""
    repository = InMemoryTopicRepository(FeedRanker())
    for net_score, hours_old in [(1, 0), (30, 20), (8, 2), (3, 1), (15, 5)]:
        await repository.save(make_topic(net_score=net_score, hours_old=hours_old))
    return repository


class TestFeedOrdering:
    """Tests for find_all sorting and pagination."""

    @pytest.mark.asyncio
    async def test_hot_pages_are_slices_of_one_ranking(self, repo):
        """Pagination happens after ranking."""
        everything = await repo.find_all(TopicSortOrder.HOT, limit=10, now=NOW)
        page_one = await repo.find_all(TopicSortOrder.HOT, limit=2, offset=0, now=NOW)
        page_two = await repo.find_all(TopicSortOrder.HOT, limit=2, offset=2, now=NOW)
        page_three = await repo.find_all(TopicSortOrder.HOT, limit=2, offset=4, now=NOW)

        assert page_one + page_two + page_three == everything
        assert len(page_three) == 1

    @pytest.mark.asyncio
    async def test_hot_matches_feed_ranker(self, repo):
        """The repository delegates hot ordering to FeedRanker."""
        everything = await repo.find_all(TopicSortOrder.HOT, limit=10, now=NOW)

        assert everything == FeedRanker().rank(everything, NOW)
        assert everything[-1].net_score == 1

    @pytest.mark.asyncio
    async def test_top_orders_by_score(self, repo):
        """The top feed ignores age."""
        topics = await repo.find_all(TopicSortOrder.TOP, limit=10)

        assert [t.net_score for t in topics] == [30, 15, 8, 3, 1]

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self, repo):
        """Pages beyond the feed are empty."""
        assert await repo.find_all(TopicSortOrder.NEW, limit=20, offset=20) == []
