"""Unit tests for CommentTreeBuilder."""

from uuid import uuid4

from forum.domain.service import CommentTreeBuilder
from forum.domain.service.comment_tree import controversy
from forum.domain.value import CommentId, CommentSortOrder, TopicId
from tests.factories import make_comment

TOPIC_ID = TopicId(uuid4())


class TestSort:
    """Tests for flat comment ordering."""

    def test_new_orders_by_created_at_desc(self):
        """Newest comments come first."""
        old = make_comment(TOPIC_ID, minutes_old=30)
        recent = make_comment(TOPIC_ID, minutes_old=1)
        middle = make_comment(TOPIC_ID, minutes_old=10)

        result = CommentTreeBuilder().sort([old, recent, middle], CommentSortOrder.NEW)

        assert result == [recent, middle, old]

    def test_top_orders_by_score_then_newer(self):
        """Highest score first, newer first on ties."""
        low = make_comment(TOPIC_ID, net_score=0)
        high = make_comment(TOPIC_ID, net_score=5)
        tied_old = make_comment(TOPIC_ID, net_score=3, minutes_old=20)
        tied_new = make_comment(TOPIC_ID, net_score=3, minutes_old=2)

        result = CommentTreeBuilder().sort(
            [low, tied_old, high, tied_new], CommentSortOrder.TOP
        )

        assert result == [high, tied_new, tied_old, low]

    def test_controversial_prefers_contested_comments(self):
        """Many votes near neutral rank above one-sided or unvoted comments."""
        contested = make_comment(TOPIC_ID, net_score=1, total_votes=10)
        one_sided = make_comment(TOPIC_ID, net_score=11, total_votes=10)
        slightly = make_comment(TOPIC_ID, net_score=2, total_votes=5)
        unvoted = make_comment(TOPIC_ID, net_score=1, total_votes=0)

        result = CommentTreeBuilder().sort(
            [one_sided, unvoted, slightly, contested], CommentSortOrder.CONTROVERSIAL
        )

        # contested and unvoted share controversy 0; more votes wins
        assert result == [contested, unvoted, slightly, one_sided]

    def test_controversy_measures_distance_from_starting_score(self):
        """An unvoted comment is perfectly undecided."""
        assert controversy(make_comment(TOPIC_ID)) == 0
        assert controversy(make_comment(TOPIC_ID, net_score=3, total_votes=3)) == 0.5

    def test_sort_does_not_mutate_input(self):
        """Sorting returns a new list."""
        comments = [make_comment(TOPIC_ID, net_score=1), make_comment(TOPIC_ID, net_score=4)]
        snapshot = list(comments)

        CommentTreeBuilder().sort(comments, CommentSortOrder.TOP)

        assert comments == snapshot


class TestBuildTree:
    """Tests for building reply threads."""

    def test_empty_input_gives_empty_forest(self):
        """No comments, no roots."""
        assert CommentTreeBuilder().build_tree([]) == []

    def test_siblings_are_sorted_at_every_level(self):
        """Roots and replies follow the requested order."""
        root_low = make_comment(TOPIC_ID, net_score=1)
        root_high = make_comment(TOPIC_ID, net_score=9)
        reply_low = make_comment(TOPIC_ID, net_score=0, parent=root_high)
        reply_high = make_comment(TOPIC_ID, net_score=4, parent=root_high)
        nested = make_comment(TOPIC_ID, parent=reply_low)

        tree = CommentTreeBuilder().build_tree(
            [reply_low, nested, root_low, reply_high, root_high], CommentSortOrder.TOP
        )

        assert [n.comment for n in tree] == [root_high, root_low]
        assert [n.comment for n in tree[0].children] == [reply_high, reply_low]
        assert [n.comment for n in tree[0].children[1].children] == [nested]
        assert tree[1].children == []

    def test_orphans_are_promoted_to_roots(self):
        """A comment whose parent is not in the set becomes a root."""
        orphan = make_comment(TOPIC_ID, parent_id=CommentId(uuid4()), depth=2)

        tree = CommentTreeBuilder().build_tree([orphan])

        assert [n.comment for n in tree] == [orphan]

    def test_every_comment_appears_once(self):
        """The tree is a partition of the input."""
        root = make_comment(TOPIC_ID)
        replies = [make_comment(TOPIC_ID, parent=root) for _ in range(3)]
        deeper = make_comment(TOPIC_ID, parent=replies[0])
        comments = [root, *replies, deeper]

        tree = CommentTreeBuilder().build_tree(comments, CommentSortOrder.NEW)

        def walk(nodes):
            for node in nodes:
                yield node.comment.id
                yield from walk(node.children)

        seen = list(walk(tree))
        assert sorted(seen) == sorted(c.id for c in comments)
