"""Unit tests for CommentTreeBuilder."""

import random
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from blog.domain.model.comment import Comment
from blog.domain.service import (
    MAX_COMMENT_DEPTH,
    CommentNode,
    CommentTreeBuilder,
    count_nodes,
)
from blog.domain.value import ArticleId, CommentId
from tests.factories import make_comment

ARTICLE_ID = ArticleId(uuid4())
BASE = datetime(2024, 5, 1, 10, 0)


def at(minutes: int) -> datetime:
    return BASE + timedelta(minutes=minutes)


def walk(roots: list[CommentNode]):
    stack = list(roots)
    while stack:
        node = stack.pop()
        yield node
        stack.extend(node.replies)


def shape(nodes: list[CommentNode]) -> list:
    return [(node.comment.id, shape(node.replies)) for node in nodes]


def random_forest(seed: int) -> list[Comment]:
    """Comments of one article: roots, nested replies, orphans and time ties."""
    rng = random.Random(seed)
    comments: list[Comment] = []
    for _ in range(rng.randint(0, 60)):
        roll = rng.random()
        if comments and roll < 0.6:
            parent_id = rng.choice(comments).id
        elif roll < 0.7:
            parent_id = CommentId(uuid4())  # deleted parent
        else:
            parent_id = None
        comments.append(
            make_comment(ARTICLE_ID, at(rng.randint(0, 30)), parent_id=parent_id)
        )
    rng.shuffle(comments)
    return comments


def lookup_from(comments: list[Comment]):
    by_id = {c.id: c for c in comments}
    calls: list[CommentId] = []

    async def lookup(comment_id: CommentId) -> Comment | None:
        calls.append(comment_id)
        return by_id.get(comment_id)

    return lookup, calls


def chain(length: int) -> list[Comment]:
    """c0 (top-level) <- c1 <- c2 ... each replying to the previous."""
    comments: list[Comment] = []
    for i in range(length):
        parent_id = comments[-1].id if comments else None
        comments.append(make_comment(ARTICLE_ID, at(i), parent_id=parent_id))
    return comments


class TestBuildTree:
    """Tests for build_tree."""

    def test_empty_input_returns_empty_forest(self):
        """No comments, no roots."""
        assert CommentTreeBuilder().build_tree([]) == []

    def test_roots_are_ordered_newest_first(self):
        """A(10:00), B(10:05), C(10:02) come back as B, C, A."""
        # Arrange
        a = make_comment(ARTICLE_ID, at(0), content="A")
        b = make_comment(ARTICLE_ID, at(5), content="B")
        c = make_comment(ARTICLE_ID, at(2), content="C")

        # Act
        roots = CommentTreeBuilder().build_tree([a, b, c])

        # Assert
        assert [n.comment.id for n in roots] == [b.id, c.id, a.id]
        assert all(n.replies == [] for n in roots)

    def test_replies_are_ordered_oldest_first(self):
        """Replies A2(10:03) and A1(10:01) of A come back as A1, A2."""
        # Arrange
        a = make_comment(ARTICLE_ID, at(0))
        a1 = make_comment(ARTICLE_ID, at(1), parent_id=a.id)
        a2 = make_comment(ARTICLE_ID, at(3), parent_id=a.id)

        # Act
        roots = CommentTreeBuilder().build_tree([a2, a, a1])

        # Assert
        assert len(roots) == 1
        assert [n.comment.id for n in roots[0].replies] == [a1.id, a2.id]

    def test_nested_replies_are_sorted_at_every_level(self):
        """Sorting applies below the first reply level too."""
        a = make_comment(ARTICLE_ID, at(0))
        a1 = make_comment(ARTICLE_ID, at(1), parent_id=a.id)
        late = make_comment(ARTICLE_ID, at(9), parent_id=a1.id)
        early = make_comment(ARTICLE_ID, at(4), parent_id=a1.id)

        roots = CommentTreeBuilder().build_tree([late, a1, early, a])

        grandchildren = roots[0].replies[0].replies
        assert [n.comment.id for n in grandchildren] == [early.id, late.id]

    def test_orphan_is_promoted_to_root(self):
        """A reply whose parent is gone is shown as a root, not dropped."""
        # Arrange
        orphan = make_comment(ARTICLE_ID, at(0), parent_id=CommentId(uuid4()))

        # Act
        roots = CommentTreeBuilder().build_tree([orphan])

        # Assert
        assert len(roots) == 1
        assert roots[0].comment.id == orphan.id
        assert roots[0].replies == []

    def test_orphan_keeps_its_own_replies(self):
        """Promoting an orphan carries its subtree along."""
        orphan = make_comment(ARTICLE_ID, at(0), parent_id=CommentId(uuid4()))
        reply = make_comment(ARTICLE_ID, at(1), parent_id=orphan.id)
        root = make_comment(ARTICLE_ID, at(2))

        roots = CommentTreeBuilder().build_tree([reply, root, orphan])

        assert [n.comment.id for n in roots] == [root.id, orphan.id]
        assert [n.comment.id for n in roots[1].replies] == [reply.id]

    def test_equal_timestamps_keep_input_order(self):
        """Ties are broken by input order, so output is stable."""
        first = make_comment(ARTICLE_ID, at(0))
        second = make_comment(ARTICLE_ID, at(0))

        roots = CommentTreeBuilder().build_tree([first, second])

        assert [n.comment.id for n in roots] == [first.id, second.id]

    def test_self_parent_is_promoted_to_root(self):
        """A comment naming itself as parent still appears once."""
        cid = CommentId(uuid4())
        looped = make_comment(ARTICLE_ID, at(0), parent_id=cid, id=cid)

        roots = CommentTreeBuilder().build_tree([looped])

        assert len(roots) == 1
        assert roots[0].comment.id == cid
        assert roots[0].replies == []

    def test_parent_cycle_is_broken_at_first_input_member(self):
        """Two comments pointing at each other become root and reply."""
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(ARTICLE_ID, at(0), parent_id=b_id, id=a_id)
        b = make_comment(ARTICLE_ID, at(1), parent_id=a_id, id=b_id)

        roots = CommentTreeBuilder().build_tree([a, b])

        assert [n.comment.id for n in roots] == [a_id]
        assert [n.comment.id for n in roots[0].replies] == [b_id]
        assert count_nodes(roots) == 2


class TestBuildTreeProperties:
    """Properties that hold for any comment set of one article."""

    SEEDS = range(25)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_every_comment_appears_exactly_once(self, seed):
        comments = random_forest(seed)

        roots = CommentTreeBuilder().build_tree(comments)

        ids = [node.comment.id for node in walk(roots)]
        assert count_nodes(roots) == len(comments)
        assert sorted(ids) == sorted(c.id for c in comments)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_roots_never_get_newer(self, seed):
        roots = CommentTreeBuilder().build_tree(random_forest(seed))

        stamps = [n.comment.created_at for n in roots]
        assert all(x >= y for x, y in zip(stamps, stamps[1:]))

    @pytest.mark.parametrize("seed", SEEDS)
    def test_replies_never_get_older(self, seed):
        roots = CommentTreeBuilder().build_tree(random_forest(seed))

        for node in walk(roots):
            stamps = [r.comment.created_at for r in node.replies]
            assert all(x <= y for x, y in zip(stamps, stamps[1:]))

    @pytest.mark.parametrize("seed", SEEDS)
    def test_orphans_end_up_as_roots(self, seed):
        comments = random_forest(seed)
        known = {c.id for c in comments}

        roots = CommentTreeBuilder().build_tree(comments)

        root_ids = {n.comment.id for n in roots}
        for c in comments:
            if c.parent_id is not None and c.parent_id not in known:
                assert c.id in root_ids

    @pytest.mark.parametrize("seed", SEEDS)
    def test_building_twice_gives_the_same_tree(self, seed):
        comments = random_forest(seed)
        builder = CommentTreeBuilder()

        assert shape(builder.build_tree(comments)) == shape(
            builder.build_tree(comments)
        )


class TestComputeDepth:
    """Tests for compute_depth and check_depth."""

    def test_default_limit(self):
        assert MAX_COMMENT_DEPTH == 5
        assert CommentTreeBuilder().max_depth == MAX_COMMENT_DEPTH

    def test_rejects_limit_below_one(self):
        with pytest.raises(ValueError):
            CommentTreeBuilder(max_depth=0)

    @pytest.mark.asyncio
    async def test_top_level_comment_has_depth_zero_without_lookups(self):
        lookup, calls = lookup_from([])

        depth = await CommentTreeBuilder().compute_depth(None, lookup)

        assert depth == 0
        assert calls == []

    @pytest.mark.asyncio
    async def test_depth_grows_by_one_per_ancestor(self):
        """The i-th comment of a chain sits at depth i."""
        comments = chain(5)
        lookup, _ = lookup_from(comments)
        builder = CommentTreeBuilder()

        for i, comment in enumerate(comments):
            assert await builder.compute_depth(comment.parent_id, lookup) == i

    @pytest.mark.asyncio
    async def test_reply_to_fifth_comment_of_chain_is_refused(self):
        """With a limit of 5, replying to c4 is refused and to c3 allowed."""
        # Arrange
        c = chain(5)
        lookup, _ = lookup_from(c)
        builder = CommentTreeBuilder(max_depth=5)

        # Act
        too_deep = await builder.check_depth(c[4].id, lookup)
        deepest_allowed = await builder.check_depth(c[3].id, lookup)

        # Assert
        assert too_deep.depth == 5
        assert not too_deep.allowed
        assert deepest_allowed.depth == 4
        assert deepest_allowed.allowed

    @pytest.mark.asyncio
    async def test_walk_stops_at_the_limit(self):
        """Long chains cost at most max_depth lookups."""
        c = chain(12)
        lookup, calls = lookup_from(c)

        depth = await CommentTreeBuilder(max_depth=5).compute_depth(c[-1].id, lookup)

        assert depth == 5
        assert len(calls) == 5

    @pytest.mark.asyncio
    async def test_missing_ancestor_counts_as_root(self):
        """A broken chain stops early instead of failing."""
        gone = CommentId(uuid4())
        c1 = make_comment(ARTICLE_ID, at(1), parent_id=gone)
        lookup, calls = lookup_from([c1])

        depth = await CommentTreeBuilder().compute_depth(c1.id, lookup)

        assert depth == 1
        assert calls == [c1.id, gone]

    @pytest.mark.asyncio
    async def test_unknown_parent_gives_depth_zero(self):
        lookup, _ = lookup_from([])

        depth = await CommentTreeBuilder().compute_depth(CommentId(uuid4()), lookup)

        assert depth == 0

    @pytest.mark.asyncio
    async def test_parent_cycle_terminates_at_the_limit(self):
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(ARTICLE_ID, at(0), parent_id=b_id, id=a_id)
        b = make_comment(ARTICLE_ID, at(1), parent_id=a_id, id=b_id)
        lookup, _ = lookup_from([a, b])

        check = await CommentTreeBuilder(max_depth=3).check_depth(a_id, lookup)

        assert check.depth == 3
        assert not check.allowed

    @pytest.mark.asyncio
    async def test_limit_is_configurable(self):
        """Lowering the limit only changes future checks."""
        c = chain(3)
        lookup, _ = lookup_from(c)

        strict = await CommentTreeBuilder(max_depth=2).check_depth(c[1].id, lookup)
        relaxed = await CommentTreeBuilder(max_depth=3).check_depth(c[1].id, lookup)

        assert strict.depth == relaxed.depth == 2
        assert not strict.allowed
        assert relaxed.allowed
