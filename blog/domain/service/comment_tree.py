"""Threaded comment tree construction and reply depth checks.

Comments are persisted as a flat adjacency list (each row points at its
parent). ``CommentTreeBuilder`` turns one article's rows back into a display
forest and decides, before a reply is written, whether it would be nested
too deeply.

Ordering rules:
- Root comments: newest first (conversation starters)
- Replies at every level: oldest first (natural conversation flow)
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId

# Shared with any "maximum depth reached" messaging; overridable via settings.
MAX_COMMENT_DEPTH = 5

ParentLookup = Callable[[CommentId], Awaitable[Comment | None]]


@dataclass
class CommentNode:
    """Node in a comment thread.

    Wraps the stored comment and its direct replies.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass(frozen=True)
class DepthCheck:
    """Outcome of a reply depth check."""

    depth: int
    max_depth: int

    @property
    def allowed(self) -> bool:
        """Whether a comment at ``depth`` may be created."""
        return self.depth < self.max_depth


class CommentTreeBuilder:
    """Builds comment forests and guards reply nesting depth.

    Holds no state besides the configured limit; every call works on its
    own local data.
    """

    def __init__(self, max_depth: int = MAX_COMMENT_DEPTH) -> None:
        """Initialize the builder.

        Args:
            max_depth: Depth at which replies are refused (top-level is 0)
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def build_tree(self, comments: Iterable[Comment]) -> list[CommentNode]:
        """Build the reply forest for a single article.

        Algorithm:
        1. Map every comment ID to a node with an empty reply list
        2. Attach each reply to its parent's node; a reply whose parent is
           not in the input is promoted to a root instead of being dropped
        3. Promote one member of every parent cycle so it stays reachable
        4. Sort roots newest first, then every reply list oldest first

        Args:
            comments: All comments of one article, in any order

        Returns:
            Root nodes; every input comment appears exactly once in the forest
        """
        nodes: dict[CommentId, CommentNode] = {}
        ordered: list[CommentNode] = []
        for comment in comments:
            node = CommentNode(comment=comment)
            nodes[comment.id] = node
            ordered.append(node)

        roots: list[CommentNode] = []
        for node in ordered:
            parent_id = node.comment.parent_id
            parent = nodes.get(parent_id) if parent_id is not None else None
            if parent is None:
                # Top-level comment, or orphan whose parent is gone
                roots.append(node)
            else:
                parent.replies.append(node)

        _promote_cycles(ordered, nodes, roots)

        roots.sort(key=_created_at, reverse=True)
        for root in roots:
            _sort_replies(root)

        return roots

    async def compute_depth(
        self, parent_id: CommentId | None, lookup_parent: ParentLookup
    ) -> int:
        """Compute the depth a new comment would have under ``parent_id``.

        Walks the parent chain upwards, one lookup per hop, stopping at a
        top-level comment, at ``max_depth`` hops, or at a parent that cannot
        be found (treated as the root).

        Args:
            parent_id: Parent of the new comment (None for top-level)
            lookup_parent: Async single-record lookup

        Returns:
            Depth of the prospective comment, capped at ``max_depth``
        """
        depth = 0
        current_id = parent_id
        while current_id is not None and depth < self.max_depth:
            ancestor = await lookup_parent(current_id)
            if ancestor is None:
                break
            depth += 1
            current_id = ancestor.parent_id
        return depth

    async def check_depth(
        self, parent_id: CommentId | None, lookup_parent: ParentLookup
    ) -> DepthCheck:
        """Check whether a reply under ``parent_id`` is within the limit.

        Args:
            parent_id: Parent of the new comment (None for top-level)
            lookup_parent: Async single-record lookup

        Returns:
            DepthCheck with the computed depth and the configured limit
        """
        depth = await self.compute_depth(parent_id, lookup_parent)
        return DepthCheck(depth=depth, max_depth=self.max_depth)


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Count every node of a forest, replies included."""
    total = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.replies)
    return total


def _created_at(node: CommentNode) -> datetime:
    return node.comment.created_at


def _sort_replies(node: CommentNode) -> None:
    node.replies.sort(key=_created_at)
    for reply in node.replies:
        _sort_replies(reply)


def _promote_cycles(
    ordered: list[CommentNode],
    nodes: dict[CommentId, CommentNode],
    roots: list[CommentNode],
) -> None:
    """Detach and promote comments whose parent chain loops back on itself."""
    reachable: set[int] = set()

    def mark(start: CommentNode) -> None:
        stack = [start]
        while stack:
            current = stack.pop()
            if id(current) in reachable:
                continue
            reachable.add(id(current))
            stack.extend(current.replies)

    for root in roots:
        mark(root)

    for node in ordered:
        if id(node) in reachable:
            continue
        parent = nodes[node.comment.parent_id]
        parent.replies[:] = [reply for reply in parent.replies if reply is not node]
        roots.append(node)
        mark(node)
