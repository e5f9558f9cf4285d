"""In-memory comment tree for a single post.

The tree is an adjacency structure: a map from id to comment, the parent
pointer stored on each comment, and an ordered list of child ids per
comment. Removing a node removes its whole subtree.
"""

from collections import defaultdict
from typing import Iterable

from board.domain.model.comment import Comment, CommentThread
from board.domain.value import CommentId, PostId


class CommentTree:
    """Adjacency tree of the comments of one post."""

    def __init__(self, post_id: PostId) -> None:
        self.post_id = post_id
        self._nodes: dict[CommentId, Comment] = {}
        self._children: dict[CommentId, list[CommentId]] = defaultdict(list)
        self._roots: list[CommentId] = []

    @classmethod
    def build(cls, post_id: PostId, comments: Iterable[Comment]) -> "CommentTree":
        """Build a tree from a flat list of comments.

        Comments are attached in creation order, so roots and children come
        out sorted by ``created_at`` regardless of the input order. Replies
        whose parent is not in the input are dropped.
        """
        tree = cls(post_id)
        ordered = sorted(comments, key=lambda c: c.created_at)
        for comment in ordered:
            if comment.parent_id is None:
                tree.add(comment)
        for comment in ordered:
            if comment.parent_id is not None and comment.parent_id in tree:
                tree.add(comment)
        return tree

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, comment_id: CommentId) -> Comment | None:
        """Return the comment with this id, if present."""
        return self._nodes.get(comment_id)

    def add(self, comment: Comment) -> None:
        """Attach a comment, appending it to its parent's child list.

        Raises:
            ValueError: If the comment belongs to another post, is already
                present, or names a parent missing from the tree
        """
        if comment.post_id != self.post_id:
            raise ValueError("Comment does not belong to this post")
        if comment.id in self._nodes:
            raise ValueError(f"Comment already in tree: {comment.id}")
        if comment.parent_id is None:
            self._roots.append(comment.id)
        elif comment.parent_id in self._nodes:
            self._children[comment.parent_id].append(comment.id)
        else:
            raise ValueError(f"Parent comment not in tree: {comment.parent_id}")
        self._nodes[comment.id] = comment

    def replace(self, comment: Comment) -> None:
        """Swap in an updated copy of an existing comment.

        The parent pointer is kept from the stored node, a replacement can
        never reparent.
        """
        current = self._nodes[comment.id]
        self._nodes[comment.id] = comment.model_copy(
            update={"parent_id": current.parent_id}
        )

    def subtree_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Ids of a comment and all of its descendants, parent first."""
        ids = [comment_id]
        for child_id in self._children.get(comment_id, []):
            ids.extend(self.subtree_ids(child_id))
        return ids

    def remove(self, comment_id: CommentId) -> list[CommentId]:
        """Remove a comment and, transitively, all of its replies.

        Returns:
            Removed ids, the requested comment first; empty if absent
        """
        comment = self._nodes.get(comment_id)
        if comment is None:
            return []

        if comment.parent_id is None:
            self._roots.remove(comment_id)
        else:
            self._children[comment.parent_id].remove(comment_id)

        removed = self.subtree_ids(comment_id)
        for removed_id in removed:
            self._nodes.pop(removed_id, None)
            self._children.pop(removed_id, None)
        return removed

    def top_level(self) -> list[Comment]:
        """Top-level comments in creation order."""
        return [self._nodes[cid] for cid in self._roots]

    def replies(self, comment_id: CommentId) -> list[Comment]:
        """Direct replies of a comment in creation order."""
        return [self._nodes[cid] for cid in self._children.get(comment_id, [])]

    def threads(self) -> list[CommentThread]:
        """Fully loaded threads, one per top-level comment."""
        return [
            CommentThread(comment=root, replies=self.replies(root.id))
            for root in self.top_level()
        ]

    def count(self) -> int:
        """Total number of comments, top-level and replies."""
        return len(self._nodes)

    def all(self) -> list[Comment]:
        """Every comment in the tree, parents before their replies."""
        ordered: list[Comment] = []
        for root_id in self._roots:
            ordered.extend(self._nodes[cid] for cid in self.subtree_ids(root_id))
        return ordered
