"""Generalizable Tree Node Class."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from mctree_src.util.errors import ChildIndexError, ReleasedNodeError, TreeNodeError

if TYPE_CHECKING:
    from collections.abc import Iterator


class TreeNode:
    """
    A general tree node that owns its children and borrows its parent.

    Children are held in an ordered list (insertion order). The parent is held
    through a weak reference, so the only strong edges in a tree point
    downwards and dropping the root reclaims the whole tree.

    A node becomes a child only through its parent's _adopt(). When a parent
    goes away, by release() or by being garbage collected, every descendant
    still held elsewhere is released with it.
    """

    def __init__(self):
        """Initialize a detached node; it becomes a child only when a parent adopts it."""
        self._parent_ref: weakref.ref[TreeNode] | None = None
        self.children: list[TreeNode] = []
        self.depth: int = 0
        self._released = False

    def _ensure_alive(self) -> None:
        """Raise if this node has been released."""
        if self.is_released():
            raise ReleasedNodeError(f"{type(self).__name__} at depth {self.depth} was released")

    def _adopt(self, child: TreeNode) -> None:
        """Take ownership of a freshly built node and fix its parent link and depth."""
        self._ensure_alive()
        if child._parent_ref is not None or child.children or child._released or child is self:
            raise TreeNodeError("Only a fresh, detached node can be adopted")
        child_ref = weakref.ref(child)
        child._parent_ref = weakref.ref(self, lambda _: _release_orphan(child_ref))
        child.depth = self.depth + 1
        self.children.append(child)

    def get_parent(self) -> TreeNode | None:
        """Return the parent, or None for the root."""
        self._ensure_alive()
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def get_depth(self) -> int:
        """Return how deep the node is in the tree (0 for the root)."""
        self._ensure_alive()
        return self.depth

    def get_num_children(self) -> int:
        """Return the number of children."""
        self._ensure_alive()
        return len(self.children)

    def get_child(self, i: int) -> TreeNode:
        """Return the i'th child in insertion order."""
        self._ensure_alive()
        if not 0 <= i < len(self.children):
            raise ChildIndexError(
                f"Child index {i} out of range for node with {len(self.children)} children"
            )
        return self.children[i]

    def get_children(self) -> Iterator[TreeNode]:
        """Return an iterator over the children."""
        self._ensure_alive()
        return iter(self.children)

    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children)."""
        self._ensure_alive()
        return len(self.children) == 0

    def is_root(self) -> bool:
        """Check if this node is a root (has no parent)."""
        self._ensure_alive()
        return self._parent_ref is None

    def is_released(self) -> bool:
        """Check if this node has been released."""
        return self._released

    def path_to_root(self) -> list[TreeNode]:
        """Return this node followed by each ancestor up to and including the root."""
        path: list[TreeNode] = []
        current: TreeNode | None = self
        while current is not None:
            path.append(current)
            current = current.get_parent()
        return path

    def count_nodes(self) -> int:
        """Count the nodes of the subtree rooted here."""
        self._ensure_alive()
        count = 0
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def release(self) -> None:
        """
        Destroy the subtree rooted at this node.

        Every node in the subtree is marked released and drops its children and
        parent reference; any later use of one of them raises ReleasedNodeError.
        Children are owned by their parent, so only a root can be released.
        """
        if self._released:
            return
        if self._parent_ref is not None:
            raise TreeNodeError("Only a root can be released; children live as long as their parent")
        self._release_subtree()

    def _release_subtree(self) -> None:
        """Mark this node and every descendant released."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            stack.extend(node.children)
            node.children = []
            node._parent_ref = None
            node._released = True

    def __iter__(self) -> Iterator[TreeNode]:
        """Return an iterator over the children."""
        return self.get_children()

    def __str__(self) -> str:
        """Return a string representation of the node."""
        return self.__repr__()

    def __repr__(self) -> str:
        """Return a string representation of the node."""
        if self._released:
            return f"{type(self).__name__}(released)"
        return f"{type(self).__name__}(depth={self.depth}, num_children={len(self.children)})"


def _release_orphan(child_ref: weakref.ref[TreeNode]) -> None:
    """Release a child whose parent was garbage collected."""
    child = child_ref()
    if child is not None:
        child._release_subtree()
