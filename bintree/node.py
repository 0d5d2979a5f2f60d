"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its relatives.

    Creating a node with a ``parent`` records the parent but does not attach
    the node as one of the parent's children; use :meth:`insert_left` or
    :meth:`insert_right` for that.
    """

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        new_node = Node(value, parent=self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        new_node = Node(value, parent=self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def detach(self) -> None:
        """Remove this subtree from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values root, left, right."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values left, root, right."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values left, right, root."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        if self.is_leaf():
            return 0
        return 1 + max(
            child.height() if child is not None else 0
            for child in (self.left, self.right)
        )

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        return sum(1 for _ in self._lineage()) - 1

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self.preorder())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            node.is_leaf() or (node.left is not None and node.right is not None)
            for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """Return True if the tree is full and all leaves share one level."""
        expected = sum(1 for _ in self._left_spine())
        return _is_perfect(self, expected, 0)

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _lineage(self) -> Iterator[Node]:
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent

    def _left_spine(self) -> Iterator[Node]:
        node: Node | None = self
        while node is not None:
            yield node
            node = node.left

    def _nodes(self) -> Iterator[Node]:
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(c for c in (node.right, node.left) if c is not None)


def _levels(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))


def _is_perfect(node: Node | None, expected: int, level: int) -> bool:
    if node is None:
        return True
    if node.is_leaf():
        return expected == level + 1
    if node.left is None or node.right is None:
        return False
    return _is_perfect(node.left, expected, level + 1) and _is_perfect(
        node.right, expected, level + 1
    )


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both, or None."""
    if first is None or second is None:
        return None
    second_lineage = {id(node) for node in second._lineage()}
    return next(
        (node for node in first._lineage() if id(node) in second_lineage), None
    )