"""Red-black tree of integer keys with a sentinel leaf."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Color(Enum):
    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A tree node; new nodes are black until the tree colours them."""

    key: int = 0
    color: Color = Color.BLACK
    parent: Optional["RBNode"] = field(default=None, repr=False)
    left: Optional["RBNode"] = field(default=None, repr=False)
    right: Optional["RBNode"] = field(default=None, repr=False)


_ANSI = {Color.BLACK: "\x1b[34m", Color.RED: "\x1b[31m"}
_RESET = "\x1b[0m"


class RedBlackTree:
    """Self-balancing binary search tree.

    Rules kept after every change: the root is black, leaves (the shared
    sentinel) are black, a red node has only black children, and every path
    from a node down to a leaf passes the same number of black nodes.
    """

    def __init__(self) -> None:
        self._nil = RBNode()
        self._nil.parent = self._nil.left = self._nil.right = self._nil
        self._root = self._nil
        self._size = 0

    @property
    def root(self) -> Optional[RBNode]:
        """The root node, or ``None`` for an empty tree."""
        return None if self._root is self._nil else self._root

    def is_nil(self, node: Optional[RBNode]) -> bool:
        """True for the sentinel leaf (or ``None``)."""
        return node is None or node is self._nil

    def __len__(self) -> int:
        return self._size

    def insert(self, key: int) -> RBNode:
        """Add ``key`` (duplicates go to the right) and rebalance."""
        node = self._root
        parent = self._nil
        while node is not self._nil:
            parent = node
            node = node.left if key < node.key else node.right

        new = RBNode(key, Color.RED, parent, self._nil, self._nil)
        if parent is self._nil:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)
        return new

    def _insert_fixup(self, node: RBNode) -> None:
        while node.parent.color is Color.RED:
            grand = node.parent.parent
            if node.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self.left_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self.right_rotate(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self.right_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self.left_rotate(node.parent.parent)
        self._root.color = Color.BLACK

    def delete(self, key: int) -> None:
        """Remove one node holding ``key``; raise KeyError if there is none."""
        target = self.search(key)
        if target is None:
            raise KeyError(key)

        moved = target
        moved_color = moved.color
        if target.left is self._nil:
            child = target.right
            self._transplant(target, target.right)
        elif target.right is self._nil:
            child = target.left
            self._transplant(target, target.left)
        else:
            moved = self.minimum(target.right)
            moved_color = moved.color
            child = moved.right
            if moved.parent is target:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = target.right
                moved.right.parent = moved
            self._transplant(target, moved)
            moved.left = target.left
            moved.left.parent = moved
            moved.color = target.color

        self._size -= 1
        if moved_color is Color.BLACK:
            self._delete_fixup(child)
        self._nil.parent = self._nil

    def _transplant(self, old: RBNode, new: RBNode) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _delete_fixup(self, node: RBNode) -> None:
        while node is not self._root and node.color is Color.BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self.left_rotate(parent)
                    sibling = parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self.right_rotate(sibling)
                        sibling = parent.right
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self.left_rotate(parent)
                    node = self._root
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self.right_rotate(parent)
                    sibling = parent.left
                if sibling.right.color is Color.BLACK and sibling.left.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self.left_rotate(sibling)
                        sibling = parent.left
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self.right_rotate(parent)
                    node = self._root
        node.color = Color.BLACK

    def search(self, key: int) -> Optional[RBNode]:
        """Return a node holding ``key``, or ``None``."""
        node = self._root
        while node is not self._nil and node.key != key:
            node = node.left if key < node.key else node.right
        return None if node is self._nil else node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def _require(self, node: Optional[RBNode]) -> RBNode:
        if self.is_nil(node):
            raise ValueError("expected a tree node, got a leaf")
        return node

    def minimum(self, node: RBNode) -> RBNode:
        """Leftmost node of the subtree rooted at ``node``."""
        node = self._require(node)
        while node.left is not self._nil:
            node = node.left
        return node

    def maximum(self, node: RBNode) -> RBNode:
        """Rightmost node of the subtree rooted at ``node``."""
        node = self._require(node)
        while node.right is not self._nil:
            node = node.right
        return node

    def successor(self, node: RBNode) -> Optional[RBNode]:
        """The node that follows ``node`` in key order, or ``None``."""
        node = self._require(node)
        if node.right is not self._nil:
            return self.minimum(node.right)
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node = parent
            parent = parent.parent
        return None if parent is self._nil else parent

    def __iter__(self) -> Iterator[int]:
        if self._root is self._nil:
            return
        node: Optional[RBNode] = self.minimum(self._root)
        while node is not None:
            yield node.key
            node = self.successor(node)

    def left_rotate(self, node: RBNode) -> None:
        """Lift ``node``'s right child into its place."""
        x = self._require(node)
        y = x.right
        if y is self._nil:
            raise ValueError("cannot rotate left without a right child")
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def right_rotate(self, node: RBNode) -> None:
        """Lift ``node``'s left child into its place."""
        y = self._require(node)
        x = y.left
        if x is self._nil:
            raise ValueError("cannot rotate right without a left child")
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
        x.right = y
        y.parent = x

    def render(self) -> str:
        """Draw the tree as text: black keys in blue, red keys in red.

        The root starts at column 10; a child on row ``y + 1`` sits
        ``5 // (y + 1)`` columns to the left or right of its parent.
        """
        cells: dict[tuple[int, int], tuple[str, Color]] = {}

        def place(node: RBNode, x: int, y: int) -> None:
            if node is self._nil:
                return
            for offset, char in enumerate(str(node.key)):
                cells[(x + offset, y)] = (char, node.color)
            step = 5 // (y + 1)
            place(node.left, x - step, y + 1)
            place(node.right, x + step, y + 1)

        place(self._root, 10, 0)
        if not cells:
            return ""

        shift = max(0, -min(x for x, _ in cells))
        rows = max(y for _, y in cells) + 1
        lines = []
        for y in range(rows):
            columns = [x for x, row in cells if row == y]
            parts: list[str] = []
            current: Optional[Color] = None
            for x in range(min(columns, default=0) - shift if False else -shift, max(columns, default=-1) + 1):
                cell = cells.get((x, y))
                color = cell[1] if cell else None
                if color is not current:
                    if current is not None:
                        parts.append(_RESET)
                    if color is not None:
                        parts.append(_ANSI[color])
                    current = color
                parts.append(cell[0] if cell else " ")
            if current is not None:
                parts.append(_RESET)
            lines.append("".join(parts))
        return "\n".join(lines)