"""Balanced binary search tree (AVL tree) mapping keys to values."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

CompareFunc = Callable[[Any, Any], int]


class Side(IntEnum):
    """Which child of a node: left or right."""

    LEFT = 0
    RIGHT = 1


class AVLTreeNode:
    """A node of an AVL tree, holding a key and a value."""

    __slots__ = ("key", "value", "parent", "children", "height")

    def __init__(self, key: Any, value: Any, parent: Optional[AVLTreeNode] = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.children: list[Optional[AVLTreeNode]] = [None, None]
        self.height = 1

    def child(self, side: Any) -> Optional[AVLTreeNode]:
        """Return the child on ``side``, or None if absent or ``side`` is invalid."""
        try:
            index = Side(side)
        except ValueError:
            return None
        return self.children[index]

    @property
    def left(self) -> Optional[AVLTreeNode]:
        return self.children[Side.LEFT]

    @property
    def right(self) -> Optional[AVLTreeNode]:
        return self.children[Side.RIGHT]

    def __repr__(self) -> str:
        return f"AVLTreeNode(key={self.key!r}, value={self.value!r})"


def subtree_height(node: Optional[AVLTreeNode]) -> int:
    """Height of the subtree rooted at ``node``; 0 for an empty subtree."""
    return 0 if node is None else node.height


def _update_height(node: AVLTreeNode) -> None:
    node.height = max(subtree_height(node.children[Side.LEFT]),
                      subtree_height(node.children[Side.RIGHT])) + 1


def _parent_side(node: AVLTreeNode) -> Side:
    assert node.parent is not None
    if node.parent.children[Side.LEFT] is node:
        return Side.LEFT
    return Side.RIGHT


class AVLTree:
    """An ordered mapping kept balanced on every insertion and removal.

    Keys are ordered by ``compare_func``, a three-way comparison that
    returns a negative, zero or positive number. Equal keys may be
    inserted more than once; later ones are placed to the right.
    """

    def __init__(self, compare_func: CompareFunc) -> None:
        self.compare_func = compare_func
        self.root_node: Optional[AVLTreeNode] = None
        self._num_nodes = 0

    def __len__(self) -> int:
        return self._num_nodes

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.key

    def __contains__(self, key: Any) -> bool:
        return self.lookup_node(key) is not None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._nodes():
            yield node.key, node.value

    def _nodes(self) -> Iterator[AVLTreeNode]:
        stack: list[AVLTreeNode] = []
        node = self.root_node
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[Side.LEFT]
            node = stack.pop()
            yield node
            node = node.children[Side.RIGHT]

    def _replace(self, node1: AVLTreeNode, node2: Optional[AVLTreeNode]) -> None:
        """Put ``node2`` where ``node1`` hangs from its parent."""
        if node2 is not None:
            node2.parent = node1.parent
        parent = node1.parent
        if parent is None:
            self.root_node = node2
        else:
            parent.children[_parent_side(node1)] = node2
            _update_height(parent)

    def _rotate(self, node: AVLTreeNode, direction: Side) -> AVLTreeNode:
        other = 1 - direction
        new_root = node.children[other]
        assert new_root is not None
        self._replace(node, new_root)

        node.children[other] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[other]
        if moved is not None:
            moved.parent = node

        _update_height(node)
        _update_height(new_root)
        return new_root

    def _balance(self, node: AVLTreeNode) -> AVLTreeNode:
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        diff = subtree_height(right) - subtree_height(left)

        if diff >= 2:
            assert right is not None
            if (subtree_height(right.children[Side.RIGHT])
                    < subtree_height(right.children[Side.LEFT])):
                self._rotate(right, Side.RIGHT)
            node = self._rotate(node, Side.LEFT)
        elif diff <= -2:
            assert left is not None
            if (subtree_height(left.children[Side.LEFT])
                    < subtree_height(left.children[Side.RIGHT])):
                self._rotate(left, Side.LEFT)
            node = self._rotate(node, Side.RIGHT)

        _update_height(node)
        return node

    def _balance_to_root(self, node: Optional[AVLTreeNode]) -> None:
        while node is not None:
            node = self._balance(node).parent

    def insert(self, key: Any, value: Any) -> AVLTreeNode:
        """Insert a key-value pair and return the new node."""
        parent: Optional[AVLTreeNode] = None
        side = Side.LEFT
        rover = self.root_node
        while rover is not None:
            parent = rover
            side = Side.LEFT if self.compare_func(key, rover.key) < 0 else Side.RIGHT
            rover = rover.children[side]

        new_node = AVLTreeNode(key, value, parent)
        if parent is None:
            self.root_node = new_node
        else:
            parent.children[side] = new_node

        self._balance_to_root(parent)
        self._num_nodes += 1
        return new_node

    def _take_replacement(self, node: AVLTreeNode) -> Optional[AVLTreeNode]:
        """Unlink and return the nearest-keyed descendant, or None for a leaf."""
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        if left is None and right is None:
            return None

        side = Side.RIGHT if subtree_height(left) < subtree_height(right) else Side.LEFT
        other = 1 - side
        result = node.children[side]
        assert result is not None
        while result.children[other] is not None:
            result = result.children[other]

        self._replace(result, result.children[side])
        assert result.parent is not None
        _update_height(result.parent)
        return result

    def remove_node(self, node: AVLTreeNode) -> None:
        """Remove ``node``, which must belong to this tree."""
        swap = self._take_replacement(node)

        if swap is None:
            self._replace(node, None)
            start = node.parent
        else:
            start = swap if swap.parent is node else swap.parent
            for side in Side:
                child = node.children[side]
                swap.children[side] = child
                if child is not None:
                    child.parent = swap
            swap.height = node.height
            self._replace(node, swap)

        node.parent = None
        node.children = [None, None]
        self._num_nodes -= 1
        self._balance_to_root(start)

    def remove(self, key: Any) -> bool:
        """Remove an entry with ``key``; return False if there was none."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def lookup_node(self, key: Any) -> Optional[AVLTreeNode]:
        """Return the node holding ``key``, or None."""
        node = self.root_node
        while node is not None:
            diff = self.compare_func(key, node.key)
            if diff == 0:
                return node
            node = node.children[Side.LEFT if diff < 0 else Side.RIGHT]
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        node = self.lookup_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def to_list(self) -> list[Any]:
        """All keys, in order."""
        return list(self)