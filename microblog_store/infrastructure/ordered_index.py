"""
Ordered index - left-leaning red-black tree shared by every store
"""
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Compare = Callable[[Any, Any], int]
Probe = Callable[[Any], int]

RED = True
BLACK = False


class TraversalOrder(str, Enum):
    """Direction of an in-order walk"""
    ASCENDING = "ascending"
    DESCENDING = "descending"


def natural_order(left: Any, right: Any) -> int:
    """Three-way comparison using the keys' own ordering"""
    return (left > right) - (left < right)


class _Node:
    __slots__ = ("key", "value", "left", "right", "color")

    def __init__(self, key, value, color: bool):
        self.key = key
        self.value = value
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None
        self.color = color


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.color == RED


def _rotate_left(h: _Node) -> _Node:
    x = h.right
    h.right = x.left
    x.left = h
    x.color = h.color
    h.color = RED
    return x


def _rotate_right(h: _Node) -> _Node:
    x = h.left
    h.left = x.right
    x.right = h
    x.color = h.color
    h.color = RED
    return x


def _flip_colors(h: _Node) -> None:
    h.color = RED
    h.left.color = BLACK
    h.right.color = BLACK


class OrderedIndex(Generic[K, V]):
    """
    Balanced binary search tree keyed under a three-way comparator.

    The tree never checks for duplicates. Identity indexes must look the key
    up before inserting; order indexes (dates, terms) hold repeated keys, which
    are always routed into the left subtree. A descending walk therefore
    yields entries that share a key in the order they were inserted.
    """

    def __init__(self, compare: Optional[Compare] = None):
        self._compare: Compare = compare or natural_order
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[V]:
        return self.values(TraversalOrder.ASCENDING)

    def insert(self, key: K, value: V) -> None:
        """Insert a key/value pair and rebalance"""
        self._root = self._insert(self._root, key, value)
        self._root.color = BLACK

    def _insert(self, h: Optional[_Node], key, value) -> _Node:
        if h is None:
            self._size += 1
            return _Node(key, value, RED)

        if self._compare(key, h.key) <= 0:
            h.left = self._insert(h.left, key, value)
        else:
            h.right = self._insert(h.right, key, value)

        if _is_red(h.right) and not _is_red(h.left):
            h = _rotate_left(h)
        if _is_red(h.left) and _is_red(h.left.left):
            h = _rotate_right(h)
        if _is_red(h.left) and _is_red(h.right):
            _flip_colors(h)
        return h

    def get(self, key: K) -> Optional[V]:
        """Return the value stored under an exact key, or None"""
        node = self._root
        while node is not None:
            comparison = self._compare(key, node.key)
            if comparison == 0:
                return node.value
            node = node.left if comparison < 0 else node.right
        return None

    def __contains__(self, key: K) -> bool:
        node = self._root
        while node is not None:
            comparison = self._compare(key, node.key)
            if comparison == 0:
                return True
            node = node.left if comparison < 0 else node.right
        return False

    def values(
        self, order: TraversalOrder = TraversalOrder.DESCENDING
    ) -> Iterator[V]:
        """Lazily yield every value in key order"""
        if order == TraversalOrder.DESCENDING:
            return self._descending(self._root)
        return self._ascending(self._root)

    def _descending(self, node: Optional[_Node]) -> Iterator[V]:
        if node is None:
            return
        yield from self._descending(node.right)
        yield node.value
        yield from self._descending(node.left)

    def _ascending(self, node: Optional[_Node]) -> Iterator[V]:
        if node is None:
            return
        yield from self._ascending(node.left)
        yield node.value
        yield from self._ascending(node.right)

    def walk(
        self, probe: Probe, order: TraversalOrder = TraversalOrder.DESCENDING
    ) -> Iterator[V]:
        """
        Yield values whose keys fall inside a contiguous region of the ordering.

        Args:
            probe: Called with a key; negative when the key lies below the
                region, positive when above, zero when inside
            order: Direction of the walk

        Subtrees that cannot hold a matching key are skipped. Keys equal to a
        node may live on either side of it after rotations, so a node inside
        the region keeps both of its subtrees.
        """
        return self._walk(self._root, probe, order == TraversalOrder.DESCENDING)

    def _walk(self, node: Optional[_Node], probe: Probe, descending: bool) -> Iterator[V]:
        if node is None:
            return
        position = probe(node.key)
        if position < 0:
            # everything on the left sorts at or below this key
            yield from self._walk(node.right, probe, descending)
            return
        if position > 0:
            yield from self._walk(node.left, probe, descending)
            return

        first, second = (node.right, node.left) if descending else (node.left, node.right)
        yield from self._walk(first, probe, descending)
        yield node.value
        yield from self._walk(second, probe, descending)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path"""

        def measure(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self._root)
