"""
Supporting data structures consumed by the graph algorithms.

This module provides the small primitives the algorithm suite relies on:
- ``DisjointSet``: union-find with path compression and union by size
- ``Stack``: last-in-first-out stack whose ``pop`` reports success

The generic set primitive is Python's built-in ``set``.

Time complexity of ``DisjointSet``:
- find: O(α(n)) amortized (α is the inverse Ackermann function)
- union: O(α(n)) amortized
"""

from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class DisjointSet:
    """
    Partition of elements into disjoint groups.

    Attributes:
        parents (Dict[Hashable, Hashable]): Parent of each element in its tree
        sizes (Dict[Hashable, int]): Size of the set rooted at each root
    """

    __slots__ = ("parents", "sizes")

    def __init__(self) -> None:
        """Initialize an empty disjoint-set forest."""
        self.parents: Dict[Hashable, Hashable] = {}
        self.sizes: Dict[Hashable, int] = {}

    def make_set(self, element: Hashable) -> None:
        """Create a singleton set for ``element``; no-op if already present."""
        if element not in self.parents:
            self.parents[element] = element
            self.sizes[element] = 1

    def find(self, element: Hashable) -> Hashable:
        """
        Find the representative of the set containing ``element``.

        Elements never passed to ``make_set`` are their own representative.
        Every node visited on the way to the root is re-pointed at the root.

        Args:
            element: Element to look up

        Returns:
            Hashable: Root of the element's set
        """
        if element not in self.parents:
            return element

        root = element
        while self.parents[root] != root:
            root = self.parents[root]

        # Path compression
        while self.parents[element] != root:
            self.parents[element], element = root, self.parents[element]
        return root

    def union(self, root1: Hashable, root2: Hashable) -> Hashable:
        """
        Merge the sets represented by ``root1`` and ``root2``.

        The smaller tree is attached below the larger one. Arguments are
        expected to be representatives as returned by ``find``.

        Returns:
            Hashable: Representative of the merged set
        """
        root1 = self.find(root1)
        root2 = self.find(root2)
        if root1 == root2:
            return root1

        size1 = self.sizes.get(root1, 1)
        size2 = self.sizes.get(root2, 1)
        if size1 < size2:
            root1, root2 = root2, root1

        self.parents[root2] = root1
        self.parents.setdefault(root1, root1)
        self.sizes[root1] = size1 + size2
        self.sizes.pop(root2, None)
        return root1

    def __contains__(self, element: Hashable) -> bool:
        return element in self.parents

    def __len__(self) -> int:
        """Number of disjoint sets."""
        return len(self.sizes)


class Stack(Generic[T]):
    """Last-in-first-out stack."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Tuple[Optional[T], bool]:
        """Remove and return the top value with ``True``, or ``(None, False)`` when empty."""
        if not self._items:
            return None, False
        return self._items.pop(), True

    def peek(self) -> Tuple[Optional[T], bool]:
        """Return the top value without removing it."""
        if not self._items:
            return None, False
        return self._items[-1], True

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
