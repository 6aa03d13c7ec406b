"""
Union-Find (Disjoint Set Union) over the contiguous elements 1..N.

- find(x): Which set contains x? - O(log N)
- union(x, y): Merge sets containing x and y - O(log N)
- is_in_same_set(x, y) / is_disjoint(x, y) - O(log N)
- count_sets() / get_sets(): Scan the whole partition - O(N log N) worst case

Trees are balanced by size only. Paths are never compressed, so the root
reported by find() depends on the union order alone.
"""

import logging
import operator

import numpy as np

from .constants import INDEX_DTYPE
from .errors import InvalidElement

logger = logging.getLogger(__name__)

type Element = int


class Partition:
    """
    Partition of the elements 1..N into disjoint sets, with union by size.

    Elements are exposed 1-based and stored 0-based.

    Example:
        >>> partition = Partition(4)
        >>> partition.union(1, 2)
        >>> partition.union(2, 3)
        >>> partition.is_in_same_set(1, 3)
        True
        >>> partition.is_disjoint(1, 4)
        True
        >>> partition.count_sets()
        2
    """

    def __init__(self, n: int) -> None:
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"A partition cannot have a negative size: {n}")

        # parent[i] == i iff i is a root; weight[i] is only read on roots
        self._parent = np.arange(n, dtype=INDEX_DTYPE)
        self._weight = np.ones(n, dtype=INDEX_DTYPE)
        logger.debug(f"Partition of {n} elements created")

    def __len__(self) -> int:
        return len(self._parent)

    def _index(self, element: Element) -> int:
        """Validate a 1-based element and shift it to its array index."""
        element = operator.index(element)
        if element < 1 or element > len(self._parent):
            logger.debug(f"Rejected element {element} for size {len(self)}")
            raise InvalidElement(element, len(self._parent))
        return element - 1

    def _find_root(self, index: int) -> int:
        parent = self._parent
        while parent[index] != index:
            index = int(parent[index])
        return index

    def find(self, element: Element) -> Element:
        """
        Find the representative of the set containing element.

        A singleton that was never merged is its own representative.
        """
        return self._find_root(self._index(element)) + 1

    def union(self, i: Element, j: Element) -> None:
        """
        Merge the sets containing i and j.

        The root of the smaller set is attached under the root of the larger
        one. On equal sizes, the root of i stays the root.
        """
        r1 = self._find_root(self._index(i))
        r2 = self._find_root(self._index(j))
        if r1 == r2:
            return

        if self._weight[r1] < self._weight[r2]:
            r1, r2 = r2, r1
        self._parent[r2] = r1
        self._weight[r1] += self._weight[r2]
        logger.debug(
            f"Merged root {r2 + 1} into root {r1 + 1} (size {self._weight[r1]})"
        )

    def is_in_same_set(self, i: Element, j: Element) -> bool:
        """Check if i and j are in the same set."""
        return self.find(i) == self.find(j)

    def is_disjoint(self, i: Element, j: Element) -> bool:
        """Check if i and j are in different sets."""
        return not self.is_in_same_set(i, j)

    def set_size(self, element: Element) -> int:
        """Number of elements in the set containing element."""
        return int(self._weight[self._find_root(self._index(element))])

    def count_sets(self) -> int:
        """Count the distinct roots, marking each one in a bitmap."""
        seen = np.zeros(len(self._parent), dtype=bool)
        for index in range(len(self._parent)):
            seen[self._find_root(index)] = True
        return int(np.count_nonzero(seen))

    def get_sets(self) -> list[set[Element]]:
        """
        Get all disjoint sets.

        Returns:
            One set of 1-based elements per root, in no particular order.
        """
        sets: dict[int, set[Element]] = {}
        for index in range(len(self._parent)):
            root = self._find_root(index)
            if root not in sets:
                sets[root] = set()
            sets[root].add(index + 1)
        return list(sets.values())

    def __repr__(self) -> str:
        return f"Partition(n={len(self)}, sets={self.count_sets()})"

    def __str__(self) -> str:
        return (
            f"{object.__repr__(self)} {self.count_sets()} sets ({self.get_sets()})"
        )
