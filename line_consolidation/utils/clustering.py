"""
This module provides:
    • first_fit_bins()
    • DisjointSet
    • combine_bins()
"""

from typing import Any, Callable, Dict, List


# -------------------------------------------------------------------------
#  FIRST-FIT BINNING
# -------------------------------------------------------------------------

def first_fit_bins(items: List[Any], matches: Callable[[Any, Any], bool]) -> List[List[Any]]:
    """
    Assigns every item to the first existing bin holding a member it
    matches, or opens a new bin.

    Bins are scanned in creation order and members in insertion order, so
    the result depends on input order. Two items that match each other can
    still land in different bins when an earlier item bound one of them
    elsewhere first.

    matches(candidate, member) -> bool
    """
    bins: List[List[Any]] = []

    for item in items:
        dest = None
        for bin_ in bins:
            if any(matches(item, member) for member in bin_):
                dest = bin_
                break

        if dest is not None:
            dest.append(item)
        else:
            bins.append([item])

    return bins


# -------------------------------------------------------------------------
#  UNION-FIND
# -------------------------------------------------------------------------

class DisjointSet:
    """
    Union-find over the integers 0..n-1 with path compression.

    union(a, b) always keeps the smaller index as the root, so the root of
    a set is its lowest member.
    """

    def __init__(self, size: int = 0):
        self.parent: List[int] = list(range(size))

    def add(self) -> int:
        idx = len(self.parent)
        self.parent.append(idx)
        return idx

    def find(self, idx: int) -> int:
        root = idx
        while self.parent[root] != root:
            root = self.parent[root]

        # compress
        while self.parent[idx] != root:
            self.parent[idx], idx = root, self.parent[idx]

        return root

    def union(self, a: int, b: int) -> int:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        if rb < ra:
            ra, rb = rb, ra
        self.parent[rb] = ra
        return ra

    def __len__(self):
        return len(self.parent)


# -------------------------------------------------------------------------
#  COMBINE BINS BY ROOT
# -------------------------------------------------------------------------

def combine_bins(bins: List[List[Any]], sets: DisjointSet) -> List[List[Any]]:
    """
    Concatenates bins that share a union-find root.

    Output order follows the roots' creation order; inside a combined bin
    the members of lower-index bins come first. Empty results are dropped.
    """
    combined: Dict[int, List[Any]] = {}

    for idx, bin_ in enumerate(bins):
        combined.setdefault(sets.find(idx), []).extend(bin_)

    return [members for _, members in sorted(combined.items()) if members]
