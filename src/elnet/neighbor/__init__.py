"""
Neighbor search module for elastic network construction.

This module provides Strategy pattern implementations for finding all
pairs within a cutoff:
- BruteForceSearch: O(N²), reference implementation
- CellListSearch: O(N) link-cell search, the default
"""

from .brute_force import BruteForceSearch
from .cell_list import CellGrid, CellListBuilder, CellListSearch
from .neighbor_search import NeighborSearch, Pair

SEARCH_METHODS = {
    "cell_list": CellListSearch,
    "brute_force": BruteForceSearch,
}


def create_search(method: str, cutoff: float) -> NeighborSearch:
    """
    Create a neighbor search by name.

    Args:
        method: "cell_list" or "brute_force".
        cutoff: Bond cutoff distance.
    """
    key = method.lower()
    if key not in SEARCH_METHODS:
        raise ValueError(
            f"Unknown search method '{method}'. "
            f"Choose from: {', '.join(sorted(SEARCH_METHODS))}"
        )
    return SEARCH_METHODS[key](cutoff)


__all__ = [
    "NeighborSearch",
    "Pair",
    "BruteForceSearch",
    "CellListSearch",
    "CellListBuilder",
    "CellGrid",
    "SEARCH_METHODS",
    "create_search",
]
