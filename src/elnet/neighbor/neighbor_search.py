"""
Abstract base class for neighbor search algorithms.

This module provides the NeighborSearch ABC that defines the interface
for all pair search strategies (CellList, BruteForce).
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Tuple

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from elnet.boundary import Domain

# (i, j, r) with j < i
Pair = Tuple[int, int, float]


class NeighborSearch(ABC):
    """
    Abstract base for neighbor search algorithms (Strategy Pattern).

    A search visits every unordered pair of particles closer than the
    cutoff exactly once, reported as (i, j, r) with j < i and r the
    minimum-image distance. Pairs at exactly the cutoff are included.

    Attributes:
        cutoff: Inclusive bond cutoff distance.

    Example:
        >>> from elnet.neighbor import CellListSearch
        >>> search = CellListSearch(cutoff=1.5)
        >>> pairs = list(search.find_pairs(positions, domain))
    """

    def __init__(self, cutoff: float) -> None:
        """
        Initialize neighbor search.

        Args:
            cutoff: Bond cutoff distance, must be positive.
        """
        if cutoff <= 0:
            raise ValueError(f"Cutoff must be positive, got {cutoff}")
        self.cutoff = float(cutoff)

    @abstractmethod
    def find_pairs(
        self,
        positions: NDArray[np.floating],
        domain: "Domain",
    ) -> Iterator[Pair]:
        """
        Enumerate all pairs within the cutoff.

        Args:
            positions: (N, D) particle positions.
            domain: Finalized domain (lengths and periodicity).

        Yields:
            (i, j, r) tuples in a deterministic order.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this search algorithm."""
        pass

    def get_all_pairs(
        self,
        positions: NDArray[np.floating],
        domain: "Domain",
    ) -> List[Tuple[int, int]]:
        """
        Get all pairs as a list of (i, j) tuples.

        Returns:
            List of tuples (i, j) where j < i.
        """
        return [(i, j) for i, j, _ in self.find_pairs(positions, domain)]
