"""
Brute-force neighbor search.

Simple O(N²) algorithm that checks all pairs. Good for small systems
and as a reference for the cell list.
"""
from typing import TYPE_CHECKING, Iterator

import numpy as np
from numpy.typing import NDArray

from .neighbor_search import NeighborSearch, Pair

if TYPE_CHECKING:
    from elnet.boundary import Domain


class BruteForceSearch(NeighborSearch):
    """
    Brute-force neighbor search (O(N²) scaling).

    Checks every pair. No optimization, but simple and correct. Good for:
    - Small systems (N < 1000)
    - Debugging
    - Reference implementation

    Example:
        >>> search = BruteForceSearch(cutoff=1.5)
        >>> n_pairs = len(list(search.find_pairs(positions, domain)))
    """

    def find_pairs(
        self,
        positions: NDArray[np.floating],
        domain: "Domain",
    ) -> Iterator[Pair]:
        """
        Check every pair (i, j) with j < i.

        Args:
            positions: (N, D) particle positions.
            domain: For the minimum image convention.
        """
        positions = np.asarray(positions, dtype=np.float64)

        for i in range(1, len(positions)):
            distances = domain.distances(positions[i], positions[:i])
            for j in np.flatnonzero(distances <= self.cutoff).tolist():
                yield i, j, float(distances[j])

    def get_name(self) -> str:
        """Return algorithm name."""
        return "BruteForce"
