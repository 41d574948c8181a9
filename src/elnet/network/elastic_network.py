"""
Elastic network generation.

Every pair of particles within the cutoff becomes a harmonic bond
(i, j, K, r0): K is the common spring constant and r0 the observed
minimum-image distance, used as the equilibrium length.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from elnet.boundary import Domain, check_dim, size_domain
from elnet.core.errors import DimensionalityError
from elnet.neighbor import NeighborSearch, create_search


@dataclass(frozen=True)
class Bond:
    """
    A single elastic network bond.

    Attributes:
        i: Global index of the first particle (offset applied).
        j: Global index of the second particle, always j < i locally.
        k: Spring constant.
        r0: Equilibrium length, the minimum-image distance.
    """

    i: int
    j: int
    k: float
    r0: float

    def to_dict(self) -> Dict[str, Any]:
        return {"i": self.i, "j": self.j, "k": self.k, "r0": self.r0}


@dataclass
class ElasticNetwork:
    """Bonds of one run plus the geometry they were computed in."""

    bonds: List[Bond]
    domain: Domain
    n_particles: int
    method: str
    offset: int = 0
    n_cells: List[int] = field(default_factory=list)

    @property
    def n_bonds(self) -> int:
        return len(self.bonds)


def prepare_positions(
    positions: ArrayLike, dim: Optional[int] = None
) -> NDArray[np.floating]:
    """
    Coerce positions to an (N, D) float array.

    Columns beyond D are dropped so that no later stage can read them.

    Args:
        positions: (N, >=D) array-like, or (N,) for one dimension.
        dim: Dimensionality; inferred from the column count when None.

    Returns:
        (N, D) float64 array.
    """
    positions = np.asarray(positions, dtype=np.float64)
    if positions.ndim == 1:
        if dim not in (None, 1) and positions.size > 0:
            raise DimensionalityError(
                f"1-D coordinate array given for dimensionality {dim}"
            )
        positions = positions.reshape(-1, 1)
    if positions.ndim != 2:
        raise DimensionalityError(
            f"positions must be an (N, D) array, got shape {positions.shape}"
        )

    if dim is None:
        dim = positions.shape[1]
    dim = check_dim(dim)

    if len(positions) > 0 and positions.shape[1] < dim:
        raise DimensionalityError(
            f"positions have {positions.shape[1]} components, need {dim}"
        )
    if len(positions) == 0:
        return np.empty((0, dim), dtype=np.float64)
    return np.ascontiguousarray(positions[:, :dim])


def generate_bonds(
    positions: ArrayLike,
    cutoff: float,
    spring_constant: float,
    box: Sequence[float],
    dim: Optional[int] = None,
    offset: int = 0,
    method: str = "cell_list",
    search: Optional[NeighborSearch] = None,
) -> Iterator[Bond]:
    """
    Lazily generate elastic network bonds.

    Validation and domain sizing happen before the iterator is returned,
    so a fatal error never leaves a partially consumed bond stream.

    Args:
        positions: (N, D) particle positions.
        cutoff: Inclusive bond cutoff Rc.
        spring_constant: K, identical for every bond.
        box: Raw box lengths, one per axis; non-positive means open.
        dim: Dimensionality (1, 2 or 3); inferred when None.
        offset: Added to both particle indices of every bond.
        method: Neighbor search name, ignored when search is given.
        search: Explicit NeighborSearch instance.

    Returns:
        Iterator over Bond records.
    """
    positions = prepare_positions(positions, dim)
    domain = size_domain(box, positions, cutoff)
    if search is None:
        search = create_search(method, cutoff)
    return _emit(search, positions, domain, float(spring_constant), int(offset))


def _emit(
    search: NeighborSearch,
    positions: NDArray[np.floating],
    domain: Domain,
    spring_constant: float,
    offset: int,
) -> Iterator[Bond]:
    for i, j, r in search.find_pairs(positions, domain):
        yield Bond(offset + i, offset + j, spring_constant, r)


def build_elastic_network(
    positions: ArrayLike,
    cutoff: float,
    spring_constant: float,
    box: Sequence[float],
    dim: Optional[int] = None,
    offset: int = 0,
    method: str = "cell_list",
) -> ElasticNetwork:
    """
    Build the complete elastic network for one set of positions.

    Args:
        positions: (N, D) particle positions.
        cutoff: Inclusive bond cutoff Rc.
        spring_constant: K, identical for every bond.
        box: Raw box lengths; non-positive entries mark open axes.
        dim: Dimensionality; inferred when None.
        offset: Index shift for composing several networks.
        method: "cell_list" (default) or "brute_force".

    Returns:
        ElasticNetwork holding the bonds and the finalized domain.

    Example:
        >>> net = build_elastic_network([[0.0], [1.0], [2.0]], 1.5, 10.0, [-1])
        >>> [(b.i, b.j) for b in net.bonds]
        [(1, 0), (2, 1)]
    """
    positions = prepare_positions(positions, dim)
    domain = size_domain(box, positions, cutoff)
    search = create_search(method, cutoff)
    bonds = list(
        _emit(search, positions, domain, float(spring_constant), int(offset))
    )

    grid = getattr(search, "grid", None)
    n_cells = grid.n_cells.tolist() if grid is not None else []
    return ElasticNetwork(
        bonds=bonds,
        domain=domain,
        n_particles=len(positions),
        method=search.get_name(),
        offset=int(offset),
        n_cells=n_cells,
    )


def elastic_network(
    positions: ArrayLike,
    cutoff: float,
    spring_constant: float,
    box: Sequence[float],
    dim: Optional[int] = None,
    offset: int = 0,
    method: str = "cell_list",
) -> List[Bond]:
    """Return the bond list only; see build_elastic_network."""
    return build_elastic_network(
        positions, cutoff, spring_constant, box, dim, offset, method
    ).bonds
