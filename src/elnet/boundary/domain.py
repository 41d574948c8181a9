"""
Simulation domain with per-axis periodicity.

Each axis is either periodic (the caller supplied a positive length) or
open (the length is inferred from the coordinates). The domain is always
centered on the origin, i.e. it spans [-L/2, L/2) along every axis.
"""
import warnings
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from elnet.core.errors import BoxGrowthWarning, DimensionalityError

VALID_DIMS = (1, 2, 3)

# Narrowest box, in cutoffs, that keeps the 3-wide cell stencil from
# wrapping onto itself.
MIN_CELLS_PER_AXIS = 3


def check_dim(dim: int) -> int:
    """Validate a dimensionality and return it as an int."""
    if dim not in VALID_DIMS:
        raise DimensionalityError(
            f"Invalid dimensionality {dim}, must be 1, 2 or 3"
        )
    return int(dim)


@dataclass(frozen=True)
class Domain:
    """
    Orthogonal box with mixed periodic/open axes.

    Attributes:
        lengths: (D,) final box lengths.
        periodic: (D,) boolean flags, True for wraparound axes.

    Example:
        >>> domain = Domain(np.array([10.0]), np.array([True]))
        >>> corrected = domain.minimum_image(np.array([[9.8]]))
        >>> print(corrected)  # [[-0.2]]
    """

    lengths: NDArray[np.floating]
    periodic: NDArray[np.bool_]

    def __post_init__(self) -> None:
        lengths = np.array(self.lengths, dtype=np.float64)
        periodic = np.array(self.periodic, dtype=bool)
        if lengths.ndim != 1 or lengths.shape != periodic.shape:
            raise DimensionalityError(
                "lengths and periodic must be 1-D arrays of equal size"
            )
        check_dim(len(lengths))
        lengths.flags.writeable = False
        periodic.flags.writeable = False
        object.__setattr__(self, "lengths", lengths)
        object.__setattr__(self, "periodic", periodic)

    @property
    def dim(self) -> int:
        """Number of spatial dimensions."""
        return len(self.lengths)

    def minimum_image(self, vector: NDArray[np.floating]) -> NDArray[np.floating]:
        """
        Apply the minimum image convention along periodic axes.

        Args:
            vector: (N, D) or (D,) displacement vectors r_j - r_i.

        Returns:
            Corrected copy; open-axis components are left unchanged.
        """
        result = np.array(vector, dtype=np.float64)
        for k in np.flatnonzero(self.periodic):
            L = self.lengths[k]
            component = result[..., k]
            result[..., k] = component - np.floor(component / L + 0.5) * L
        return result

    def distances(
        self,
        position: NDArray[np.floating],
        others: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """
        Minimum-image distances from one position to many.

        Only the first D components of each vector are used.

        Args:
            position: (D,) reference position r_i.
            others: (M, D) positions r_j.

        Returns:
            (M,) distances |r_j - r_i|.
        """
        dr = others[..., : self.dim] - position[: self.dim]
        dr = self.minimum_image(dr)
        return np.sqrt(np.sum(dr * dr, axis=-1))

    def get_name(self) -> str:
        """
        Return descriptive name showing which axes are periodic.

        Returns:
            String like "Periodic(X)", "Open" or "Mixed(XY periodic)".
        """
        axis_names = "XYZ"
        periodic_names = "".join(
            axis_names[k] for k in range(self.dim) if self.periodic[k]
        )
        if not periodic_names:
            return "Open"
        if len(periodic_names) == self.dim:
            return f"Periodic({periodic_names})"
        return f"Mixed({periodic_names} periodic)"


def size_domain(
    raw_lengths: Sequence[float],
    positions: NDArray[np.floating],
    cutoff: float,
) -> Domain:
    """
    Finalize per-axis box lengths and periodicity.

    A positive raw length makes its axis periodic with that length. A
    non-positive one marks the axis open; its length grows until every
    coordinate fits inside the origin-centered box. Finally every axis is
    widened to at least three cutoffs, emitting a BoxGrowthWarning.

    Args:
        raw_lengths: At least D raw lengths; extras are ignored.
        positions: (N, D) particle positions.
        cutoff: Bond cutoff radius Rc.

    Returns:
        The finalized Domain.
    """
    if cutoff <= 0:
        raise ValueError(f"Cutoff must be positive, got {cutoff}")

    positions = np.asarray(positions, dtype=np.float64)
    if positions.ndim != 2:
        raise DimensionalityError(
            f"positions must be an (N, D) array, got shape {positions.shape}"
        )
    dim = check_dim(positions.shape[1])
    if len(raw_lengths) < dim:
        raise DimensionalityError(
            f"Expected {dim} box lengths, got {len(raw_lengths)}"
        )

    lengths = np.array(raw_lengths[:dim], dtype=np.float64)
    periodic = lengths > 0

    if len(positions) > 0:
        extent = 2.0 * np.max(np.abs(positions), axis=0)
        open_axes = ~periodic
        lengths[open_axes] = np.maximum(lengths[open_axes], extent[open_axes])

    min_length = MIN_CELLS_PER_AXIS * cutoff
    for k in range(dim):
        if lengths[k] < min_length:
            lengths[k] = min_length
            warnings.warn(
                f"L[{k}] box dimension too narrow, increased to "
                f"L[{k}] = {lengths[k]:f}",
                BoxGrowthWarning,
                stacklevel=2,
            )

    return Domain(lengths=lengths, periodic=periodic)
