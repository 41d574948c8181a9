"""
Coordinate reader.

Input is plain text with one particle per line, "x [y [z]]". Lines that
do not start with D numbers (comments, blank lines, headers) are
skipped; columns beyond D are ignored.
"""
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

import numpy as np
from numpy.typing import NDArray

from elnet.boundary import check_dim
from elnet.core.errors import NetworkInputError


def parse_row(line: str, dim: int) -> Optional[List[float]]:
    """Parse the first dim numbers of a line, or None if it is not a row."""
    fields = line.split()
    if len(fields) < dim:
        return None
    try:
        return [float(value) for value in fields[:dim]]
    except ValueError:
        return None


def parse_count(line: Optional[str]) -> int:
    """Parse the particle count header line."""
    fields = line.split() if line else []
    try:
        count = int(fields[0])
    except (IndexError, ValueError):
        raise NetworkInputError(
            f"Unable to read the number of particles from {line!r}"
        )
    if count < 0:
        raise NetworkInputError(f"Invalid number of particles: {count}")
    return count


def read_positions(
    lines: Union[TextIO, Iterable[str]],
    n_particles: int,
    dim: int = 3,
) -> NDArray[np.floating]:
    """
    Read exactly N particle positions.

    Args:
        lines: Open text stream or any iterable of lines; consumed once.
        n_particles: Number of rows to read. A negative value means the
            count is on the first line of the input.
        dim: Number of coordinates per row (1, 2 or 3).

    Returns:
        (N, dim) float64 array.

    Raises:
        NetworkInputError: The count header is unreadable, or the input
            ends before N valid rows were found.
    """
    dim = check_dim(dim)
    lines = iter(lines)

    if n_particles < 0:
        n_particles = parse_count(next(lines, None))

    rows: List[List[float]] = []
    if n_particles > 0:
        for line in lines:
            row = parse_row(line, dim)
            if row is None:
                continue
            rows.append(row)
            if len(rows) >= n_particles:
                break

    if len(rows) < n_particles:
        raise NetworkInputError(
            f"End of file reached prematurely: read {len(rows)} of "
            f"{n_particles} particles"
        )

    return np.array(rows, dtype=np.float64).reshape(n_particles, dim)


def load_positions(
    path: Union[str, Path],
    n_particles: int,
    dim: int = 3,
) -> NDArray[np.floating]:
    """
    Read positions from a file.

    Args:
        path: Coordinate file.
        n_particles: Number of rows, or negative to read it from the file.
        dim: Coordinates per row.
    """
    try:
        with open(path, "r") as f:
            return read_positions(f, n_particles, dim)
    except OSError as exc:
        raise NetworkInputError(f"Unable to open file {path}: {exc}") from exc
