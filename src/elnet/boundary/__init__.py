"""
Boundary module: the origin-centered simulation domain.

- Domain: per-axis lengths and periodicity, minimum image convention
- size_domain: finalize raw box lengths against the particle positions
"""

from .domain import MIN_CELLS_PER_AXIS, VALID_DIMS, Domain, check_dim, size_domain

__all__ = [
    "Domain",
    "size_domain",
    "check_dim",
    "VALID_DIMS",
    "MIN_CELLS_PER_AXIS",
]
