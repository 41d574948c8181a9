"""
Shared payload schemas for the CLI, the YAML loader and the API service.

Defines the data structures that every entry point consumes and
produces. Keeping them in one place prevents drift between call paths.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import DimensionalityError


# ------------------------------------------------------------------ #
#  Input schemas
# ------------------------------------------------------------------ #


@dataclass
class NetworkConfig:
    """Everything needed to turn one coordinate set into bonds."""

    cutoff: float = 1.0
    spring_constant: float = 1.0
    box: List[float] = field(default_factory=lambda: [-1.0, -1.0, -1.0])
    dim: int = 3
    n_particles: int = -1
    offset: int = 0
    method: str = "cell_list"
    positions: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "NetworkConfig":
        return cls(
            cutoff=float(d.get("cutoff", 1.0)),
            spring_constant=float(d.get("spring_constant", 1.0)),
            box=[float(v) for v in d.get("box", [-1.0, -1.0, -1.0])],
            dim=int(d.get("dim", 3)),
            n_particles=int(d.get("n_particles", -1)),
            offset=int(d.get("offset", 0)),
            method=str(d.get("method", "cell_list")).lower(),
            positions=d.get("positions"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cutoff": self.cutoff,
            "spring_constant": self.spring_constant,
            "box": self.box,
            "dim": self.dim,
            "n_particles": self.n_particles,
            "offset": self.offset,
            "method": self.method,
            "positions": self.positions,
        }

    def validate(self) -> "NetworkConfig":
        """Raise ValueError on inconsistent settings; return self."""
        if self.dim not in (1, 2, 3):
            raise DimensionalityError(
                f"Invalid dimensionality {self.dim}, must be 1, 2 or 3"
            )
        if self.cutoff <= 0:
            raise ValueError(f"Cutoff must be positive, got {self.cutoff}")
        if len(self.box) < self.dim:
            raise ValueError(
                f"Expected {self.dim} box lengths, got {len(self.box)}"
            )
        return self


# ------------------------------------------------------------------ #
#  Output schemas
# ------------------------------------------------------------------ #


@dataclass
class NetworkSummary:
    """Summary returned after a successful build."""

    n_particles: int
    n_bonds: int
    box: List[float]
    periodic: List[bool]
    boundary: str
    n_cells: List[int]
    method: str
    offset: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_particles": self.n_particles,
            "n_bonds": self.n_bonds,
            "box": self.box,
            "periodic": self.periodic,
            "boundary": self.boundary,
            "n_cells": self.n_cells,
            "method": self.method,
            "offset": self.offset,
        }
