"""
Pydantic request / response models for the elnet REST API.

All validation, field constraints, and serialisation logic lives here.
Routes import these models and never define their own.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


# ------------------------------------------------------------------ #
#  Request models
# ------------------------------------------------------------------ #


class NetworkRequest(BaseModel):
    """Payload for ``POST /network``."""

    coordinates: List[List[float]] = Field(
        ..., description="One row of at least `dim` numbers per particle"
    )
    cutoff: float = Field(..., gt=0, description="Bond cutoff radius Rc")
    spring_constant: float = Field(1.0, description="Spring constant K of every bond")
    box: List[float] = Field(
        default_factory=lambda: [-1.0, -1.0, -1.0],
        description="Box lengths per axis; non-positive means open",
    )
    dim: int = Field(3, ge=1, le=3, description="Dimensionality (1, 2 or 3)")
    offset: int = Field(0, description="Added to every particle index")
    method: str = Field("cell_list", description="Search method (cell_list, brute_force)")

    @field_validator("method")
    @classmethod
    def method_must_be_valid(cls, v: str) -> str:
        allowed = {"cell_list", "brute_force"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(
                f"Unknown method '{v}'. Choose from: {', '.join(sorted(allowed))}"
            )
        return v_lower

    @model_validator(mode="after")
    def rows_match_dim(self) -> "NetworkRequest":
        if len(self.box) < self.dim:
            raise ValueError(f"box needs {self.dim} lengths, got {len(self.box)}")
        for index, row in enumerate(self.coordinates):
            if len(row) < self.dim:
                raise ValueError(
                    f"coordinates[{index}] has {len(row)} values, need {self.dim}"
                )
        return self


# ------------------------------------------------------------------ #
#  Response models
# ------------------------------------------------------------------ #


class BondPayload(BaseModel):
    """A single bond."""

    i: int
    j: int
    k: float
    r0: float


class NetworkSummaryResponse(BaseModel):
    """Network summary returned after a successful build."""

    n_particles: int
    n_bonds: int
    box: List[float]
    periodic: List[bool]
    boundary: str
    n_cells: List[int]
    method: str
    offset: int


class NetworkResponse(BaseModel):
    """Response for ``POST /network``."""

    ok: bool = True
    summary: NetworkSummaryResponse
    bonds: List[BondPayload]
    warnings: List[str] = Field(default_factory=list)


class BondsResponse(BaseModel):
    """Response for ``GET /bonds``."""

    ok: bool = True
    bonds: List[BondPayload]


class HealthResponse(BaseModel):
    """Response for ``GET /health``."""

    status: str = "ok"
    version: str
