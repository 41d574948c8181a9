"""
Backend service layer for elnet.

Framework-independent logic consumed by both the command line and the
FastAPI transport layer. No references to argparse, FastAPI, or any
transport concern belong here.
"""
from __future__ import annotations

from typing import List, Optional, TextIO

import numpy as np
from numpy.typing import ArrayLike

from elnet.core.errors import NetworkInputError
from elnet.core.schemas import NetworkConfig, NetworkSummary
from elnet.io import bonds_to_text, load_positions, read_positions, write_bonds
from elnet.network import Bond, ElasticNetwork, build_elastic_network


class NetworkService:
    """Holds the most recently built network.  One instance per session."""

    def __init__(self):
        self._network: Optional[ElasticNetwork] = None
        self._config: Optional[NetworkConfig] = None

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def has_network(self) -> bool:
        return self._network is not None

    # ------------------------------------------------------------------ #
    #  Build
    # ------------------------------------------------------------------ #

    def build_network(
        self, config: NetworkConfig, positions: ArrayLike
    ) -> NetworkSummary:
        """Build the network for already-parsed *positions*.

        Returns a :class:`NetworkSummary`; the bonds stay available via
        :meth:`get_bonds`.
        """
        config.validate()
        positions = np.asarray(positions, dtype=np.float64)
        if config.n_particles >= 0:
            if len(positions) < config.n_particles:
                raise NetworkInputError(
                    f"Expected {config.n_particles} particles, got {len(positions)}"
                )
            positions = positions[: config.n_particles]

        network = build_elastic_network(
            positions,
            cutoff=config.cutoff,
            spring_constant=config.spring_constant,
            box=config.box,
            dim=config.dim,
            offset=config.offset,
            method=config.method,
        )
        self._network = network
        self._config = config
        return self.get_summary()

    def build_from_stream(self, config: NetworkConfig, stream: TextIO) -> NetworkSummary:
        """Read coordinates from a text stream, then build."""
        config.validate()
        positions = read_positions(stream, config.n_particles, config.dim)
        return self.build_network(_with_count(config, len(positions)), positions)

    def build_from_file(self, config: NetworkConfig, path: Optional[str] = None) -> NetworkSummary:
        """Read coordinates from *path* (or ``config.positions``), then build."""
        config.validate()
        path = path or config.positions
        if path is None:
            raise ValueError("No coordinate file given")
        positions = load_positions(path, config.n_particles, config.dim)
        return self.build_network(_with_count(config, len(positions)), positions)

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    def _require_network(self) -> ElasticNetwork:
        if self._network is None:
            raise RuntimeError("No network built. Call build_network first.")
        return self._network

    def get_bonds(self) -> List[Bond]:
        return list(self._require_network().bonds)

    def get_summary(self) -> NetworkSummary:
        network = self._require_network()
        domain = network.domain
        return NetworkSummary(
            n_particles=network.n_particles,
            n_bonds=network.n_bonds,
            box=[float(v) for v in domain.lengths],
            periodic=[bool(v) for v in domain.periodic],
            boundary=domain.get_name(),
            n_cells=list(network.n_cells),
            method=network.method,
            offset=network.offset,
        )

    def write_bonds(self, stream: TextIO) -> int:
        """Write the bonds of the last network; returns the bond count."""
        return write_bonds(self._require_network().bonds, stream)

    def to_text(self) -> str:
        return bonds_to_text(self._require_network().bonds)


def _with_count(config: NetworkConfig, n_particles: int) -> NetworkConfig:
    # The count is known once the input has been read.
    return NetworkConfig.from_dict({**config.to_dict(), "n_particles": n_particles})
