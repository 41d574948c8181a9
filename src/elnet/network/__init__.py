"""
Network module: turns positions into elastic network bonds.
"""

from .elastic_network import (
    Bond,
    ElasticNetwork,
    build_elastic_network,
    elastic_network,
    generate_bonds,
    prepare_positions,
)

__all__ = [
    "Bond",
    "ElasticNetwork",
    "build_elastic_network",
    "elastic_network",
    "generate_bonds",
    "prepare_positions",
]
