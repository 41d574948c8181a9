"""
Core module for elnet.

- errors: exception and warning types
- schemas: configuration and summary dataclasses
- service: stateful facade used by the CLI and the REST API
"""

from .errors import (
    BoxGrowthWarning,
    DimensionalityError,
    ElasticNetworkError,
    NetworkInputError,
)
from .schemas import NetworkConfig, NetworkSummary

__all__ = [
    "ElasticNetworkError",
    "NetworkInputError",
    "DimensionalityError",
    "BoxGrowthWarning",
    "NetworkConfig",
    "NetworkSummary",
]
