"""
Builder module: YAML configuration for elastic network runs.
"""

from .config_loader import (
    build_config,
    build_networks_from_config,
    load_and_run,
    load_yaml,
)

__all__ = [
    "build_config",
    "build_networks_from_config",
    "load_and_run",
    "load_yaml",
]
