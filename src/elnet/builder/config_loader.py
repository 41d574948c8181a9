"""
Configuration loader for YAML-based network setup.

Provides functions to load elastic network runs from YAML files.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from elnet.core.schemas import NetworkConfig
from elnet.core.service import NetworkService
from elnet.neighbor import SEARCH_METHODS
from elnet.network import Bond

AXES = ("x", "y", "z")


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration.
    """
    try:
        import yaml
    except ImportError:
        raise ImportError("PyYAML is required: pip install pyyaml")

    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _parse_box(config: Dict[str, Any]) -> List[float]:
    """Parse box lengths, given as a list or as an {x, y, z} mapping."""
    box = config.get("box", [-1.0, -1.0, -1.0])
    if isinstance(box, dict):
        return [float(box.get(axis, -1.0)) for axis in AXES]
    if isinstance(box, (int, float)):
        return [float(box)] * 3
    return [float(v) for v in box]


def _parse_method(config: Dict[str, Any]) -> str:
    """Parse neighbor search method from config."""
    method = str(config.get("method", "cell_list")).lower()
    if method not in SEARCH_METHODS:
        raise ValueError(f"Unknown search method: {method}")
    return method


def _resolve(path: Optional[str], base_dir: Optional[Path]) -> Optional[str]:
    if path is None or base_dir is None or Path(path).is_absolute():
        return path
    return str(base_dir / path)


def build_config(
    config: Dict[str, Any],
    base_dir: Optional[Union[str, Path]] = None,
) -> NetworkConfig:
    """
    Build a NetworkConfig from a configuration dictionary.

    Args:
        config: Configuration dictionary (typically from YAML).
        base_dir: Directory that relative coordinate paths refer to.

    Returns:
        Validated NetworkConfig.

    Example config:
        cutoff: 1.5
        spring_constant: 10.0
        box: {x: 20.0, y: -1, z: -1}
        dim: 3
        n_particles: -1
        method: cell_list
        positions: coords.xyz
    """
    base = Path(base_dir) if base_dir is not None else None
    merged = dict(config)
    merged["box"] = _parse_box(config)
    merged["method"] = _parse_method(config)
    merged["positions"] = _resolve(config.get("positions"), base)
    return NetworkConfig.from_dict(merged).validate()


def _network_entries(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Split a config into per-network dicts; top-level keys are defaults."""
    entries = config.get("networks")
    if not entries:
        return [config]
    defaults = {k: v for k, v in config.items() if k not in ("networks", "offset")}
    return [{**defaults, **entry} for entry in entries]


def build_networks_from_config(
    config: Dict[str, Any],
    base_dir: Optional[Union[str, Path]] = None,
    service: Optional[NetworkService] = None,
) -> List[Bond]:
    """
    Build one or several networks and concatenate their bonds.

    When several networks are listed, each one's offset defaults to the
    number of particles in the networks before it, so that particle
    indices of the combined bond list never collide.

    Args:
        config: Configuration dictionary.
        base_dir: Directory that relative coordinate paths refer to.
        service: NetworkService to build with (a fresh one by default).

    Returns:
        Combined bond list, in network order.
    """
    service = service or NetworkService()
    bonds: List[Bond] = []
    next_offset = int(config.get("offset", 0))

    for entry in _network_entries(config):
        entry = {**entry, "offset": entry.get("offset", next_offset)}
        net_config = build_config(entry, base_dir)

        if "coordinates" in entry:
            coords = np.array(entry["coordinates"], dtype=float)
            summary = service.build_network(net_config, coords)
        else:
            summary = service.build_from_file(net_config)

        bonds.extend(service.get_bonds())
        next_offset = summary.offset + summary.n_particles

    return bonds


def load_and_run(path: Union[str, Path]) -> List[Bond]:
    """
    Load configuration from YAML and build the network(s).

    Args:
        path: Path to YAML configuration file.

    Returns:
        Combined bond list.
    """
    config = load_yaml(path)
    return build_networks_from_config(config, base_dir=Path(path).parent)
