"""
Command-line entry point for elnet.

Usage::

    elnet N Rc K Lx Ly Lz file [DIM]
    elnet --config network.yaml
    python -m elnet 100 1.5 10.0 -1 -1 -1 coords.xyz 3 > bonds.txt

Bonds go to stdout (or --output); diagnostics go to stderr.
"""
from __future__ import annotations

import argparse
import sys
import warnings
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

import elnet
from elnet.builder import build_networks_from_config, load_yaml
from elnet.core.errors import ElasticNetworkError
from elnet.core.schemas import NetworkConfig
from elnet.core.service import NetworkService
from elnet.io import write_bonds

DESCRIPTION = (
    "Build an elastic network: print one bond 'i j K r0' for every pair "
    "of particles closer than the cutoff radius."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elnet", description=DESCRIPTION)
    parser.add_argument(
        "n_particles", metavar="N", type=int, nargs="?",
        help="Number of particles to read (-1 to read it from the top of the file)",
    )
    parser.add_argument("cutoff", metavar="Rc", type=float, nargs="?", help="Cut-off radius for bonds")
    parser.add_argument("spring_constant", metavar="K", type=float, nargs="?", help="Bond strength parameter")
    for axis in ("Lx", "Ly", "Lz"):
        parser.add_argument(
            axis.lower(), metavar=axis, type=float, nargs="?",
            help=f"Box length along {axis[1]} (-1 for no periodic boundary)",
        )
    parser.add_argument(
        "file", nargs="?",
        help="Particle positions, one 'x y z' row per particle ('-' for stdin)",
    )
    parser.add_argument(
        "dim", metavar="DIM", type=int, nargs="?", default=3,
        help="Dimensionality of space: 1, 2 or 3 (default: 3)",
    )
    parser.add_argument("--offset", type=int, default=0, help="Added to every particle index (default: 0)")
    parser.add_argument(
        "--method", default="cell_list", choices=["cell_list", "brute_force"],
        help="Neighbor search algorithm (default: cell_list)",
    )
    parser.add_argument("--config", help="YAML configuration file (replaces the positional arguments)")
    parser.add_argument("-o", "--output", help="Write bonds to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {elnet.__version__}")
    return parser


@contextmanager
def _report_warnings(stream: TextIO) -> Iterator[None]:
    """Print library warnings as one-line messages."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            yield
        finally:
            for w in caught:
                print(f"Warning: {w.message}", file=stream)


@contextmanager
def _open_output(path: Optional[str]) -> Iterator[TextIO]:
    if path is None:
        yield sys.stdout
    else:
        with open(path, "w") as f:
            yield f


def config_from_args(args: argparse.Namespace) -> NetworkConfig:
    """Map positional arguments onto a NetworkConfig."""
    return NetworkConfig(
        cutoff=args.cutoff,
        spring_constant=args.spring_constant,
        box=[args.lx, args.ly, args.lz],
        dim=args.dim,
        n_particles=args.n_particles,
        offset=args.offset,
        method=args.method,
        positions=args.file,
    ).validate()


def run(args: argparse.Namespace, stderr: TextIO) -> int:
    """Build the network(s) described by *args* and write the bonds."""
    with _report_warnings(stderr):
        if args.config:
            bonds = build_networks_from_config(
                load_yaml(args.config), base_dir=Path(args.config).parent
            )
        else:
            config = config_from_args(args)
            service = NetworkService()
            if config.positions == "-":
                summary = service.build_from_stream(config, sys.stdin)
            else:
                summary = service.build_from_file(config)
            if config.n_particles < 0:
                print(f"Number of particles: {summary.n_particles}", file=stderr)
            bonds = service.get_bonds()

    with _open_output(args.output) as out:
        n_bonds = write_bonds(bonds, out)
    print(f"Generated {n_bonds} bonds.", file=stderr)
    return n_bonds


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.config:
        required = (args.n_particles, args.cutoff, args.spring_constant,
                    args.lx, args.ly, args.lz, args.file)
        if any(value is None for value in required):
            parser.error("N, Rc, K, Lx, Ly, Lz and file are required without --config")

    try:
        run(args, sys.stderr)
        return 0
    except (ElasticNetworkError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
