"""
Launcher for the elnet REST API server.

Usage::

    python -m elnet.api
    python -m elnet.api --host 0.0.0.0 --port 9000 --reload
"""
from __future__ import annotations

import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m elnet.api",
        description="Serve elastic network generation over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="TCP port (default: 8000)")
    parser.add_argument(
        "--log-level", default="info",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="uvicorn log level (default: info)",
    )
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    return parser


def serve(args: argparse.Namespace) -> None:
    """Start uvicorn on the application factory."""
    try:
        import uvicorn
    except ImportError:
        raise RuntimeError(
            "The API extra is not installed: pip install -e '.[api]'"
        )
    uvicorn.run(
        "elnet.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        serve(args)
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
