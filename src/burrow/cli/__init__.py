"""Burrow CLI — start a file server from the shell.

Entry point registered as ``burrow`` in ``pyproject.toml``::

    [project.scripts]
    burrow = "burrow.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``burrow`` command."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Burrow — serve a directory over HTTP (GET, PUT, DELETE).",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- burrow serve -----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a directory")
    serve_parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to serve (default: $BURROW_ROOT or ./public)",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--read-only",
        action="store_true",
        default=None,
        help="Answer GET only; PUT and DELETE return 405",
    )
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Run a single worker for local development",
    )
    serve_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )
    serve_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level (default: info)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from burrow.cli._serve import serve

        serve(args)
