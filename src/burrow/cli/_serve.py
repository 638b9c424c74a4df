"""``burrow serve`` — build the config, configure logging, run the server.

Environment variables are read once here; CLI flags override them.
"""

import argparse
import logging
import sys

from burrow.app import FileServer
from burrow.config import ServerConfig
from burrow.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def serve(args: argparse.Namespace) -> None:
    """Start the burrow server described by *args* and the environment."""
    try:
        config = ServerConfig.from_env(
            root=args.root,
            host=args.host,
            port=args.port,
            read_only=args.read_only,
            debug=args.debug,
            workers=args.workers,
            log_level=args.log_level,
        )
        app = FileServer(config)
        app.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)
    app.run()
