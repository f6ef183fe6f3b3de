"""Run the mining monitor web server.

Usage:
    python -m netrum_monitor [--host HOST] [--port PORT] [--log-level LEVEL]
"""

import argparse
import os

import uvicorn

from netrum_monitor.helpers.constants import DEFAULT_HOST, DEFAULT_PORT
from netrum_monitor.helpers.logging import LOG_LEVELS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netrum_monitor", description="Netrum node mining monitor"
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", default=DEFAULT_PORT, type=int)
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(LOG_LEVELS, key=LOG_LEVELS.__getitem__),
        help="Log level (overrides LOG_LEVEL env).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # Loggers read LOG_LEVEL when first created, which happens on app import
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    uvicorn.run(
        "netrum_monitor.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=(args.log_level or "info").lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
