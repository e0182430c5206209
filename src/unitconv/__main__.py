"""CLI entry point: python -m unitconv."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from unitconv import serve
from unitconv.config import DEFAULT_HOST, DEFAULT_PORT, VALID_LOG_LEVELS, AppConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the unitconv CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m unitconv",
        description="Launch the distance, weight and temperature converter web server.",
    )

    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Host address to bind (default: {DEFAULT_HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT}, range: 1-65535).",
    )

    # Asset locations
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory holding form.html, result.html and error.html (default: packaged templates).",
    )
    parser.add_argument(
        "--static-dir",
        type=Path,
        default=None,
        help="Directory served under /files (default: packaged static assets).",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(VALID_LOG_LEVELS),
        default="INFO",
        help="Logging level (default: INFO).",
    )

    return parser


def _validate_port(port: int, parser: argparse.ArgumentParser) -> None:
    """Validate port is in range 1-65535."""
    if port < 1 or port > 65535:
        parser.error(f"--port must be in range 1-65535, got {port}")


def main() -> None:
    """CLI entry point for launching the converter server.

    Exit codes:
        0 - Normal shutdown
        1 - Invalid arguments (missing or non-directory asset paths)
        2 - Startup failure (argparse error, serve() exception)
    """
    parser = _build_parser()
    args = parser.parse_args()

    _validate_port(args.port, parser)

    config = AppConfig.from_env(
        host=args.host,
        port=args.port,
        templates_dir=args.templates_dir,
        static_dir=args.static_dir,
        log_level=args.log_level,
    )

    for flag, path in (
        ("--templates-dir", config.templates_dir),
        ("--static-dir", config.static_dir),
    ):
        if path is None:
            continue
        if not path.exists():
            print(f"Error: {flag} '{path}' does not exist.", file=sys.stderr)
            sys.exit(1)
        if not path.is_dir():
            print(f"Error: {flag} '{path}' is not a directory.", file=sys.stderr)
            sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        serve(config)
    except Exception:
        logger.exception("Server startup failed.")
        sys.exit(2)


if __name__ == "__main__":
    main()
