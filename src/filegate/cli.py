"""Command line interface.

Usage:
    filegate check NAME [--base-path DIR] [--extension EXT] [--config FILE]
    filegate serve [--host HOST] [--port PORT] [--config FILE]
"""

import argparse
import sys
from pathlib import Path

from filegate.config import FilegateConfig
from filegate.exceptions import ConfigError
from filegate.logging_setup import configure_logging
from filegate.security.paths import RejectionReason, sanitize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate user-supplied file names and serve the file gate API",
        prog="filegate",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON config file (FILEGATE_* env vars take precedence)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Sanitize a name and print the resulting path")
    check.add_argument("name", help="Untrusted file name to validate")
    check.add_argument("--base-path", default=None, help="Directory the file must live in")
    check.add_argument("--extension", default=None, help="Extension to force on the result")

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def _check(config: FilegateConfig, name: str) -> int:
    result = sanitize(config.base_path, name, config.extension)
    if isinstance(result, RejectionReason):
        print(f"rejected: {result.value}", file=sys.stderr)
        return 1
    print(result)
    return 0


def _serve(config: FilegateConfig) -> int:
    import uvicorn

    from filegate.web.app import create_app

    configure_logging(config.log_level)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the filegate command."""
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "check":
            config = FilegateConfig.load(
                args.config, base_path=args.base_path, extension=args.extension
            )
        else:
            config = FilegateConfig.load(args.config, host=args.host, port=args.port)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.command == "check":
        return _check(config, args.name)
    return _serve(config)
