"""
Command-line entry point used by the container image and the deploy pipeline.

Commands:
- ``serve``: run the calculator HTTP service (0.0.0.0:5000 by default)
- ``check-health``: poll a running service until /health answers, exit 1 otherwise
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from calculator_service.client.health import HealthChecker
from calculator_service.common.logger import configure_logging
from calculator_service.server.app import run
from calculator_service.server.settings import ServiceSettings


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its two subcommands."""
    parser = argparse.ArgumentParser(
        prog="calculator-service",
        description="Calculator HTTP service with a health endpoint",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Start the HTTP service")
    serve.add_argument("--host", help="Interface to bind (env CALCULATOR_HOST)")
    serve.add_argument("--port", type=int, help="Port to listen on (env CALCULATOR_PORT)")
    serve.add_argument("--log-level", help="Log level (env CALCULATOR_LOG_LEVEL)")

    check = commands.add_parser("check-health", help="Wait for a service to become ready")
    check.add_argument("--url", default="http://127.0.0.1:5000/health", help="Health endpoint URL")
    check.add_argument("--attempts", type=int, default=10, help="Maximum number of probes")
    check.add_argument("--interval", type=float, default=5.0, help="Seconds between probes")
    check.add_argument("--timeout", type=float, default=2.0, help="Per-request timeout")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the container or the CI pipeline.

    :param argv: Arguments without the program name, sys.argv when None

    :return: Process exit code
    :rtype: int
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "serve":
            settings = ServiceSettings.from_env(
                host=args.host,
                port=args.port,
                log_level=args.log_level.upper() if args.log_level else None,
            )
            configure_logging(settings.log_level)
            run(settings)
            return 0

        checker = HealthChecker(
            url=args.url,
            attempts=args.attempts,
            interval=args.interval,
            timeout=args.timeout,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging("INFO")
    return 0 if checker.wait_until_ready() else 1


if __name__ == "__main__":
    sys.exit(main())
