"""CLI entry point: python -m zuglang_tools."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from zuglang_tools import TRANSPORTS, serve
from zuglang_tools.constants import BASE_URL_ENV
from zuglang_tools.tools import TOOLS

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _port(value: str) -> int:
    port = int(value)
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"must be in range 1-65535, got {port}")
    return port


def _tool_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m zuglang_tools",
        description="Serve the Zuglang translator, calculator and numeral converters.",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, default="http", help="Transport type (default: http).")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for HTTP transports (default: 127.0.0.1).")
    parser.add_argument("--port", type=_port, default=8000, help="Port for HTTP transports (default: 8000).")
    parser.add_argument(
        "--base-url",
        default=None,
        help=f"Base URL advertised by the discovery route (default: ${BASE_URL_ENV}, else derived per request).",
    )
    parser.add_argument(
        "--tools",
        type=_tool_names,
        default=None,
        help=f"Comma-separated tool names to expose (default: all of {', '.join(TOOLS)}).",
    )
    parser.add_argument("--name", default="zuglang-tools", help="MCP server name (max 255 chars).")
    parser.add_argument("--version", default=None, help="MCP server version (default: package version).")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level (default: INFO).",
    )
    return parser


def _usage_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    """Parse the command line and run ``serve()``.

    Exit codes: 0 on normal shutdown, 1 for a name or tool list that
    cannot be served, 2 for argument parsing errors and startup failures.
    """
    args = _build_parser().parse_args()

    if len(args.name) > 255:
        _usage_error(f"--name must be at most 255 characters, got {len(args.name)}.")
    if args.tools is not None:
        unknown = [name for name in args.tools if name not in TOOLS]
        if unknown:
            _usage_error(f"unknown tool(s): {', '.join(unknown)}.")

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        serve(
            transport=args.transport,
            host=args.host,
            port=args.port,
            name=args.name,
            version=args.version,
            base_url=args.base_url or os.environ.get(BASE_URL_ENV) or None,
            tools=args.tools or None,
        )
    except Exception:
        logger.exception("Server startup failed.")
        sys.exit(2)


if __name__ == "__main__":
    main()
