"""
Command line entry point for the alloy hover language server.

The server speaks LSP over stdio, so nothing but protocol traffic may be
written to standard output once it starts. Errors and logs go to standard
error (or the configured log file).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback
from typing import Optional, Sequence

from . import __version__
from .config import DOCS_ENV_VAR, LOG_FILE_ENV_VAR, LOG_LEVEL_ENV_VAR, ServerConfig
from .errors import AlloyHoverError, ConfigError
from .observability.logging import configure_logging

# Maximum length for traceback output in verbose mode
_CLI_TRACE_LIMIT = 4000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alloy-hover-lsp",
        description="Hover documentation language server (LSP over stdio).",
    )
    parser.add_argument(
        "--docs",
        metavar="PATH",
        help=f"Hover dictionary TOML file (default: ${DOCS_ENV_VAR} or docs/alloy-hover.toml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "warning", "error"],
        help=f"Log verbosity (default: ${LOG_LEVEL_ENV_VAR} or info)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help=f"Write logs to this file instead of stderr (default: ${LOG_FILE_ENV_VAR})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the dictionary and exit without starting the server",
    )
    parser.add_argument("--verbose", action="store_true", help="Show tracebacks for startup errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """Format a startup failure for stderr, with the traceback in verbose mode."""

    if isinstance(exc, AlloyHoverError):
        lines = [f"Error: {exc.format()}"]
    else:
        lines = [f"Error: {exc.__class__.__name__}: {exc}"]
    if verbose:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        if len(trace) > _CLI_TRACE_LIMIT:
            trace = "...\n" + trace[-_CLI_TRACE_LIMIT:]
        lines.append("\nTraceback:")
        lines.append(trace.rstrip())
    return "\n".join(lines)


def _configure_server_logging(config: ServerConfig) -> logging.Logger:
    try:
        return configure_logging(config.log_level, config.log_file)
    except OSError as exc:
        raise ConfigError(
            f"Cannot open log file: {exc}",
            path=str(config.log_file),
            hint=f"Check --log-file or ${LOG_FILE_ENV_VAR}",
        ) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Start the language server, or validate the dictionary with ``--check``.

    Returns the process exit status: 0 on a clean shutdown, 1 when the
    log file or the dictionary cannot be opened. The server never starts
    without a dictionary.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ServerConfig.from_env(
        os.environ,
        docs=args.docs,
        log_level=args.log_level,
        log_file=args.log_file,
    )

    try:
        logger = _configure_server_logging(config)
        dictionary = config.load_dictionary()
    except ConfigError as exc:
        print(format_cli_error(exc, verbose=args.verbose), file=sys.stderr)
        return 1

    if args.check:
        print(f"{config.docs_path}: {len(dictionary)} hover entries")
        return 0

    from .lsp.server import create_server

    server = create_server(dictionary)
    logger.info("Starting alloy-hover-lsp %s (pid=%s)", __version__, os.getpid())
    try:
        server.start_io()
    except KeyboardInterrupt:
        logger.info("Language server interrupted by user.")
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
