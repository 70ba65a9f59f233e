"""
Quest Log reference server runner.

Usage:
    quest-log-server                      # Start with defaults from the environment
    quest-log-server --port 8080          # Start on custom port
    quest-log-server --host 0.0.0.0       # Bind to all interfaces
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..logging_setup import setup_logging
from ..settings import get_settings

logger = logging.getLogger(__name__)


LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    # argparse does not check defaults against choices.
    default_level = settings.log_level.lower()
    if default_level not in LOG_LEVELS:
        default_level = "info"
    parser = argparse.ArgumentParser(
        description="Start the Quest Log reference Task API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    parser.add_argument(
        "--log-level",
        default=default_level,
        choices=LOG_LEVELS,
        help="Logging level (default: from QUEST_LOG_LOG_LEVEL)",
    )
    return parser


# PUBLIC_INTERFACE
def main(argv: Optional[List[str]] = None) -> int:
    """Run the server with the specified configuration."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    import uvicorn

    logger.info("Starting Quest Log backend on %s:%d", args.host, args.port)
    try:
        uvicorn.run(
            "quest_log.api.main:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
