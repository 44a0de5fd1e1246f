"""
Command line entry point: serves the API on a Unix domain socket.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI

from .services.config import DEFAULT_SOCKET_PATH

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def prepare_socket(socket_path: str) -> None:
    """Remove a stale socket file and create its parent directory."""
    path = Path(socket_path)
    if path.exists() or path.is_symlink():
        logger.debug(f"Removing stale socket {path}")
        path.unlink()
    path.parent.mkdir(parents=True, exist_ok=True)


def serve(app: FastAPI, socket_path: str, log_level: str = "info") -> None:
    """Run uvicorn bound to `socket_path` until interrupted."""
    prepare_socket(socket_path)
    logger.info(f"Starting Penpot Stack Controller on {socket_path}")
    # Access lines come from RequestLoggingMiddleware.
    uvicorn.run(app, uds=socket_path, log_level=log_level.lower(), access_log=False)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Penpot stack controller backend")
    parser.add_argument(
        "--socket",
        default=os.getenv("SOCKET_PATH", DEFAULT_SOCKET_PATH),
        help="Unix domain socket to listen on",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    from . import create_app

    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.info(f"Log level set to: {args.log_level.upper()}")
    serve(create_app(), args.socket, args.log_level)
