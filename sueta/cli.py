"""Command line entry point: ``python -m sueta --config-path config/config.yml``."""

import argparse
import signal
from pathlib import Path
from typing import Optional, Sequence

import structlog
import uvicorn

from sueta.config import Settings, get_settings
from sueta.core.logging import configure_logging
from sueta.main import create_app

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yml"

# uvicorn already turns SIGINT and SIGTERM into a graceful shutdown.
EXTRA_SHUTDOWN_SIGNALS = ("SIGHUP", "SIGQUIT", "SIGABRT")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sueta", description="Run the Sueta HTTP API.")
    parser.add_argument(
        "--config-path",
        default=DEFAULT_CONFIG_PATH,
        help="path for application configuration file",
    )
    args = parser.parse_args(argv)
    if not Path(args.config_path).is_file():
        parser.error(f"config file not found: {args.config_path}")
    return args


def build_server(settings: Settings) -> uvicorn.Server:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HTTP_HOST,
        port=settings.HTTP_PORT,
        timeout_keep_alive=settings.HTTP_READ_TIMEOUT,
        timeout_graceful_shutdown=settings.HTTP_SHUTDOWN_TIMEOUT,
        h11_max_incomplete_event_size=settings.max_header_bytes,
        log_config=None,
    )
    return uvicorn.Server(config)


def install_shutdown_signals(server: uvicorn.Server) -> None:
    for name in EXTRA_SHUTDOWN_SIGNALS:
        sig = getattr(signal, name, None)
        if sig is not None:
            signal.signal(sig, server.handle_exit)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = get_settings(args.config_path)
    configure_logging(settings)
    logger.info("Loaded config file", config_path=args.config_path)

    server = build_server(settings)
    install_shutdown_signals(server)

    logger.info("Starting the server", port=settings.HTTP_PORT)
    server.run()
    logger.info("Server has been shut down")
