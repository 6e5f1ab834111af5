# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import argparse
import asyncio
import logging
from pathlib import Path

from .api.server import start_server
from .api.services import build_services
from .api.sitemap import render_sitemap
from .config import Config
from .formats import default_catalog


def setup_logging(config, override_level=None):
    """Configure logging based on config settings."""
    # Determine log level from override, config, or default
    log_level_str = override_level.lower() if override_level else config.get("log.level").lower()

    # Map string levels to logging constants
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,  # alias
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }

    log_level = level_map.get(log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] [%(name)s] %(message)s",
        handlers=[logging.StreamHandler()],
        force=True,  # Reset any existing configuration
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Imgaize conversion page and sitemap server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8788, help="Port to bind to")
    parser.add_argument("--config", default=None, help="Path to YAML/TOML/JSON config file")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "warn", "error", "critical"],
        type=str.lower,
        help="Set logging level (overrides config file)",
    )
    parser.add_argument(
        "--write-sitemap",
        metavar="PATH",
        default=None,
        type=Path,
        help="Render sitemap.xml to PATH and exit instead of serving",
    )
    return parser


def write_sitemap(path: Path, config: Config) -> int:
    """Render the sitemap to ``path``; returns the number of conversion entries."""
    services = build_services(default_catalog(), config)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_sitemap(services, config), encoding="utf-8")
    return len(services.enumerator.enumerate())


async def serve(host: str, port: int, config: Config):
    """Run the HTTP server until cancelled."""
    runner = await start_server(host, port, config)
    try:
        await asyncio.Future()  # run forever
    finally:
        await runner.cleanup()


def main(argv=None) -> int:
    """Main entry point for the conversion server."""
    args = build_parser().parse_args(argv)

    config = Config()
    config.load(args.config)

    setup_logging(config, override_level=args.log_level)
    logger = logging.getLogger("main")
    logger.info(f"loaded config: {config.get()}")

    if args.write_sitemap:
        count = write_sitemap(args.write_sitemap, config)
        logger.info(f"wrote sitemap with {count} conversions to {args.write_sitemap}")
        return 0

    try:
        asyncio.run(serve(args.host, args.port, config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    return 0


def run():
    """Entry point for setuptools console scripts."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
