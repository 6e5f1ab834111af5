# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import logging

from aiohttp import web

from ..config import Config
from ..formats import FormatCatalog, default_catalog
from .conversions import handle_conversion_request, handle_conversions_list, handle_formats_list
from .services import CONFIG_KEY, SERVICES_KEY, build_services
from .sitemap import handle_sitemap_request


async def health_check_handler(request):
    """Simple health check endpoint."""
    return web.json_response({"status": "ok", "service": "imgaize"})


def create_app(config: Config | None = None, catalog: FormatCatalog | None = None) -> web.Application:
    """Create and configure the HTTP application."""
    config = config or Config()
    app = web.Application()
    app[CONFIG_KEY] = config
    app[SERVICES_KEY] = build_services(catalog or default_catalog(), config)

    app.router.add_get("/sitemap.xml", handle_sitemap_request)

    app.router.add_get("/api/formats", handle_formats_list)
    app.router.add_get("/api/conversions", handle_conversions_list)
    app.router.add_get("/api/conversions/{conversion}", handle_conversion_request)
    app.router.add_get("/api/system/health", health_check_handler)

    return app


async def start_server(host: str = "0.0.0.0", port: int = 8788, config: Config | None = None):
    """Start the HTTP server."""
    app = create_app(config)

    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logging.getLogger("server").info(f"Server on http://{host}:{port}/ (Sitemap: /sitemap.xml, API: /api/)")

    return runner
