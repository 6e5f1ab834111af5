# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import logging

from aiohttp import web

from ..config import Config
from .services import CONFIG_KEY, SERVICES_KEY, ConversionServices


def render_sitemap(services: ConversionServices, config: Config) -> str:
    """Build the sitemap for every enumerated conversion using configured site settings."""
    return services.sitemap.build(
        config.get("site.base_url"),
        services.enumerator.enumerate(),
        lastmod=config.get("sitemap.lastmod"),
    )


def sitemap_headers(config: Config) -> dict[str, str]:
    max_age = int(config.get("sitemap.max_age"))
    headers = {"Cache-Control": f"public, max-age={max_age}, s-maxage={max_age}"}
    if config.get("sitemap.noindex"):
        headers["X-Robots-Tag"] = "noindex"
    return headers


async def handle_sitemap_request(request) -> web.Response:
    """Handle GET /sitemap.xml"""
    config = request.app[CONFIG_KEY]
    try:
        body = render_sitemap(request.app[SERVICES_KEY], config)
    except Exception as e:
        logging.getLogger("sitemap").error(f"Error building sitemap: {e}", exc_info=True)
        return web.Response(status=500, text="Internal server error")

    return web.Response(
        text=body,
        content_type="application/xml",
        headers=sitemap_headers(config),
    )
