# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import logging

from aiohttp import web

from ..formats import ConversionNotFoundError
from ..pages import load_conversion_page
from .services import CONFIG_KEY, SERVICES_KEY


async def handle_conversion_request(request) -> web.Response:
    """Handle GET /api/conversions/{conversion}

    Examples:
        /api/conversions/jpeg-to-png  -> 200, page data
        /api/conversions/jpg-to-webp  -> 200, source resolved to "jpeg"
        /api/conversions/png-to-gif   -> 404, GIF cannot be encoded
        /api/conversions/jpegpng      -> 404, malformed slug
    """
    slug = request.match_info.get("conversion", "")
    services = request.app[SERVICES_KEY]
    product_name = request.app[CONFIG_KEY].get("site.product_name")

    try:
        page = load_conversion_page(slug, services.codec, product_name)
    except ConversionNotFoundError as e:
        logging.getLogger("conversion").info(f"{type(e).__name__} for {e.slug!r}")
        return web.json_response({"error": e.message}, status=e.status)
    except Exception as e:
        logging.getLogger("conversion").error(f"Error loading conversion {slug!r}: {e}", exc_info=True)
        return web.json_response({"error": "Internal server error"}, status=500)

    return web.json_response(page.as_dict())


async def handle_conversions_list(request) -> web.Response:
    """Handle GET /api/conversions"""
    enumerator = request.app[SERVICES_KEY].enumerator
    return web.json_response([pair.as_dict() for pair in enumerator.enumerate()])


async def handle_formats_list(request) -> web.Response:
    """Handle GET /api/formats - catalog entries with their reachable targets."""
    services = request.app[SERVICES_KEY]
    formats = []
    for fmt in services.catalog:
        entry = fmt.as_dict()
        entry["targets"] = [t.value for t in services.enumerator.targets_for(fmt.value)]
        formats.append(entry)
    return web.json_response(formats)
