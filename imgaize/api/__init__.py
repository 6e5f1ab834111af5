# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""HTTP endpoints for the sitemap and conversion page data."""

from .server import create_app, start_server
from .services import CONFIG_KEY, SERVICES_KEY, ConversionServices, build_services
from .sitemap import render_sitemap


__all__ = [
    "CONFIG_KEY",
    "SERVICES_KEY",
    "ConversionServices",
    "build_services",
    "create_app",
    "render_sitemap",
    "start_server",
]
