# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from aiohttp import web

from ..config import Config
from ..formats import ConversionEnumerator, FormatCatalog, SlugCodec
from ..sitemap import SitemapBuilder


@dataclass(frozen=True)
class ConversionServices:
    """Read-only core objects shared by every request handler."""

    catalog: FormatCatalog
    codec: SlugCodec
    enumerator: ConversionEnumerator
    sitemap: SitemapBuilder


SERVICES_KEY = web.AppKey("services", ConversionServices)
CONFIG_KEY = web.AppKey("config", Config)


def build_services(catalog: FormatCatalog, config: Config) -> ConversionServices:
    """Wire the catalog into the codec, enumerator and sitemap builder."""
    codec = SlugCodec(catalog)
    return ConversionServices(
        catalog=catalog,
        codec=codec,
        enumerator=ConversionEnumerator(catalog, codec),
        sitemap=SitemapBuilder(codec, stylesheet=config.get("sitemap.stylesheet")),
    )
