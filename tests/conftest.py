"""Test configuration and fixtures."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Any

import pytest
from aiohttp.test_utils import TestClient, TestServer

from imgaize.api import create_app
from imgaize.config import Config
from imgaize.formats import (
    ConversionEnumerator,
    FormatCatalog,
    FormatDescriptor,
    SlugCodec,
    default_catalog,
)
from imgaize.sitemap import SitemapBuilder


@pytest.fixture(autouse=True)
def reset_config():
    """Start every test from the default configuration."""
    Config.load()
    yield
    Config.load()


@pytest.fixture
def catalog() -> FormatCatalog:
    return default_catalog()


@pytest.fixture
def codec(catalog: FormatCatalog) -> SlugCodec:
    return SlugCodec(catalog)


@pytest.fixture
def enumerator(catalog: FormatCatalog, codec: SlugCodec) -> ConversionEnumerator:
    return ConversionEnumerator(catalog, codec)


@pytest.fixture
def builder(codec: SlugCodec) -> SitemapBuilder:
    return SitemapBuilder(codec)


def make_format(value: str, extensions: tuple[str, ...] = (), can_encode: bool = True) -> FormatDescriptor:
    """Build a minimal descriptor for catalogs assembled inside a test."""
    return FormatDescriptor(
        value=value,
        label=value.upper(),
        mime=f"image/{value}",
        extensions=extensions or (value,),
        description=f"{value.upper()} test format",
        supports_transparency=False,
        can_encode=can_encode,
    )


def fetch(path: str, app=None) -> tuple[int, Mapping[str, str], str]:
    """GET ``path`` from a fresh test server; returns (status, headers, body)."""

    async def _fetch() -> tuple[int, Mapping[str, str], str]:
        async with TestClient(TestServer(app or create_app())) as client:
            resp = await client.get(path)
            return resp.status, resp.headers.copy(), await resp.text()

    return asyncio.run(_fetch())


def fetch_json(path: str, app=None) -> tuple[int, Any]:
    """GET ``path`` and decode the JSON body."""
    status, _, body = fetch(path, app)
    return status, json.loads(body)
