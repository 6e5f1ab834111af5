# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

"""Format catalog, conversion slugs and route enumeration."""

from .catalog import DEFAULT_FORMATS, FormatCatalog, FormatDescriptor, default_catalog
from .enumerate import ConversionEnumerator
from .exceptions import ConversionNotFoundError, SlugSyntaxError, UnsupportedFormatError
from .slugs import ConversionPair, SlugCodec, generate_slug


__all__ = [
    "DEFAULT_FORMATS",
    "ConversionEnumerator",
    # Errors
    "ConversionNotFoundError",
    "ConversionPair",
    # Catalog
    "FormatCatalog",
    "FormatDescriptor",
    # Slugs
    "SlugCodec",
    "SlugSyntaxError",
    "UnsupportedFormatError",
    "default_catalog",
    "generate_slug",
]
