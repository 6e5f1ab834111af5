# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Any

from ..formats.catalog import FormatDescriptor
from ..formats.exceptions import SlugSyntaxError, UnsupportedFormatError
from ..formats.slugs import SlugCodec


DEFAULT_PRODUCT_NAME = "Imgaize"

TITLE_TEMPLATE = "Convert {from_label} to {to_label} - Free Online Converter | {product}"
DESCRIPTION_TEMPLATE = (
    "Convert {from_label} images to {to_label} format online for free. "
    "{from_description}. Fast, secure, and works entirely in your browser."
)


@dataclass(frozen=True)
class ConversionPage:
    """Everything a conversion page needs to render."""

    source: str
    target: str
    source_format: FormatDescriptor
    target_format: FormatDescriptor
    title: str
    description: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "fromFormat": self.source_format.as_dict(),
            "toFormat": self.target_format.as_dict(),
            "title": self.title,
            "description": self.description,
        }


def load_conversion_page(
    slug: str, codec: SlugCodec, product_name: str = DEFAULT_PRODUCT_NAME
) -> ConversionPage:
    """Resolve ``slug`` into page data.

    Raises:
        SlugSyntaxError: ``slug`` is not of the form ``<from>-to-<to>``
        UnsupportedFormatError: a token is unknown or the target cannot be encoded
    """
    if not codec.is_well_formed(slug):
        logging.getLogger("conversion").debug(f"Malformed conversion slug: {slug!r}")
        raise SlugSyntaxError(slug)

    pair = codec.parse(slug)
    if pair is None:
        logging.getLogger("conversion").debug(f"Unsupported conversion: {slug!r}")
        raise UnsupportedFormatError(slug)

    source_format = codec.catalog.lookup_by_value(pair.source)
    target_format = codec.catalog.lookup_by_value(pair.target)
    if source_format is None or target_format is None:
        raise UnsupportedFormatError(slug)

    return ConversionPage(
        source=pair.source,
        target=pair.target,
        source_format=source_format,
        target_format=target_format,
        title=TITLE_TEMPLATE.format(
            from_label=source_format.label, to_label=target_format.label, product=product_name
        ),
        description=DESCRIPTION_TEMPLATE.format(
            from_label=source_format.label,
            to_label=target_format.label,
            from_description=source_format.description,
        ),
    )
