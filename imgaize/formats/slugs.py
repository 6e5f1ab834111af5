# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

import re
from dataclasses import dataclass

from .catalog import FormatCatalog, resolve_token


SLUG_PATTERN = re.compile(r"^([a-z]+)-to-([a-z]+)$", re.IGNORECASE | re.ASCII)


def generate_slug(source: str, target: str) -> str:
    """Build ``<source>-to-<target>``. No validation."""
    return f"{source}-to-{target}"


@dataclass(frozen=True)
class ConversionPair:
    """Ordered (source, target) pair of canonical format values."""

    source: str
    target: str

    @property
    def slug(self) -> str:
        return generate_slug(self.source, self.target)

    def as_dict(self) -> dict[str, str]:
        return {"from": self.source, "to": self.target, "slug": self.slug}


class SlugCodec:
    """Parse and generate conversion slugs against a format catalog.

    Source tokens may be any catalog value or extension alias (``jpg``).
    Target tokens are restricted to encodable formats, alias or not.
    """

    def __init__(self, catalog: FormatCatalog):
        self.catalog = catalog

    def is_well_formed(self, slug: str) -> bool:
        """True when ``slug`` matches the two-token grammar, ignoring the catalog."""
        return SLUG_PATTERN.fullmatch(slug) is not None

    def parse(self, slug: str) -> ConversionPair | None:
        """Resolve ``slug`` into a canonical pair, or None."""
        match = SLUG_PATTERN.fullmatch(slug)
        if not match:
            return None

        from_token, to_token = (token.lower() for token in match.groups())
        source = resolve_token(self.catalog.input_formats, from_token)
        target = resolve_token(self.catalog.output_formats, to_token)
        if source is None or target is None:
            return None

        return ConversionPair(source.value, target.value)

    def generate(self, source: str, target: str) -> str:
        return generate_slug(source, target)
