# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

from .catalog import FormatCatalog, FormatDescriptor
from .slugs import ConversionPair, SlugCodec


class ConversionEnumerator:
    """Derive every valid conversion route from the catalog.

    Order is fixed: inputs in catalog order on the outside, outputs in catalog
    order on the inside. Sitemap diffs depend on it.
    """

    def __init__(self, catalog: FormatCatalog, codec: SlugCodec | None = None):
        self.catalog = catalog
        self.codec = codec or SlugCodec(catalog)

    def enumerate(self) -> list[ConversionPair]:
        """All (input, output) pairs except self-conversions."""
        conversions = []
        for source in self.catalog.input_formats:
            for target in self.catalog.output_formats:
                if source.value != target.value:
                    conversions.append(ConversionPair(source.value, target.value))
        return conversions

    def slugs(self) -> list[str]:
        return [self.codec.generate(pair.source, pair.target) for pair in self.enumerate()]

    def expected_count(self) -> int:
        """|inputs| x |outputs| minus one self-pair per encodable format."""
        inputs = len(self.catalog.input_formats)
        outputs = len(self.catalog.output_formats)
        encodable = sum(1 for f in self.catalog if f.can_encode)
        return inputs * outputs - encodable

    def targets_for(self, source: str) -> list[FormatDescriptor]:
        """Encodable targets reachable from ``source``; empty for unknown values."""
        if source not in self.catalog:
            return []
        return [f for f in self.catalog.output_formats if f.value != source]
