# © Copyright 2025 Stuart Parmenter
# SPDX-License-Identifier: MIT

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FormatDescriptor:
    """Static metadata for one supported image format."""

    value: str
    label: str
    mime: str
    extensions: tuple[str, ...]
    description: str
    supports_transparency: bool
    can_encode: bool  # browser can export to this format

    def as_dict(self) -> dict:
        return {
            "value": self.value,
            "label": self.label,
            "mime": self.mime,
            "extensions": list(self.extensions),
            "description": self.description,
            "supportsTransparency": self.supports_transparency,
            "canEncode": self.can_encode,
        }


DEFAULT_FORMATS: tuple[FormatDescriptor, ...] = (
    FormatDescriptor(
        value="png",
        label="PNG",
        mime="image/png",
        extensions=("png",),
        description="Portable Network Graphics - Lossless compression with transparency",
        supports_transparency=True,
        can_encode=True,
    ),
    FormatDescriptor(
        value="jpeg",
        label="JPEG",
        mime="image/jpeg",
        extensions=("jpg", "jpeg"),
        description="Joint Photographic Experts Group - Best for photographs",
        supports_transparency=False,
        can_encode=True,
    ),
    FormatDescriptor(
        value="webp",
        label="WebP",
        mime="image/webp",
        extensions=("webp",),
        description="Modern format with excellent compression and transparency",
        supports_transparency=True,
        can_encode=True,
    ),
    FormatDescriptor(
        value="gif",
        label="GIF",
        mime="image/gif",
        extensions=("gif",),
        description="Graphics Interchange Format - Supports animation",
        supports_transparency=True,
        can_encode=False,
    ),
    FormatDescriptor(
        value="bmp",
        label="BMP",
        mime="image/bmp",
        extensions=("bmp",),
        description="Bitmap Image - Uncompressed raster graphics",
        supports_transparency=False,
        can_encode=True,
    ),
    FormatDescriptor(
        value="avif",
        label="AVIF",
        mime="image/avif",
        extensions=("avif",),
        description="AV1 Image Format - Superior compression, modern browsers",
        supports_transparency=True,
        can_encode=True,
    ),
    FormatDescriptor(
        value="tiff",
        label="TIFF",
        mime="image/tiff",
        extensions=("tiff", "tif"),
        description="Tagged Image File Format - Professional quality",
        supports_transparency=True,
        can_encode=False,
    ),
    FormatDescriptor(
        value="ico",
        label="ICO",
        mime="image/x-icon",
        extensions=("ico",),
        description="Icon format for Windows applications",
        supports_transparency=True,
        can_encode=False,
    ),
    FormatDescriptor(
        value="heic",
        label="HEIC",
        mime="image/heic",
        extensions=("heic", "heif"),
        description="High Efficiency Image Format - Used by Apple devices",
        supports_transparency=True,
        can_encode=False,
    ),
)


class FormatCatalog:
    """Ordered, read-only table of supported image formats.

    Declaration order is part of the contract: it breaks ties when two formats
    share an extension and fixes the order of every enumeration.
    """

    def __init__(self, formats: Iterable[FormatDescriptor]):
        self._formats: tuple[FormatDescriptor, ...] = tuple(formats)
        self._by_value: dict[str, FormatDescriptor] = {}
        for fmt in self._formats:
            if fmt.value in self._by_value:
                raise ValueError(f"Duplicate format value in catalog: {fmt.value}")
            self._by_value[fmt.value] = fmt
        self._outputs = tuple(f for f in self._formats if f.can_encode)

    @property
    def input_formats(self) -> tuple[FormatDescriptor, ...]:
        """Every format; all of them can be decoded."""
        return self._formats

    @property
    def output_formats(self) -> tuple[FormatDescriptor, ...]:
        """Formats with ``can_encode`` set, in catalog order."""
        return self._outputs

    def lookup_by_value(self, value: str) -> FormatDescriptor | None:
        """Exact match on ``value``; no case folding."""
        return self._by_value.get(value)

    def lookup_by_extension(self, ext: str) -> FormatDescriptor | None:
        """Find the first format (catalog order) that lists ``ext``.

        ``ext`` is lowercased and a single leading dot is dropped, so ``JPG``,
        ``.jpg`` and ``jpg`` all resolve the same way.
        """
        normalized = ext.lower()
        if normalized.startswith("."):
            normalized = normalized[1:]
        for fmt in self._formats:
            if normalized in fmt.extensions:
                return fmt
        return None

    def values(self) -> list[str]:
        return [f.value for f in self._formats]

    def __iter__(self) -> Iterator[FormatDescriptor]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, value: object) -> bool:
        return value in self._by_value

    def __repr__(self) -> str:
        return f"FormatCatalog({', '.join(self.values())})"


def resolve_token(formats: Sequence[FormatDescriptor], token: str) -> FormatDescriptor | None:
    """Resolve ``token`` against ``formats``: exact value first, then extension alias."""
    for fmt in formats:
        if fmt.value == token:
            return fmt
    for fmt in formats:
        if token in fmt.extensions:
            return fmt
    return None


@lru_cache(maxsize=1)
def default_catalog() -> FormatCatalog:
    """Process-wide catalog of the built-in formats, built on first use."""
    return FormatCatalog(DEFAULT_FORMATS)
