"""Tests for conversion page loading."""

import pytest

from imgaize.formats import ConversionNotFoundError, SlugSyntaxError, UnsupportedFormatError
from imgaize.pages import load_conversion_page


class TestLoadConversionPage:
    """Successful page loads."""

    def test_title_and_description(self, codec):
        page = load_conversion_page("jpeg-to-png", codec)
        assert (page.source, page.target) == ("jpeg", "png")
        assert page.title == "Convert JPEG to PNG - Free Online Converter | Imgaize"
        assert page.description == (
            "Convert JPEG images to PNG format online for free. "
            "Joint Photographic Experts Group - Best for photographs. "
            "Fast, secure, and works entirely in your browser."
        )

    def test_alias_resolves_to_canonical_descriptors(self, codec, catalog):
        page = load_conversion_page("jpg-to-webp", codec)
        assert page.source == "jpeg"
        assert page.source_format is catalog.lookup_by_value("jpeg")
        assert page.target_format.label == "WebP"

    def test_product_name(self, codec):
        page = load_conversion_page("gif-to-png", codec, product_name="Example")
        assert page.title == "Convert GIF to PNG - Free Online Converter | Example"

    def test_as_dict(self, codec):
        data = load_conversion_page("png-to-avif", codec).as_dict()
        assert data["from"] == "png"
        assert data["to"] == "avif"
        assert data["fromFormat"]["mime"] == "image/png"
        assert data["toFormat"]["canEncode"] is True


class TestNotFound:
    """Failures are split into syntax and unsupported-format errors."""

    @pytest.mark.parametrize("slug", ["jpegpng", "jpeg-to-png-to-gif", "jpeg-2-png", ""])
    def test_syntax_error(self, codec, slug):
        with pytest.raises(SlugSyntaxError) as exc_info:
            load_conversion_page(slug, codec)
        assert exc_info.value.slug == slug
        assert exc_info.value.status == 404
        assert "jpeg-to-png" in exc_info.value.message

    @pytest.mark.parametrize("slug", ["png-to-gif", "psd-to-png", "png-to-psd", "jpg-to-heif"])
    def test_unsupported_format(self, codec, slug):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            load_conversion_page(slug, codec)
        assert exc_info.value.message == "Unsupported image format."
        assert exc_info.value.status == 404

    def test_common_base_class(self, codec):
        with pytest.raises(ConversionNotFoundError):
            load_conversion_page("nope", codec)

    def test_custom_message(self):
        err = UnsupportedFormatError("x-to-y", message="custom")
        assert str(err) == "custom"
        assert err.message == "custom"
