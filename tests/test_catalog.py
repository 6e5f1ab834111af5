"""Tests for the format catalog."""

import pytest

from conftest import make_format
from imgaize.formats import DEFAULT_FORMATS, FormatCatalog, default_catalog


class TestDefaultCatalog:
    """Tests for the built-in format table."""

    def test_declaration_order(self, catalog):
        assert catalog.values() == ["png", "jpeg", "webp", "gif", "bmp", "avif", "tiff", "ico", "heic"]

    def test_values_are_unique(self):
        values = [f.value for f in DEFAULT_FORMATS]
        assert len(values) == len(set(values))

    def test_extensions_are_lowercase_without_dot(self, catalog):
        for fmt in catalog:
            for ext in fmt.extensions:
                assert ext == ext.lower()
                assert not ext.startswith(".")

    def test_input_formats_is_whole_catalog(self, catalog):
        assert list(catalog.input_formats) == list(catalog)

    def test_output_formats_are_encodable_in_order(self, catalog):
        assert [f.value for f in catalog.output_formats] == ["png", "jpeg", "webp", "bmp", "avif"]

    def test_non_encodable_formats(self, catalog):
        for value in ("gif", "tiff", "ico", "heic"):
            assert catalog.lookup_by_value(value).can_encode is False

    def test_default_catalog_is_shared(self):
        assert default_catalog() is default_catalog()

    def test_descriptor_is_immutable(self, catalog):
        fmt = catalog.lookup_by_value("png")
        with pytest.raises(AttributeError):
            fmt.can_encode = False

    def test_contains_and_len(self, catalog):
        assert "webp" in catalog
        assert "jpg" not in catalog
        assert len(catalog) == 9


class TestLookupByValue:
    """Exact-value lookups."""

    def test_known_value(self, catalog):
        fmt = catalog.lookup_by_value("jpeg")
        assert fmt.label == "JPEG"
        assert fmt.mime == "image/jpeg"

    def test_no_normalization(self, catalog):
        assert catalog.lookup_by_value("JPEG") is None
        assert catalog.lookup_by_value(" jpeg") is None

    def test_extension_is_not_a_value(self, catalog):
        assert catalog.lookup_by_value("jpg") is None

    def test_unknown_value(self, catalog):
        assert catalog.lookup_by_value("psd") is None


class TestLookupByExtension:
    """Extension lookups with normalization."""

    @pytest.mark.parametrize("ext", ["jpg", "JPG", ".jpg", ".JpG", "jpeg"])
    def test_normalized_forms_resolve_to_jpeg(self, catalog, ext):
        assert catalog.lookup_by_extension(ext) is catalog.lookup_by_value("jpeg")

    def test_secondary_extensions(self, catalog):
        assert catalog.lookup_by_extension("tif").value == "tiff"
        assert catalog.lookup_by_extension("heif").value == "heic"

    def test_only_one_leading_dot_is_stripped(self, catalog):
        assert catalog.lookup_by_extension("..png") is None

    def test_unknown_extension(self, catalog):
        assert catalog.lookup_by_extension("psd") is None
        assert catalog.lookup_by_extension("") is None

    def test_shared_extension_resolves_to_first_declared(self):
        first = make_format("alpha", extensions=("img",))
        second = make_format("beta", extensions=("img", "bta"))
        catalog = FormatCatalog([first, second])
        assert catalog.lookup_by_extension("img") is first
        assert catalog.lookup_by_extension("bta") is second


class TestCatalogConstruction:
    """Integrity checks when building a catalog."""

    def test_duplicate_values_rejected(self):
        with pytest.raises(ValueError, match="Duplicate format value"):
            FormatCatalog([make_format("png"), make_format("png")])

    def test_accepts_any_iterable(self):
        catalog = FormatCatalog(make_format(v) for v in ("a", "b"))
        assert catalog.values() == ["a", "b"]

    def test_as_dict_uses_wire_names(self, catalog):
        data = catalog.lookup_by_value("heic").as_dict()
        assert data["extensions"] == ["heic", "heif"]
        assert data["supportsTransparency"] is True
        assert data["canEncode"] is False
