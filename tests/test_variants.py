"""Tests for gallery and radio field variants."""

import pytest
from pydantic import ValidationError

from acf_builder.fields import GalleryField, RadioField

BASE_ORDER = [
    "key",
    "label",
    "name",
    "type",
    "parent",
    "instructions",
    "required",
    "conditional_logic",
    "wrapper",
    "default_value",
]


class TestGalleryField:
    """Tests for GalleryField."""

    def test_defaults(self):
        """Test gallery defaults appear in the record."""
        record = GalleryField().set_label("Photos").build()
        assert record["type"] == "gallery"
        assert record["min"] == 0
        assert record["max"] == 0
        assert record["preview_size"] == "thumbnail"
        assert record["library"] == "all"
        assert record["mime_types"] == ""

    def test_order(self):
        """Test base attributes come first, then gallery attributes."""
        record = GalleryField().set_label("Photos").build()
        assert list(record) == BASE_ORDER + [
            "min",
            "max",
            "preview_size",
            "library",
            "min_width",
            "min_height",
            "min_size",
            "max_width",
            "max_height",
            "max_size",
            "mime_types",
        ]

    def test_key_uses_gallery_type(self):
        """Test the derived key carries the gallery type."""
        record = GalleryField().set_label("Photos").set_prefix("group_1").build()
        assert record["key"].startswith("field_gallery_")

    def test_size_with_unit(self):
        """Test size bounds accept a unit suffix."""
        field = GalleryField(max_size="256KB", min_size=1)
        record = field.set_label("Photos").build()
        assert record["max_size"] == "256KB"
        assert record["min_size"] == 1

    def test_library_restricted(self):
        """Test library only accepts known choices."""
        with pytest.raises(ValidationError):
            GalleryField(library="everything")

    def test_setters_still_chain(self):
        """Test inherited setters return the variant instance."""
        field = GalleryField()
        assert field.set_label("Photos") is field


class TestRadioField:
    """Tests for RadioField."""

    def test_defaults(self):
        """Test radio defaults appear in the record."""
        record = RadioField().set_label("Colour").build()
        assert record["type"] == "radio"
        assert record["choices"] == {}
        assert record["other_choice"] == 0
        assert record["save_other_choice"] == 0
        assert record["layout"] == "vertical"

    def test_order(self):
        """Test base attributes come first, then radio attributes."""
        record = RadioField().set_label("Colour").build()
        assert list(record) == BASE_ORDER + [
            "choices",
            "other_choice",
            "save_other_choice",
            "layout",
        ]

    def test_choices(self):
        """Test choices are emitted in insertion order."""
        field = RadioField(choices={"red": "Red", "blue": "Blue"}, layout="horizontal")
        record = field.set_label("Colour").set_default_value("red").build()
        assert list(record["choices"].items()) == [("red", "Red"), ("blue", "Blue")]
        assert record["layout"] == "horizontal"
        assert record["default_value"] == "red"

    def test_default_choices_not_shared(self):
        """Test each instance gets its own choices dict."""
        first = RadioField()
        first.choices["a"] = "A"
        assert RadioField().choices == {}

    def test_explicit_type_overrides_default(self):
        """Test set_type still replaces the variant default."""
        record = RadioField().set_type("button_group").set_label("Size").build()
        assert record["type"] == "button_group"
        assert record["key"].startswith("field_button_group_")
