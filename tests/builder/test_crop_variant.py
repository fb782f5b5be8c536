"""
Unit Tests for the CropVariant builder

Tests for setters, finalize-time validation and default title resolution.
"""

import pytest

from cropvariants.builder.crop_variant import CropVariant
from cropvariants.config import BuilderSettings
from cropvariants.core.errors import (
    DuplicateKeyError,
    MissingFieldError,
    ShapeError,
    UnknownKeyError,
)
from cropvariants.core.models.area import Area
from cropvariants.localization import MappingLocalizer


@pytest.fixture
def variant(ratios) -> CropVariant:
    """A builder that get() accepts as-is."""
    return CropVariant.create("teaser_crop").add_allowed_aspect_ratios(ratios)


class TestCreate:
    """Tests for construction and defaults."""

    def test_create_when_named_then_sets_default_crop_area(self, full_area):
        """A new builder should start with the full-image crop area."""
        record = CropVariant.create("hero").add_allowed_aspect_ratios({"1:1": 1.0}).get()
        assert record["hero"]["cropArea"] == full_area

    def test_create_when_provider_given_then_uses_provider(self):
        """An injected crop area provider should be used for the default."""
        area = {"x": 10, "y": 20, "width": 300, "height": 200}
        variant = CropVariant.create("hero", default_crop_area=lambda: area)
        record = variant.add_allowed_aspect_ratios({"1:1": 1.0}).get()
        assert record["hero"]["cropArea"] == area

    def test_name_when_read_then_returns_constructor_name(self):
        """name should be the value given at construction."""
        assert CropVariant("hero").name == "hero"

    def test_name_when_assigned_then_raises(self):
        """name should be read-only."""
        variant = CropVariant("hero")
        with pytest.raises(AttributeError):
            variant.name = "other"


class TestDefaultTitle:
    """Tests for the default title fallback chain."""

    def test_title_when_no_translation_then_underscores_become_spaces(self):
        """Without labels the title is the name with spaces for underscores."""
        assert CropVariant.create("teaser_crop").title == "teaser crop"

    def test_title_when_name_has_space_then_localizer_not_consulted(self):
        """A name with a space should skip the label lookup entirely."""
        calls = []

        class RecordingLocalizer:
            def lookup(self, key):
                calls.append(key)
                return "translated"

        variant = CropVariant.create("teaser crop", localizer=RecordingLocalizer())
        assert variant.title == "teaser crop"
        assert calls == []

    def test_title_when_library_label_exists_then_uses_reference(self):
        """A label in the library catalog should become the title reference."""
        ref = "cropvariants:locallang:crop_variants.desktop.label"
        variant = CropVariant.create("desktop", localizer=MappingLocalizer({ref: "Desktop"}))
        assert variant.title == ref
        assert variant.resolved_title() == "Desktop"

    def test_title_when_provider_label_exists_then_overrides_library(self):
        """The configured provider catalog should win over the library catalog."""
        localizer = MappingLocalizer({
            "cropvariants:locallang:crop_variants.mobile.label": "Mobile",
            "site:labels:crop_variants.mobile.label": "Phone",
        })
        settings = BuilderSettings("site", "labels")
        variant = CropVariant.create("mobile", localizer=localizer, settings=settings)
        assert variant.title == "site:labels:crop_variants.mobile.label"
        assert variant.resolved_title() == "Phone"

    def test_title_when_provider_incomplete_then_provider_not_consulted(self):
        """A provider namespace without basename should not be looked up."""
        localizer = MappingLocalizer({"site::crop_variants.mobile.label": "Phone"})
        settings = BuilderSettings("site", "")
        variant = CropVariant.create("mobile", localizer=localizer, settings=settings)
        assert variant.title == "mobile"

    def test_title_when_name_empty_then_get_raises_missing_field(self, ratios):
        """An empty name gives no title, so get() fails."""
        variant = CropVariant.create("").add_allowed_aspect_ratios(ratios)
        assert variant.title == ""
        with pytest.raises(MissingFieldError, match="Title"):
            variant.get()

    def test_title_when_set_title_then_overrides_default(self):
        """set_title() should replace the default and trim whitespace."""
        variant = CropVariant.create("teaser_crop").set_title("  Teaser  ")
        assert variant.title == "Teaser"

    def test_resolved_title_when_plain_title_then_returned_unchanged(self):
        """Plain titles are not looked up."""
        assert CropVariant.create("teaser_crop").resolved_title() == "teaser crop"


class TestFocusArea:
    """Tests for set_focus_area()."""

    def test_set_focus_area_when_missing_key_then_raises_immediately(self):
        """A focus area without height should fail at set time."""
        variant = CropVariant.create("teaser_crop")
        with pytest.raises(ShapeError, match="teaser_crop") as exc_info:
            variant.set_focus_area({"x": 1, "y": 2, "width": 3})
        assert exc_info.value.path == "focusArea"
        assert exc_info.value.variant == "teaser_crop"

    def test_set_focus_area_when_empty_then_clears(self, variant):
        """An empty focus area should clear it without error."""
        variant.set_focus_area(Area(0.2, 0.2, 0.5, 0.5)).set_focus_area({})
        assert variant.get()["teaser_crop"]["focusArea"] is None

    def test_set_focus_area_when_not_mapping_then_raises_shape(self):
        """A sequence instead of a mapping should fail with ShapeError."""
        variant = CropVariant.create("teaser_crop")
        with pytest.raises(ShapeError, match="must be a mapping") as exc_info:
            variant.set_focus_area([1, 2, 3, 4])
        assert exc_info.value.path == "focusArea"

    def test_set_crop_area_when_not_mapping_then_raises_shape(self):
        """set_crop_area() rejects non-mapping input too."""
        with pytest.raises(ShapeError, match="cropArea"):
            CropVariant.create("teaser_crop").set_crop_area("0,0,1,1")

    def test_set_focus_area_when_complete_then_in_record(self, variant):
        """A complete focus area should appear in the record."""
        focus = {"x": 0.1, "y": 0.2, "width": 0.3, "height": 0.4}
        assert variant.set_focus_area(focus).get()["teaser_crop"]["focusArea"] == focus


class TestAspectRatios:
    """Tests for the allowed aspect ratio operations."""

    def test_add_when_key_exists_then_raises_duplicate(self):
        """Adding an existing key should fail."""
        variant = CropVariant.create("teaser_crop").add_allowed_aspect_ratios({"16:9": "16:9"})
        with pytest.raises(DuplicateKeyError, match="16:9"):
            variant.add_allowed_aspect_ratios({"16:9": "dup"})

    def test_add_when_key_collides_then_nothing_added(self):
        """A rejected call should leave the ratios unchanged."""
        variant = CropVariant.create("teaser_crop").add_allowed_aspect_ratios({"16:9": "16:9"})
        with pytest.raises(DuplicateKeyError):
            variant.add_allowed_aspect_ratios({"4:3": "4:3", "16:9": "dup"})
        assert variant.get()["teaser_crop"]["allowedAspectRatios"] == {"16:9": "16:9"}

    def test_add_when_called_twice_then_merges(self):
        """Separate calls with new keys should accumulate."""
        variant = (
            CropVariant.create("teaser_crop")
            .add_allowed_aspect_ratios({"16:9": "16:9"})
            .add_allowed_aspect_ratios({"4:3": "4:3"})
        )
        ratios = variant.get()["teaser_crop"]["allowedAspectRatios"]
        assert list(ratios) == ["16:9", "4:3"]

    def test_remove_when_unknown_then_raises(self):
        """Removing a ratio that was never added should fail."""
        variant = CropVariant.create("teaser_crop")
        with pytest.raises(UnknownKeyError, match="4:3"):
            variant.remove_allowed_aspect_ratio("4:3")

    def test_remove_when_padded_key_then_removes_trimmed(self, variant):
        """Whitespace around the key should be ignored."""
        variant.remove_allowed_aspect_ratio(" 4:3 ")
        assert list(variant.get()["teaser_crop"]["allowedAspectRatios"]) == ["16:9"]

    def test_remove_then_add_when_same_key_then_succeeds(self, variant):
        """A removed key can be added again."""
        variant.remove_allowed_aspect_ratio("16:9").add_allowed_aspect_ratios({"16:9": "new"})
        assert variant.get()["teaser_crop"]["allowedAspectRatios"]["16:9"] == "new"

    def test_set_selected_ratio_when_allowed_then_in_record(self):
        """A selected allowed ratio should be in the record."""
        record = (
            CropVariant.create("teaser_crop")
            .add_allowed_aspect_ratios({"16:9": "16:9"})
            .set_selected_ratio("16:9")
            .get()
        )
        assert record["teaser_crop"]["selectedRatio"] == "16:9"

    def test_set_selected_ratio_when_padded_then_stores_trimmed(self, variant):
        """The trimmed key is validated and stored."""
        variant.set_selected_ratio(" 16:9 ")
        assert variant.get()["teaser_crop"]["selectedRatio"] == "16:9"

    def test_set_selected_ratio_when_unknown_then_raises(self, variant):
        """Selecting a ratio that is not allowed should fail."""
        with pytest.raises(UnknownKeyError, match="1:1"):
            variant.set_selected_ratio("1:1")

    def test_selected_ratio_when_unset_then_empty_string(self, variant):
        """selectedRatio defaults to an empty string."""
        assert variant.get()["teaser_crop"]["selectedRatio"] == ""


class TestGet:
    """Tests for get() validation and output."""

    def test_get_when_valid_then_single_key_equal_to_name(self, variant):
        """The record should have exactly one key, the variant name."""
        record = variant.get()
        assert list(record) == ["teaser_crop"]
        assert set(record["teaser_crop"]) == {
            "title", "cropArea", "focusArea", "coverAreas",
            "allowedAspectRatios", "selectedRatio",
        }

    def test_get_when_title_empty_then_raises_missing_field(self, variant):
        """An empty title should fail regardless of other fields."""
        with pytest.raises(MissingFieldError, match="Title") as exc_info:
            variant.set_title("   ").get()
        assert exc_info.value.path == "title"

    def test_get_when_crop_area_empty_then_raises_missing_field(self, variant):
        """An empty crop area should fail."""
        with pytest.raises(MissingFieldError, match="cropArea"):
            variant.set_crop_area({}).get()

    def test_get_when_crop_area_incomplete_then_raises_shape(self, variant):
        """A crop area missing a key should fail."""
        with pytest.raises(ShapeError, match="cropArea"):
            variant.set_crop_area({"x": 0, "y": 0, "width": 1}).get()

    def test_get_when_cover_area_incomplete_then_raises_shape(self, variant, full_area):
        """An incomplete cover area should fail at get() time."""
        variant.add_cover_areas([full_area, {"x": 0, "y": 0}])
        with pytest.raises(ShapeError) as exc_info:
            variant.get()
        assert exc_info.value.path == "coverAreas[1]"

    def test_get_when_no_ratios_then_raises_missing_field(self):
        """No allowed aspect ratios should fail even if all else is valid."""
        with pytest.raises(MissingFieldError, match="allowedAspectRatios"):
            CropVariant.create("teaser_crop").get()

    def test_get_when_several_invalid_then_first_check_wins(self):
        """Title is checked before crop area and aspect ratios."""
        variant = CropVariant.create("teaser_crop").set_title("").set_crop_area({"x": 1})
        with pytest.raises(MissingFieldError, match="Title"):
            variant.get()

    def test_get_when_crop_area_bad_and_no_ratios_then_shape_error_first(self):
        """Area shape is checked before aspect ratios."""
        variant = CropVariant.create("teaser_crop").set_crop_area({"x": 1})
        with pytest.raises(ShapeError):
            variant.get()

    def test_get_when_cover_area_bad_and_no_ratios_then_shape_error_first(self):
        """Cover areas are checked before aspect ratios."""
        variant = CropVariant.create("teaser_crop").add_cover_areas([{"x": 0, "y": 0}])
        with pytest.raises(ShapeError) as exc_info:
            variant.get()
        assert exc_info.value.path == "coverAreas[0]"

    def test_get_when_no_cover_areas_then_none(self, variant):
        """coverAreas should be None when empty."""
        assert variant.get()["teaser_crop"]["coverAreas"] is None

    def test_get_when_cover_areas_added_twice_then_accumulated(self, variant):
        """Cover areas from several calls should accumulate in order."""
        first = Area(0, 0, 0.5, 0.5)
        second = {"x": 0.5, "y": 0.5, "width": 0.5, "height": 0.5}
        variant.add_cover_areas([first]).add_cover_areas([second])
        assert variant.get()["teaser_crop"]["coverAreas"] == [first.to_dict(), second]

    def test_get_when_called_twice_then_equal(self, variant):
        """get() should be idempotent."""
        assert variant.get() == variant.get()

    def test_get_when_result_mutated_then_builder_unaffected(self, variant):
        """The record is an independent copy."""
        record = variant.get()
        record["teaser_crop"]["cropArea"]["x"] = 99
        record["teaser_crop"]["allowedAspectRatios"]["16:9"]["value"] = 0
        again = variant.get()["teaser_crop"]
        assert again["cropArea"]["x"] == 0.0
        assert again["allowedAspectRatios"]["16:9"]["value"] == 16 / 9

    def test_get_when_input_mutated_then_builder_unaffected(self, ratios):
        """Mutating caller-owned inputs should not change the builder."""
        area = {"x": 1, "y": 2, "width": 3, "height": 4}
        variant = CropVariant.create("teaser_crop").set_crop_area(area).add_allowed_aspect_ratios(ratios)
        area["x"] = 100
        ratios["16:9"]["title"] = "changed"
        body = variant.get()["teaser_crop"]
        assert body["cropArea"]["x"] == 1
        assert body["allowedAspectRatios"]["16:9"]["title"] == "16:9"
