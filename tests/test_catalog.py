"""Tests for hairstyle catalog loading and validation."""

import pytest

from hairstyle_recommender.catalog import HairstyleCatalog, get_catalog, load_catalog, parse_entry
from hairstyle_recommender.models import FaceShape, ForeheadTolerance, HairCategory, StyleTag
from hairstyle_recommender.utils.exceptions import CatalogError

from conftest import make_entry

VALID_ENTRY = """
  - id: "a"
    name: Test Cut
    category: short
    compatible_shapes: [oval, square]
    jawline_required_threshold: 40
    forehead_tolerance: all
"""


def write_catalog(tmp_path, body):
    path = tmp_path / "catalog.yaml"
    path.write_text("hairstyles:\n" + body, encoding='utf-8')
    return path


class TestDefaultCatalog:
    def test_nineteen_styles_in_order(self):
        catalog = load_catalog()
        assert len(catalog) == 19
        assert [entry.id for entry in catalog] == [str(i) for i in range(1, 20)]

    def test_lookup_by_id(self):
        catalog = load_catalog()
        entry = catalog["1"]

        assert entry.name == "Buzz Cut"
        assert entry.category is HairCategory.SHORT
        assert FaceShape.SQUARE in entry.compatible_shapes
        assert entry.forehead_tolerance is ForeheadTolerance.ALL
        assert "99" not in catalog
        assert catalog.get("99") is None

    def test_unknown_id_raises_key_error(self):
        with pytest.raises(KeyError):
            load_catalog()["99"]

    def test_volume_styles_are_tagged(self):
        catalog = load_catalog()
        by_name = {entry.name: entry for entry in catalog}

        assert StyleTag.SIDE_PART in by_name["Side Part"].style_tags
        assert StyleTag.QUIFF in by_name["Quiff"].style_tags
        assert StyleTag.POMPADOUR in by_name["Pompadour"].style_tags

    def test_every_category_present(self):
        categories = {entry.category for entry in load_catalog()}
        assert categories == set(HairCategory)

    def test_get_catalog_is_cached(self):
        assert get_catalog() is get_catalog()


class TestCatalogValidation:
    def test_custom_file(self, tmp_path):
        catalog = load_catalog(str(write_catalog(tmp_path, VALID_ENTRY)))

        assert len(catalog) == 1
        assert catalog["a"].style_tags == frozenset()
        assert catalog["a"].jawline_required_threshold == 40.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(str(tmp_path / "nope.yaml"))

    def test_missing_field(self):
        with pytest.raises(CatalogError, match="forehead_tolerance"):
            parse_entry({
                'id': 'x', 'name': 'X', 'category': 'short',
                'compatible_shapes': ['oval'], 'jawline_required_threshold': 10,
            })

    def test_unknown_category(self, tmp_path):
        path = write_catalog(tmp_path, VALID_ENTRY.replace("category: short", "category: mohawk"))
        with pytest.raises(CatalogError, match="category"):
            load_catalog(str(path))

    def test_unknown_face_shape(self, tmp_path):
        path = write_catalog(tmp_path, VALID_ENTRY.replace("[oval, square]", "[oval, triangle]"))
        with pytest.raises(CatalogError):
            load_catalog(str(path))

    @pytest.mark.parametrize("old, new", [
        ("compatible_shapes: [oval, square]", "compatible_shapes: oval"),
        ("compatible_shapes: [oval, square]", "compatible_shapes:"),
        ("forehead_tolerance: all", "forehead_tolerance: all\n    style_tags: quiff"),
    ])
    def test_scalar_list_fields_rejected(self, tmp_path, old, new):
        path = write_catalog(tmp_path, VALID_ENTRY.replace(old, new))
        with pytest.raises(CatalogError, match="must be a list"):
            load_catalog(str(path))

    def test_style_tags_list(self, tmp_path):
        body = VALID_ENTRY.replace("forehead_tolerance: all", "forehead_tolerance: all\n    style_tags: [quiff]")
        catalog = load_catalog(str(write_catalog(tmp_path, body)))
        assert catalog["a"].style_tags == frozenset({StyleTag.QUIFF})

    def test_duplicate_ids(self, tmp_path):
        path = write_catalog(tmp_path, VALID_ENTRY + VALID_ENTRY)
        with pytest.raises(CatalogError, match="Duplicate"):
            load_catalog(str(path))

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("hairstyles: 3\n", encoding='utf-8')
        with pytest.raises(CatalogError):
            load_catalog(str(path))

    def test_empty_catalog_object(self):
        catalog = HairstyleCatalog([])
        assert len(catalog) == 0
        assert list(catalog) == []

    def test_entries_are_immutable(self):
        catalog = HairstyleCatalog([make_entry()])
        with pytest.raises(AttributeError):
            catalog.entries[0].name = "changed"
