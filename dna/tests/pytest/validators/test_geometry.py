"""
Tests for the geometry validator.
"""

from __future__ import annotations

import pytest

from dna.tests.pytest.helpers import drop_path, make_document, set_path
from dna.validators.design.geometry import GeometryValidator, distinct_radii

from .base_test import ValidatorPropertiesTestMixin

RADII = "primitives.geometry.borderRadius"


@pytest.mark.evergreen
class TestGeometryProperties(ValidatorPropertiesTestMixin):
    validator_name = "geometric-system"
    validator_category = "geometry"
    validator_score_key = "geometricSystem"

    @pytest.fixture
    def validator(self):
        return GeometryValidator()


@pytest.mark.evergreen
class TestDistinctRadii:
    def test_neutral_radii_excluded(self, make_context):
        context = make_context(make_document())
        assert distinct_radii(context) == {"2px", "6px", "12px"}

    def test_duplicates_collapse(self, make_context):
        document = set_path(make_document(), RADII, {"a": "4px", "b": "4px", "c": "0px"})
        assert distinct_radii(make_context(document)) == {"4px"}

    def test_not_a_mapping(self, make_context):
        document = set_path(make_document(), RADII, ["4px", "8px"])
        assert distinct_radii(make_context(document)) == set()


@pytest.mark.evergreen
class TestGeometryRules:
    @pytest.fixture
    def validator(self):
        return GeometryValidator()

    def test_uniform_radius_warns(self, validator, make_context):
        document = set_path(make_document(), RADII, {"none": "0px", "all": "8px", "pill": "9999px"})
        result = validator.validate(make_context(document))
        assert result.errors == []
        assert result.warnings == [
            "Border radius should vary by component type (found 1 distinct values)"
        ]
        assert result.score == 3

    def test_only_neutral_radii_warns(self, validator, make_context):
        document = set_path(make_document(), RADII, {"none": "0px", "pill": "9999px"})
        result = validator.validate(make_context(document))
        assert "found 0 distinct" in result.warnings[0]

    def test_missing_spacing_base_is_error(self, validator, make_context):
        document = drop_path(make_document(), "primitives.geometry.spacing.base")
        result = validator.validate(make_context(document))
        assert result.errors == ["Spacing must define a base unit"]
        assert result.score == 2

    def test_error_and_warning_take_lowest_ceiling(self, validator, make_context):
        document = drop_path(make_document(), "primitives.geometry")
        result = validator.validate(make_context(document))
        assert result.score == 2
        assert len(result.errors) == 1
        assert len(result.warnings) == 1

    def test_metrics(self, validator, make_context):
        result = validator.validate(make_context(make_document()))
        assert result.metrics["distinct_radii"] == ["12px", "2px", "6px"]
