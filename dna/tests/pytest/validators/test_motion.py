"""
Tests for the motion validator.
"""

from __future__ import annotations

import pytest

from dna.tests.pytest.helpers import drop_path, make_document, set_path
from dna.validators.design.motion import MotionValidator

from .base_test import ValidatorPropertiesTestMixin


@pytest.mark.evergreen
class TestMotionProperties(ValidatorPropertiesTestMixin):
    validator_name = "motion-system"
    validator_category = "motion"
    validator_score_key = "motionSystem"

    @pytest.fixture
    def validator(self):
        return MotionValidator()


@pytest.mark.evergreen
class TestMotionRules:
    @pytest.fixture
    def validator(self):
        return MotionValidator()

    def test_spring_count_metric(self, validator, make_context):
        result = validator.validate(make_context(make_document()))
        assert result.metrics["spring_count"] == 2

    def test_missing_springs_is_error(self, validator, make_context):
        document = drop_path(make_document(), "primitives.motion.springs")
        result = validator.validate(make_context(document))
        assert result.score == 1
        assert "spring physics" in result.errors[0]

    def test_empty_springs_is_error(self, validator, make_context):
        document = set_path(make_document(), "primitives.motion.springs", {})
        assert validator.validate(make_context(document)).score == 1

    def test_undefined_default_spring(self, validator, make_context):
        """A defaultSpring naming no defined spring is an error capped at 2."""
        document = set_path(make_document(), "primitives.motion.defaultSpring", "bouncy")
        result = validator.validate(make_context(document))
        assert result.score <= 2
        assert result.errors == ['Default spring "bouncy" not found in springs']

    def test_missing_default_spring(self, validator, make_context):
        document = drop_path(make_document(), "primitives.motion.defaultSpring")
        result = validator.validate(make_context(document))
        assert result.score == 2
        assert len(result.errors) == 1

    def test_non_string_default_spring(self, validator, make_context):
        document = set_path(make_document(), "primitives.motion.defaultSpring", ["gentle"])
        result = validator.validate(make_context(document))
        assert result.score == 2

    def test_reduced_motion_warning(self, validator, make_context):
        document = set_path(make_document(), "primitives.motion.reducedMotion", "ignore")
        result = validator.validate(make_context(document))
        assert result.errors == []
        assert len(result.warnings) == 1
        assert "respectSystem" in result.warnings[0]
        assert result.score == 3

    def test_errors_and_warning_combine(self, validator, make_context):
        document = drop_path(make_document(), "primitives.motion")
        result = validator.validate(make_context(document))
        assert result.score == 1
        assert len(result.errors) == 2
        assert len(result.warnings) == 1
