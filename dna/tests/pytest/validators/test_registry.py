"""
Tests for validator registration and discovery.
"""

from __future__ import annotations

import pytest

from dna.validators import BaseValidator, CATEGORY_ORDER, discover_validators, registry
from dna.validators.registry import ValidatorRegistry


class _StubValidator(BaseValidator):
    def __init__(self, name="stub", category="color", score_key="stubSystem"):
        super().__init__(name, category, score_key)


@pytest.mark.evergreen
class TestValidatorRegistry:
    def test_register_and_get(self):
        local = ValidatorRegistry()
        stub = _StubValidator()
        local.register(stub)
        assert local.get("stub") is stub
        assert "stub" in local
        assert len(local) == 1
        assert local.get_by_category("color") == [stub]

    def test_duplicate_name_rejected(self):
        local = ValidatorRegistry()
        local.register(_StubValidator())
        with pytest.raises(ValueError, match="already registered"):
            local.register(_StubValidator())

    def test_unknown_category_rejected(self):
        local = ValidatorRegistry()
        with pytest.raises(ValueError, match="Invalid category"):
            local.register(_StubValidator(category="sound"))

    def test_non_validator_rejected(self):
        local = ValidatorRegistry()
        with pytest.raises(TypeError):
            local.register(object())

    def test_list_all_follows_category_order(self):
        local = ValidatorRegistry()
        local.register(_StubValidator("u", "uniqueness", "u"))
        local.register(_StubValidator("c", "color", "c"))
        local.register(_StubValidator("g", "geometry", "g"))
        assert [v.name for v in local.list_all()] == ["c", "g", "u"]
        assert local.list_names() == ["c", "g", "u"]

    def test_clear(self):
        local = ValidatorRegistry()
        local.register(_StubValidator())
        local.clear()
        assert len(local) == 0
        assert local.get("stub") is None


@pytest.mark.evergreen
class TestDiscovery:
    def test_discovers_one_validator_per_category(self):
        discover_validators()
        assert [v.category for v in registry.list_all()] == list(CATEGORY_ORDER)

    def test_discovery_is_idempotent(self):
        discover_validators()
        before = len(registry)
        assert discover_validators() == 0
        assert len(registry) == before

    def test_score_keys(self):
        discover_validators()
        assert [v.score_key for v in registry.list_all()] == [
            "colorSystem",
            "typographySystem",
            "motionSystem",
            "geometricSystem",
            "uniqueness",
        ]
