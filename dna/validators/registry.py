"""
Validator registry for plugin discovery and registration.

Category validators register themselves with the module-level registry via
the @register_validator decorator; discover_validators() imports the design
package so that registration happens.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Optional, Type, TypeVar

from .base import Validator

log = logging.getLogger(__name__)

# Type variable for the decorator
V = TypeVar("V", bound=Type[Validator])

# Report order; also the set of valid categories
CATEGORY_ORDER: tuple[str, ...] = ("color", "typography", "motion", "geometry", "uniqueness")


class ValidatorRegistry:
    """Registry for category validators.

    Manages registration and lookup. Validators register via the
    @register_validator decorator or by calling registry.register() directly.
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator] = {}
        self._by_category: dict[str, list[str]] = {}

    def register(self, validator: Validator) -> None:
        """Register a validator instance.

        Raises:
            TypeError: If validator doesn't implement the Validator protocol.
            ValueError: If the name is taken or the category is unknown.
        """
        if not isinstance(validator, Validator):
            raise TypeError(
                f"Validator must implement the Validator protocol. "
                f"Got {type(validator).__name__} which is missing required "
                f"attributes/methods (name, category, score_key, validate)."
            )

        name = validator.name
        category = validator.category

        if name in self._validators:
            existing = self._validators[name]
            raise ValueError(
                f"Validator '{name}' is already registered "
                f"(existing: {type(existing).__name__}, "
                f"new: {type(validator).__name__})"
            )

        if category not in CATEGORY_ORDER:
            raise ValueError(
                f"Invalid category '{category}' for validator '{name}'. "
                f"Must be one of: {', '.join(sorted(CATEGORY_ORDER))}"
            )

        self._validators[name] = validator
        self._by_category.setdefault(category, []).append(name)

    def get(self, name: str) -> Optional[Validator]:
        """Get a validator by name, or None if not found."""
        return self._validators.get(name)

    def get_by_category(self, category: str) -> list[Validator]:
        """Get all validators in a category (may be empty)."""
        names = self._by_category.get(category, [])
        return [self._validators[name] for name in names]

    def list_all(self) -> list[Validator]:
        """All registered validators, in report order."""
        ordered: list[Validator] = []
        for category in CATEGORY_ORDER:
            ordered.extend(self.get_by_category(category))
        return ordered

    def list_names(self) -> list[str]:
        """Names of all registered validators, sorted alphabetically."""
        return sorted(self._validators.keys())

    def clear(self) -> None:
        """Clear all registered validators. Primarily for testing."""
        self._validators.clear()
        self._by_category.clear()

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, name: str) -> bool:
        return name in self._validators


# Module-level singleton instance
registry = ValidatorRegistry()


def register_validator(cls: V) -> V:
    """Decorator to register a validator class.

    The decorated class is instantiated (with no arguments) and registered
    with the global registry.

    Usage:
        @register_validator
        class ColorSystemValidator(BaseValidator):
            def __init__(self):
                super().__init__("color-system", "color", "colorSystem")
    """
    registry.register(cls())
    return cls


def discover_validators() -> int:
    """Import all design validator modules to trigger registration.

    Idempotent: modules are only executed on first import.

    Returns:
        Number of validators newly registered by this call.
    """
    import dna.validators.design as design_pkg

    initial_count = len(registry)
    for module_info in pkgutil.iter_modules(design_pkg.__path__):
        if module_info.name.startswith("_"):
            continue
        importlib.import_module(f"{design_pkg.__name__}.{module_info.name}")

    discovered = len(registry) - initial_count
    if discovered:
        log.debug("discovered %d validators", discovered)
    return discovered
