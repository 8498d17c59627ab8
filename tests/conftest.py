"""Shared fixtures for binding tests."""

import pytest

from envlookup.core.validators import ValidatorRegistry, default_registry


@pytest.fixture
def registry() -> ValidatorRegistry:
    """Fresh registry seeded with the built-in validators."""
    return ValidatorRegistry.with_defaults()


@pytest.fixture
def clean_default_registry():
    """Restore the process-wide registry after a test registers validators."""
    before = {name: default_registry().get(name) for name in default_registry()}
    yield default_registry()
    for name in list(default_registry()):
        if name not in before:
            default_registry().unregister(name)
    for name, factory in before.items():
        default_registry().register(name, factory)
