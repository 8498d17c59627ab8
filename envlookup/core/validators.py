"""Validator capability, built-in validators and the validator registry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Protocol, runtime_checkable

from envlookup.config import EXPECTED_VALUES_FLAG, REQUIRED_FLAG
from envlookup.core.errors import ErrorKind

logger = logging.getLogger(__name__)


@runtime_checkable
class Validator(Protocol):
    """Checks a resolved environment value.

    ``validate`` returns a failure message, or ``None`` when the value is acceptable.
    Implementations may expose a ``kind`` attribute to categorise their failures;
    without one, failures are reported as ``ErrorKind.VALIDATION_FAILURE``.
    """

    def validate(self, env_name: str, value: str) -> str | None: ...


ValidatorFactory = Callable[[str], Validator]


class RequiredValidator:
    """Fails when the value is the empty string."""

    kind = ErrorKind.MISSING_REQUIRED

    def validate(self, env_name: str, value: str) -> str | None:
        if value == "":
            return f"{env_name} is required"
        return None


class ExpectedValuesValidator:
    """Fails when the value is not one of a fixed allow-list.

    Matching is exact and case-sensitive.
    """

    kind = ErrorKind.UNEXPECTED_VALUE

    def __init__(self, expected_values: list[str]) -> None:
        self.expected_values: tuple[str, ...] = tuple(expected_values)

    def validate(self, env_name: str, value: str) -> str | None:
        if value in self.expected_values:
            return None
        return f"{env_name} is unexpected value: {value}"


def new_required_validator(_args: str) -> Validator:
    return RequiredValidator()


def new_expected_values_validator(args: str) -> Validator:
    """Build an allow-list validator from space-separated ``args``."""
    return ExpectedValuesValidator(args.split(" "))


class ValidatorRegistry:
    """Mapping from validator name to the factory that builds it.

    Registration overwrites any existing entry with the same name. A registry is not
    synchronised; finish registering before sharing it across threads.
    """

    def __init__(self, factories: dict[str, ValidatorFactory] | None = None) -> None:
        self._factories: dict[str, ValidatorFactory] = dict(factories or {})

    @classmethod
    def with_defaults(cls) -> ValidatorRegistry:
        """Return a registry seeded with the built-in validators."""
        return cls(
            {
                REQUIRED_FLAG: new_required_validator,
                EXPECTED_VALUES_FLAG: new_expected_values_validator,
            }
        )

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Add or replace the factory for ``name``.

        Raises:
            ValueError: If ``name`` is empty.
            TypeError: If ``factory`` is not callable.
        """
        if not name:
            msg = "Validator name must not be empty"
            raise ValueError(msg)
        if not callable(factory):
            msg = f"Validator factory for {name!r} must be callable"
            raise TypeError(msg)
        if name in self._factories:
            logger.debug("Overwriting validator %s", name)
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._factories.pop(name, None)

    def get(self, name: str) -> ValidatorFactory | None:
        return self._factories.get(name)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def copy(self) -> ValidatorRegistry:
        return ValidatorRegistry(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)


_DEFAULT_REGISTRY = ValidatorRegistry.with_defaults()


def default_registry() -> ValidatorRegistry:
    """Return the process-wide registry used when no registry is passed to lookup."""
    return _DEFAULT_REGISTRY


def add_validator(name: str, factory: ValidatorFactory) -> None:
    """Register a custom validator on the process-wide registry."""
    _DEFAULT_REGISTRY.register(name, factory)
