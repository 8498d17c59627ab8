"""Structured binding errors and their aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a single per-field failure."""

    MISSING_REQUIRED = "missing-required"
    UNEXPECTED_VALUE = "unexpected-value"
    COERCION_FAILURE = "coercion-failure"
    UNSUPPORTED_TYPE = "unsupported-type"
    UNKNOWN_VALIDATOR = "unknown-validator"
    MALFORMED_VALIDATOR = "malformed-validator"
    VALIDATION_FAILURE = "validation-failure"


@dataclass(frozen=True)
class FieldError:
    """One failure discovered while binding a field.

    Attributes:
        field: Dotted attribute path of the field, e.g. ``web.host``.
        env_name: Environment variable the field is bound to.
        kind: Failure category.
        message: Human-readable description.
    """

    field: str
    env_name: str
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class EnvLookupError(Exception):
    """Aggregate of every field failure from one lookup pass.

    The target may be partially populated when this is raised and must not be used.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors: list[FieldError] = list(errors)
        super().__init__(self.errors)

    def __str__(self) -> str:
        return "\n".join(error.message for error in self.errors)

    def kinds(self) -> list[ErrorKind]:
        """Return the error kinds in reporting order."""
        return [error.kind for error in self.errors]

    def for_env(self, env_name: str) -> list[FieldError]:
        """Return the failures recorded against one environment variable."""
        return [error for error in self.errors if error.env_name == env_name]
