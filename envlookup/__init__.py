"""Bind environment variables into annotated dataclasses."""

from envlookup.core.annotation import AnnotationSpec, ValidatorSpec, parse_tag
from envlookup.core.errors import EnvLookupError, ErrorKind, FieldError
from envlookup.core.schema import FieldDescriptor, FieldKind, describe, env_field
from envlookup.core.validators import (
    ExpectedValuesValidator,
    RequiredValidator,
    Validator,
    ValidatorFactory,
    ValidatorRegistry,
    add_validator,
    default_registry,
)
from envlookup.core.walker import Walker, collect, lookup

__all__ = [
    "AnnotationSpec",
    "EnvLookupError",
    "ErrorKind",
    "ExpectedValuesValidator",
    "FieldDescriptor",
    "FieldError",
    "FieldKind",
    "RequiredValidator",
    "Validator",
    "ValidatorFactory",
    "ValidatorRegistry",
    "ValidatorSpec",
    "Walker",
    "add_validator",
    "collect",
    "default_registry",
    "describe",
    "env_field",
    "lookup",
    "parse_tag",
]
