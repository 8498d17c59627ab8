"""Depth-first binding of environment variables into dataclass instances."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from envlookup.core.annotation import parse_tag
from envlookup.core.binder import CoercionError, bind
from envlookup.core.errors import EnvLookupError, ErrorKind, FieldError
from envlookup.core.schema import FieldDescriptor, FieldKind, describe
from envlookup.core.validators import ValidatorRegistry, default_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Walker:
    """Walk a dataclass instance and bind its annotated fields.

    Each field's value is read from ``environ`` when that field is reached, so a
    store mutated during the walk may yield an inconsistent snapshot.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        registry: ValidatorRegistry | None = None,
    ) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.registry = default_registry() if registry is None else registry

    def walk(
        self, target: object, path: str = "", _seen: tuple[type, ...] = ()
    ) -> list[FieldError]:
        """Bind every settable field of ``target`` and return the failures found.

        A composite field whose type already encloses it on the current path is
        skipped, so self-referencing dataclasses terminate.

        Raises:
            TypeError: If ``target`` is not a dataclass instance.
        """
        if not dataclasses.is_dataclass(target) or isinstance(target, type):
            msg = f"lookup target must be a dataclass instance, got {type(target).__name__}"
            raise TypeError(msg)

        seen = (*_seen, type(target))
        errors: list[FieldError] = []
        for descriptor in describe(type(target), target):
            field_path = f"{path}.{descriptor.name}" if path else descriptor.name

            if not descriptor.settable:
                logger.debug("Skipping unsettable field %s", field_path)
                continue

            if descriptor.kind is FieldKind.COMPOSITE:
                if descriptor.type in seen:
                    logger.debug("Skipping recursive field %s", field_path)
                    continue
                nested = self._nested_instance(target, descriptor)
                errors.extend(self.walk(nested, field_path, seen))
                continue

            errors.extend(self._visit_leaf(target, descriptor, field_path))
        return errors

    def _nested_instance(self, target: object, descriptor: FieldDescriptor) -> Any:
        nested = getattr(target, descriptor.name, None)
        if not isinstance(nested, descriptor.type):
            nested = descriptor.type()
            setattr(target, descriptor.name, nested)
        return nested

    def _visit_leaf(
        self, target: object, descriptor: FieldDescriptor, field_path: str
    ) -> list[FieldError]:
        annotation = parse_tag(descriptor.tag, self.registry)
        if annotation.ignored:
            return []

        env_name = annotation.env_name
        errors = [
            FieldError(field_path, env_name, problem.kind, problem.message)
            for problem in annotation.problems
        ]

        raw = self.environ.get(env_name, "")
        logger.debug("Resolving %s from %s", field_path, env_name)

        for validator in annotation.validators:
            message = validator.validate(env_name, raw)
            if message is not None:
                kind = getattr(validator, "kind", ErrorKind.VALIDATION_FAILURE)
                errors.append(FieldError(field_path, env_name, kind, message))

        try:
            bind(target, descriptor, env_name, raw)
        except CoercionError as exc:
            errors.append(FieldError(field_path, env_name, exc.kind, exc.message))
        return errors


def collect(
    target: object,
    *,
    environ: Mapping[str, str] | None = None,
    registry: ValidatorRegistry | None = None,
) -> list[FieldError]:
    """Populate ``target`` and return every failure instead of raising."""
    return Walker(environ=environ, registry=registry).walk(target)


def lookup(
    target: T,
    *,
    environ: Mapping[str, str] | None = None,
    registry: ValidatorRegistry | None = None,
) -> T:
    """Populate ``target`` from the environment.

    Args:
        target: Dataclass instance whose annotated fields are bound.
        environ: Flat name-to-value store; defaults to ``os.environ``.
        registry: Validator registry; defaults to the process-wide one.

    Returns:
        ``target`` itself, populated.

    Raises:
        EnvLookupError: If any field failed. ``target`` may be partially populated.
        TypeError: If ``target`` is not a dataclass instance.
    """
    errors = collect(target, environ=environ, registry=registry)
    if errors:
        logger.debug("Lookup of %s failed with %d error(s)", type(target).__name__, len(errors))
        raise EnvLookupError(errors)
    return target
