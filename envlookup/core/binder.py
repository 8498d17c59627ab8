"""Coercion of raw environment strings into typed field values."""

from __future__ import annotations

import re
from typing import Any

from envlookup.core.errors import ErrorKind
from envlookup.core.schema import FieldDescriptor, FieldKind

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class CoercionError(ValueError):
    """Raised when a raw value cannot be converted to the field's type."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def parse_int(value: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Raises:
        ValueError: On invalid syntax or when the value is out of range.
    """
    if not _INT_RE.fullmatch(value):
        msg = f'parsing "{value}": invalid syntax'
        raise ValueError(msg)
    n = int(value)
    if not _INT_MIN <= n <= _INT_MAX:
        msg = f'parsing "{value}": value out of range'
        raise ValueError(msg)
    return n


def parse_bool(value: str) -> bool:
    """Parse ``1/t/T/TRUE/true/True`` or ``0/f/F/FALSE/false/False``.

    Raises:
        ValueError: For any other literal.
    """
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    msg = f'invalid syntax "{value}"'
    raise ValueError(msg)


def coerce(descriptor: FieldDescriptor, env_name: str, raw: str) -> Any:
    """Convert ``raw`` to the value to store for ``descriptor``.

    Raises:
        CoercionError: If ``raw`` does not parse or the field type is unsupported.
    """
    if descriptor.kind is FieldKind.TEXT:
        return raw.strip()

    if descriptor.kind is FieldKind.INTEGER:
        try:
            return parse_int(raw)
        except ValueError as exc:
            msg = f"error parsing int for {env_name}: {exc}"
            raise CoercionError(ErrorKind.COERCION_FAILURE, msg) from exc

    if descriptor.kind is FieldKind.BOOLEAN:
        try:
            return parse_bool(raw)
        except ValueError as exc:
            msg = f"error parsing bool for {env_name}: {exc}"
            raise CoercionError(ErrorKind.COERCION_FAILURE, msg) from exc

    msg = f"unsupported type {descriptor.type_name} for {env_name}"
    raise CoercionError(ErrorKind.UNSUPPORTED_TYPE, msg)


def bind(target: object, descriptor: FieldDescriptor, env_name: str, raw: str) -> None:
    """Store the coerced ``raw`` value on ``target``.

    An empty ``raw`` leaves the field untouched; flagging missing values is left to
    validators.

    Raises:
        CoercionError: See :func:`coerce`.
    """
    if raw == "":
        return
    setattr(target, descriptor.name, coerce(descriptor, env_name, raw))
