"""Binding schema derived from dataclass declarations."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

from envlookup.config import ENV_TAG


class FieldKind(str, Enum):
    TEXT = "string"
    INTEGER = "int"
    BOOLEAN = "bool"
    COMPOSITE = "struct"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """How one dataclass field takes part in binding.

    Attributes:
        name: Attribute name on the target.
        kind: Coercion kind resolved from the declared type.
        type: The declared (resolved) type.
        tag: Raw annotation text, empty when the field has none.
        settable: Whether lookup may assign the attribute.
    """

    name: str
    kind: FieldKind
    type: Any
    tag: str
    settable: bool

    @property
    def type_name(self) -> str:
        return getattr(self.type, "__name__", None) or str(self.type)


def env_field(tag: str, **kwargs: Any) -> Any:
    """Declare a dataclass field bound to an environment variable.

    Args:
        tag: Annotation, e.g. ``"PORT,required"``.
        **kwargs: Forwarded to :func:`dataclasses.field` (``default``,
            ``default_factory``, ``repr`` ...).

    Returns:
        A dataclass field carrying ``tag`` in its metadata.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ENV_TAG] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def kind_of(tp: Any) -> FieldKind:
    # bool is a subclass of int, so it has to be checked first.
    if tp is bool:
        return FieldKind.BOOLEAN
    if tp is int:
        return FieldKind.INTEGER
    if tp is str:
        return FieldKind.TEXT
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return FieldKind.COMPOSITE
    return FieldKind.UNSUPPORTED


def resolve_type(cls: type, f: dataclasses.Field, instance: object | None = None) -> Any:
    """Resolve one field's declared type.

    String annotations are evaluated in the namespace of the module that declared
    ``cls``. When that fails, as for a dataclass declared inside a function, the type of
    the field's current value is used if it is a dataclass instance. Otherwise the raw
    annotation string is returned and the field ends up unsupported.
    """
    if not isinstance(f.type, str):
        return f.type

    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {cls.__name__: cls}
    try:
        return eval(f.type, globalns, localns)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError):
        value = getattr(instance, f.name, None)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return type(value)
        return f.type


def describe(cls: type, instance: object | None = None) -> list[FieldDescriptor]:
    """Build the binding schema of a dataclass, in declaration order.

    Args:
        cls: The dataclass to describe.
        instance: Optional instance of ``cls`` whose values help resolve annotations
            that cannot be evaluated from the declaring module.

    Raises:
        TypeError: If ``cls`` is not a dataclass.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        msg = f"{cls!r} is not a dataclass"
        raise TypeError(msg)

    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]

    descriptors: list[FieldDescriptor] = []
    for f in dataclasses.fields(cls):
        tp = resolve_type(cls, f, instance)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                kind=kind_of(tp),
                type=tp,
                tag=f.metadata.get(ENV_TAG, ""),
                settable=f.init and not frozen and not f.name.startswith("_"),
            )
        )
    return descriptors
