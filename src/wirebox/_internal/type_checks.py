from __future__ import annotations

import datetime
import decimal
import enum
import inspect
import pathlib
import types
import uuid
from dataclasses import dataclass
from typing import Annotated, Any, TypeGuard, Union, get_args, get_origin


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def identifier_of(key: object) -> str:
    """Return the string identifier for an identifier or a class used as one."""
    if isinstance(key, str):
        return key
    if is_runtime_class(key):
        return f"{key.__module__}.{key.__qualname__}"
    msg = f"Identifier must be a string or a class, got {key!r}."
    raise TypeError(msg)


def strip_annotation(annotation: Any) -> Any:
    """Unwrap ``Annotated[X, ...]`` and ``X | None`` down to ``X``.

    Unions of more than one non-None member are returned unchanged.
    """
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return strip_annotation(members[0])
    return annotation


def is_optional_annotation(annotation: Any) -> bool:
    """Return true for ``X | None`` and ``Optional[X]``, also inside ``Annotated``."""
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if get_origin(annotation) not in (Union, types.UnionType):
        return False
    return type(None) in get_args(annotation)


@dataclass(frozen=True, slots=True)
class DependencyTypePolicy:
    """Decide whether a parameter annotation names a class-typed dependency."""

    builtin_like_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
        enum.Enum,
    )

    def is_dependency(self, annotation: object) -> TypeGuard[type[Any]]:
        """Return true when the annotation should be resolved through the container.

        Args:
            annotation: Stripped parameter annotation, or ``None`` when untyped.

        """
        if not is_runtime_class(annotation):
            return False
        if annotation.__module__ == "builtins":
            return False
        if issubclass(annotation, type):
            return False
        return not issubclass(annotation, self.builtin_like_types)


def is_protocol_class(candidate: type[Any]) -> bool:
    return bool(getattr(candidate, "_is_protocol", False))


def is_instantiable_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true for concrete classes that are not protocols or metaclasses."""
    if not inspect.isclass(candidate):
        return False
    if inspect.isabstract(candidate) or is_protocol_class(candidate):
        return False
    return not issubclass(candidate, type)


__all__ = [
    "DependencyTypePolicy",
    "identifier_of",
    "is_instantiable_class",
    "is_optional_annotation",
    "is_protocol_class",
    "is_runtime_class",
    "strip_annotation",
]
