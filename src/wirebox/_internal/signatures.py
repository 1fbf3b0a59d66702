from __future__ import annotations

import inspect
import pkgutil
import weakref
from dataclasses import dataclass
from inspect import Parameter
from typing import Any

from wirebox._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from wirebox._internal.type_checks import (
    DependencyTypePolicy,
    identifier_of,
    is_instantiable_class,
    is_optional_annotation,
    strip_annotation,
)
from wirebox.exceptions import NotInstantiableError

_SKIPPED_PARAMETER_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describe one constructor parameter of a binding target."""

    index: int
    """Position in the constructor signature, and in the overrides list."""
    name: str
    """The parameter name."""
    kind: Any
    """The ``inspect.Parameter`` kind."""
    annotation: Any
    """Stripped annotation, or ``None`` when the parameter is untyped."""
    is_dependency: bool
    """True when the annotation names a class resolved through the container."""
    has_default: bool
    """True when the constructor declares a default value."""
    default: Any = None
    """The declared default value, if any."""
    is_optional: bool = False
    """True when the annotation admits ``None``, as in ``X | None``."""

    @property
    def is_keyword_only(self) -> bool:
        return self.kind is Parameter.KEYWORD_ONLY


class SignatureInspector:
    """Turn constructible targets into ordered parameter descriptors."""

    def __init__(self, policy: DependencyTypePolicy | None = None) -> None:
        self._policy = policy or DependencyTypePolicy()
        self._cache: weakref.WeakKeyDictionary[type[Any], list[ParameterDescriptor]] = (
            weakref.WeakKeyDictionary()
        )

    def load_target(self, target: Any) -> type[Any]:
        """Return the class named by ``target``, importing dotted paths.

        Raises:
            NotInstantiableError: The target cannot be imported or is not a concrete class.

        """
        name = target if isinstance(target, str) else _describe_target(target)
        if isinstance(target, str):
            try:
                target = pkgutil.resolve_name(target)
            except (ImportError, AttributeError, ValueError) as exc:
                msg = f"Class '{name}' is not instantiable: {exc}"
                raise NotInstantiableError(name, msg) from exc

        if not is_instantiable_class(target):
            msg = f"Class '{name}' is not instantiable"
            raise NotInstantiableError(name, msg)
        return target

    def describe(self, target: Any) -> list[ParameterDescriptor]:
        """Return the constructor parameter descriptors of ``target`` in declaration order.

        An empty list means the target is constructed with no arguments.

        Args:
            target: A class or a dotted import path naming one.

        Raises:
            NotInstantiableError: The target cannot be constructed at all.

        """
        cls = self.load_target(target)
        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        descriptors = self._extract(cls)
        self._cache[cls] = descriptors
        return descriptors

    def _extract(self, cls: type[Any]) -> list[ParameterDescriptor]:
        if not _declares_constructor(cls) or is_pydantic_settings_subclass(cls):
            return []

        name = identifier_of(cls)
        try:
            signature = inspect.signature(cls, eval_str=True)
        except (ValueError, TypeError) as exc:
            if _inherits_builtin_constructor(cls):
                return []
            msg = f"Class '{name}' is not instantiable: constructor signature is unavailable"
            raise NotInstantiableError(name, msg) from exc
        except NameError as exc:
            msg = f"Class '{name}' is not instantiable: {exc}"
            raise NotInstantiableError(name, msg) from exc

        descriptors: list[ParameterDescriptor] = []
        for parameter in signature.parameters.values():
            if parameter.kind in _SKIPPED_PARAMETER_KINDS:
                continue
            typed = parameter.annotation is not Parameter.empty
            annotation = strip_annotation(parameter.annotation) if typed else None
            has_default = parameter.default is not Parameter.empty
            descriptors.append(
                ParameterDescriptor(
                    index=len(descriptors),
                    name=parameter.name,
                    kind=parameter.kind,
                    annotation=annotation,
                    is_dependency=self._policy.is_dependency(annotation),
                    has_default=has_default,
                    default=parameter.default if has_default else None,
                    is_optional=typed and is_optional_annotation(parameter.annotation),
                ),
            )
        return descriptors


def _declares_constructor(cls: type[Any]) -> bool:
    return cls.__init__ is not object.__init__ or cls.__new__ is not object.__new__


def _inherits_builtin_constructor(cls: type[Any]) -> bool:
    """Return true when both ``__init__`` and ``__new__`` come from builtin classes.

    Such a class (``class Registry(dict): pass``) is constructed with no arguments.
    """
    if cls.__module__ == "builtins":
        return False
    return all(
        _defining_class(cls, attribute).__module__ == "builtins"
        for attribute in ("__init__", "__new__")
    )


def _defining_class(cls: type[Any], attribute: str) -> type[Any]:
    return next(klass for klass in cls.__mro__ if attribute in vars(klass))


def _describe_target(target: Any) -> str:
    try:
        return identifier_of(target)
    except TypeError:
        return repr(target)
