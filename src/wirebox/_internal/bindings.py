from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from wirebox._internal.type_checks import identifier_of
from wirebox.exceptions import DependencyNotRegisteredError

logger = logging.getLogger(__name__)

Identifier: TypeAlias = str | type[Any]
"""A string key, or a class standing in for its dotted qualified name."""

BindingTarget: TypeAlias = Any
"""A class, a dotted import path, a factory callable, or a literal value."""


class BindingKind(Enum):
    """Defines how a binding produces its instance."""

    DIRECT = "direct"
    """The identifier itself names the class to construct."""

    TARGET = "target"
    """An explicit class or dotted import path is constructed instead of the identifier."""

    FACTORY = "factory"
    """A callable invoked with the container and the overrides list."""

    VALUE = "value"
    """A literal value returned as-is."""


@dataclass(frozen=True, slots=True)
class Binding:
    """A registered mapping from an identifier to what it resolves to."""

    identifier: str
    """The string key the binding is stored under."""
    target: BindingTarget
    """What gets constructed, called, or returned."""
    kind: BindingKind
    """How ``target`` is turned into an instance."""

    @classmethod
    def create(cls, identifier: str, concrete: BindingTarget = None) -> Binding:
        """Classify ``concrete`` and build a binding for ``identifier``."""
        if concrete is None:
            return cls(identifier, identifier, BindingKind.DIRECT)
        if isinstance(concrete, str) or inspect.isclass(concrete):
            kind = BindingKind.DIRECT if identifier_of(concrete) == identifier else BindingKind.TARGET
            return cls(identifier, concrete, kind)
        if callable(concrete):
            return cls(identifier, concrete, BindingKind.FACTORY)
        return cls(identifier, concrete, BindingKind.VALUE)


class BindingTable:
    """Holds every binding registered in a container, in registration order."""

    def __init__(self, *, autoregister: bool = True) -> None:
        self._bindings: dict[str, Binding] = {}
        self._autoregister = autoregister
        self._lock = threading.RLock()

    def set(self, identifier: Identifier, concrete: BindingTarget = None) -> Binding:
        """Register ``identifier``, replacing any earlier binding for it.

        When ``concrete`` is omitted, the identifier is bound to itself. A class
        passed as the identifier without a concrete is bound to that class.
        """
        key = identifier_of(identifier)
        if concrete is None and not isinstance(identifier, str):
            concrete = identifier
        binding = Binding.create(key, concrete)
        with self._lock:
            replaced = key in self._bindings
            self._bindings[key] = binding
        logger.debug(
            "Registered %r as %s binding (replaced=%s)",
            key,
            binding.kind.value,
            replaced,
        )
        return binding

    def lookup(self, identifier: Identifier) -> Binding:
        """Return the binding for ``identifier``, registering it as a self-binding if absent.

        A class looked up under a self-binding that holds another class object
        with the same dotted name (a local class, or a reloaded module)
        replaces that binding, so the class passed in is the one constructed.
        """
        key = identifier_of(identifier)
        with self._lock:
            binding = self._bindings.get(key)
            if binding is not None:
                if not _is_stale_self_binding(binding, identifier):
                    return binding
                binding = Binding(key, identifier, BindingKind.DIRECT)
                self._bindings[key] = binding
                logger.debug("Rebound %r to a new class object with the same name", key)
                return binding
            if not self._autoregister:
                raise DependencyNotRegisteredError(key)
            concrete = None if isinstance(identifier, str) else identifier
            binding = Binding.create(key, concrete)
            self._bindings[key] = binding
        logger.debug("Autoregistered %r on first lookup", key)
        return binding

    def get_binding(self, identifier: Identifier) -> Binding | None:
        """Return the binding for ``identifier`` without registering anything."""
        return self._bindings.get(identifier_of(identifier))

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str | type):
            return False
        return identifier_of(identifier) in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)


def _is_stale_self_binding(binding: Binding, identifier: Identifier) -> bool:
    return (
        binding.kind is BindingKind.DIRECT
        and not isinstance(identifier, str)
        and binding.target is not identifier
    )
