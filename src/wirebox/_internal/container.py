from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

from wirebox._internal.bindings import (
    Binding,
    BindingKind,
    BindingTable,
    BindingTarget,
    Identifier,
)
from wirebox._internal.configuration import load_bindings
from wirebox._internal.integrations.pydantic_settings import ContainerSettings
from wirebox._internal.resolution_stack import resolving
from wirebox._internal.signatures import ParameterDescriptor, SignatureInspector
from wirebox._internal.type_checks import identifier_of
from wirebox.exceptions import (
    DependencyNotRegisteredError,
    NotInstantiableError,
    UnresolvableParameterError,
)

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class Container:
    """Map identifiers to bindings and build instances for them on demand.

    Identifiers are strings, or classes standing in for their dotted qualified
    name. A binding is a class (or dotted import path) to construct, a factory
    callable, or a literal value.

    ``get`` constructs a fresh instance on every call. Constructor parameters
    are filled positionally from the caller's overrides first; class-typed
    parameters without an override are resolved recursively through the
    container; the remaining parameters fall back to their declared defaults.

    A class-typed parameter whose class cannot be built fails resolution,
    even when it declares a default. Only an optional annotation with a
    default (``repository: Repository | None = None``) takes the default
    instead.
    """

    def __init__(self, *, autoregister: bool = True) -> None:
        """Initialize an empty container.

        Args:
            autoregister: Bind unknown identifiers to themselves on first
                lookup. Disable for strict mode, where every identifier must be
                registered explicitly.

        """
        self._bindings = BindingTable(autoregister=autoregister)
        self._inspector = SignatureInspector()

    @classmethod
    def from_settings(cls, settings: ContainerSettings | None = None) -> Self:
        """Build a container from settings, loading its bindings document if configured.

        Args:
            settings: Settings to apply. Read from ``WIREBOX_*`` environment
                variables when omitted.

        """
        if settings is None:
            settings = ContainerSettings()
        container = cls(autoregister=settings.autoregister)
        if settings.config_path is not None:
            container.initialize(settings.config_path)
        return container

    def set(self, identifier: Identifier, concrete: BindingTarget = None) -> None:
        """Register ``identifier``, replacing any earlier binding.

        Nothing is validated here; a target that cannot be constructed fails
        when it is resolved.

        Args:
            identifier: String key, or a class used as its own key.
            concrete: Class or dotted import path to construct, factory
                callable, or literal value. Defaults to the identifier itself.

        """
        self._bindings.set(identifier, concrete)

    def initialize(self, path: str | os.PathLike[str]) -> None:
        """Register every entry of a YAML bindings document.

        Args:
            path: Document whose top level maps identifiers to binding targets.

        Raises:
            OSError: The file cannot be read.
            ConfigurationError: The document is not valid UTF-8 or YAML, or
                cannot be parsed as a mapping.

        """
        bindings = load_bindings(path)
        for identifier, concrete in bindings.items():
            self.set(identifier, concrete)
        logger.info("Loaded %d bindings from %s", len(bindings), os.fspath(path))

    def get(self, identifier: Identifier, overrides: Sequence[Any] = ()) -> Any:
        """Resolve and return a new instance for ``identifier``.

        Args:
            identifier: String key, or a class used as its own key.
            overrides: Positional constructor values taking precedence over
                reflected dependencies and defaults. ``None`` entries leave
                their position to the normal resolution rules.

        Raises:
            NotInstantiableError: The bound target is not a concrete class.
            UnresolvableParameterError: A constructor parameter has no value.
            CircularDependencyError: The identifier depends on itself.
            DependencyNotRegisteredError: Strict mode and no binding exists.

        """
        binding = self._bindings.lookup(identifier)
        with resolving(binding.identifier):
            return self.resolve(binding, overrides)

    def resolve(self, binding: Binding, overrides: Sequence[Any] = ()) -> Any:
        """Produce an instance from ``binding``."""
        logger.debug("Resolving %r via %s binding", binding.identifier, binding.kind.value)
        if binding.kind is BindingKind.FACTORY:
            return binding.target(self, overrides)
        if binding.kind is BindingKind.VALUE:
            return binding.target

        cls = self._inspector.load_target(binding.target)
        descriptors = self._inspector.describe(cls)
        if not descriptors:
            return cls()

        args, kwargs = self.build_arguments(descriptors, overrides, owner=identifier_of(cls))
        return cls(*args, **kwargs)

    def build_arguments(
        self,
        descriptors: Sequence[ParameterDescriptor],
        overrides: Sequence[Any] = (),
        *,
        owner: str = "<unknown>",
    ) -> tuple[list[Any], dict[str, Any]]:
        """Build constructor arguments for ``descriptors`` in declaration order.

        Returns:
            Positional arguments, and keyword arguments for keyword-only parameters.

        Raises:
            UnresolvableParameterError: A parameter has no override, no
                resolvable binding and no default.

        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for descriptor in descriptors:
            value = self._argument_for(descriptor, overrides, owner)
            if descriptor.is_keyword_only:
                kwargs[descriptor.name] = value
            else:
                args.append(value)
        return args, kwargs

    def _argument_for(
        self,
        descriptor: ParameterDescriptor,
        overrides: Sequence[Any],
        owner: str,
    ) -> Any:
        override = _override_at(overrides, descriptor.index)
        if override is not None:
            return override

        if descriptor.is_dependency:
            try:
                return self.get(descriptor.annotation)
            except (NotInstantiableError, DependencyNotRegisteredError) as exc:
                if descriptor.is_optional and descriptor.has_default:
                    logger.debug(
                        "Falling back to default for %r of %r: %s",
                        descriptor.name,
                        owner,
                        exc,
                    )
                    return descriptor.default
                raise UnresolvableParameterError(owner, descriptor.name, str(exc)) from exc

        if descriptor.has_default:
            return descriptor.default
        raise UnresolvableParameterError(owner, descriptor.name)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)


def _override_at(overrides: Sequence[Any], index: int) -> Any:
    if index < len(overrides):
        return overrides[index]
    return None
