from __future__ import annotations

from collections.abc import Sequence


class WireboxError(Exception):
    """Represent a base class for all wirebox-specific failures.

    Catch this type when you want to handle any wirebox error path without
    matching each concrete exception class individually.
    """


class ResolutionError(WireboxError):
    """Signal that an identifier could not be turned into an instance.

    Raised by ``Container.get`` and ``Container.resolve``. The failing
    identifier is available as ``identifier``.
    """

    def __init__(self, identifier: str, msg: str) -> None:
        super().__init__(msg)
        self.identifier = identifier


class NotInstantiableError(ResolutionError):
    """Signal that a binding target is not a concrete constructible class.

    Common triggers are abstract classes, ``typing.Protocol`` classes, dotted
    paths that cannot be imported, and builtins whose constructor signature
    cannot be inspected.

    Typical fixes include binding the identifier to a concrete subclass with
    ``Container.set`` or registering a factory callable instead.
    """


class UnresolvableParameterError(ResolutionError):
    """Signal that a constructor parameter has no value to pass.

    The parameter had no override, no default value, and (for class-typed
    parameters) no constructible binding.

    Typical fixes include supplying the value through the overrides list at
    the parameter's position or declaring a default in the constructor.
    """

    def __init__(self, identifier: str, parameter: str, reason: str | None = None) -> None:
        msg = f"Can't resolve parameter '{parameter}' of '{identifier}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(identifier, msg)
        self.parameter = parameter


class CircularDependencyError(ResolutionError):
    """Signal that an identifier depends on itself through its constructor chain.

    ``stack`` holds the identifiers being resolved when the cycle was found,
    outermost first.
    """

    def __init__(self, identifier: str, stack: Sequence[str]) -> None:
        self.stack = list(stack)
        chain = " -> ".join([*self.stack, identifier])
        super().__init__(identifier, f"Circular dependency detected: {chain}")


class DependencyNotRegisteredError(ResolutionError):
    """Signal that an identifier has no binding while autoregistration is off.

    Raised by ``Container.get`` on containers built with
    ``autoregister=False``.

    Typical fix is registering the identifier with ``Container.set`` or
    loading it from a configuration document with ``Container.initialize``.
    """

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, f"Identifier '{identifier}' is not registered")


class ConfigurationError(WireboxError):
    """Signal that a bindings document could not be parsed.

    Raised by ``Container.initialize`` when the document is not valid YAML or
    when its top level is not a mapping of identifier to binding target.
    Errors reading the file itself propagate as ``OSError``.
    """
