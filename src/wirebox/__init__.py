from wirebox.container import Binding, BindingKind, Container, ParameterDescriptor
from wirebox.container_context import ContainerContext, container_context, get_instance
from wirebox.exceptions import (
    CircularDependencyError,
    ConfigurationError,
    DependencyNotRegisteredError,
    NotInstantiableError,
    ResolutionError,
    UnresolvableParameterError,
    WireboxError,
)
from wirebox.integrations.pydantic_settings import ContainerSettings

__all__ = [
    "Binding",
    "BindingKind",
    "CircularDependencyError",
    "ConfigurationError",
    "Container",
    "ContainerContext",
    "ContainerSettings",
    "DependencyNotRegisteredError",
    "NotInstantiableError",
    "ParameterDescriptor",
    "ResolutionError",
    "UnresolvableParameterError",
    "WireboxError",
    "container_context",
    "get_instance",
]
