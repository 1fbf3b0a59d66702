from wirebox._internal.bindings import Binding, BindingKind
from wirebox._internal.container import Container
from wirebox._internal.signatures import ParameterDescriptor, SignatureInspector

__all__ = [
    "Binding",
    "BindingKind",
    "Container",
    "ParameterDescriptor",
    "SignatureInspector",
]
