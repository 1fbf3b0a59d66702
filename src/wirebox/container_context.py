from wirebox._internal.container_context import ContainerContext, container_context, get_instance

__all__ = ["ContainerContext", "container_context", "get_instance"]
