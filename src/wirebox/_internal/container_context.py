from __future__ import annotations

import logging
import threading

from wirebox._internal.container import Container

logger = logging.getLogger(__name__)


class ContainerContext:
    """Hold the one process-wide container.

    The shared container is created lazily on first access and reused until
    ``reset`` is called. It is process-global for this ``ContainerContext``
    instance, not task-local or thread-local.
    """

    def __init__(self) -> None:
        self._container: Container | None = None
        self._lock = threading.Lock()

    def get_instance(self) -> Container:
        """Return the shared container, creating an empty one on first call."""
        container = self._container
        if container is not None:
            return container
        with self._lock:
            if self._container is None:
                self._container = Container()
                logger.debug("Created process-wide container")
            return self._container

    def set_current(self, container: Container) -> None:
        """Install ``container`` as the shared instance.

        This method is expected to be called once during application startup,
        typically with ``Container.from_settings()``.
        """
        with self._lock:
            self._container = container

    def reset(self) -> None:
        """Drop the shared instance so the next access creates a fresh one."""
        with self._lock:
            self._container = None


container_context = ContainerContext()


def get_instance() -> Container:
    """Return the process-wide container from ``container_context``."""
    return container_context.get_instance()
