from __future__ import annotations

from collections.abc import Iterator

import pytest

from wirebox._internal.container import Container
from wirebox._internal.container_context import container_context


@pytest.fixture()
def wirebox_container() -> Iterator[Container]:
    """Provide a fresh container installed as the process-wide instance.

    Code under test that reaches the container through ``get_instance()``
    sees this container. The previous shared instance is dropped when the
    test finishes, so registrations do not leak between tests.

    Yields:
        A new ``Container`` instance.

    """
    container = Container()
    container_context.set_current(container)
    try:
        yield container
    finally:
        container_context.reset()


__all__ = ["wirebox_container"]
