from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from wirebox.exceptions import CircularDependencyError

# Identifiers currently being resolved in this thread or task, outermost first.
_resolution_stack: ContextVar[tuple[str, ...]] = ContextVar("resolution_stack", default=())


def current_resolution_stack() -> tuple[str, ...]:
    """Return the identifiers being resolved in the current execution context."""
    return _resolution_stack.get()


@contextmanager
def resolving(identifier: str) -> Iterator[None]:
    """Track ``identifier`` for the duration of its resolution.

    Raises:
        CircularDependencyError: ``identifier`` is already being resolved
            further up the same call chain.

    """
    stack = _resolution_stack.get()
    if identifier in stack:
        raise CircularDependencyError(identifier, stack)
    token = _resolution_stack.set((*stack, identifier))
    try:
        yield
    finally:
        _resolution_stack.reset(token)
