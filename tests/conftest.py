"""Shared pytest fixtures for wirebox tests."""

from collections.abc import Iterator

import pytest

from wirebox.container import Container, SignatureInspector
from wirebox.container_context import container_context


@pytest.fixture()
def container() -> Container:
    """Default container with autoregistration enabled."""
    return Container()


@pytest.fixture()
def strict_container() -> Container:
    """Container with autoregister=False."""
    return Container(autoregister=False)


@pytest.fixture()
def inspector() -> SignatureInspector:
    """SignatureInspector instance."""
    return SignatureInspector()


@pytest.fixture(autouse=True)
def _reset_container_context() -> Iterator[None]:
    container_context.reset()
    yield
    container_context.reset()
