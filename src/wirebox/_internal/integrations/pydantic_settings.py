from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from wirebox._internal.type_checks import is_runtime_class


class ContainerSettings(BaseSettings):
    """Environment-driven container configuration.

    Values are read from ``WIREBOX_*`` environment variables, for example
    ``WIREBOX_CONFIG_PATH=/etc/app/bindings.yaml``.
    """

    model_config = SettingsConfigDict(env_prefix="WIREBOX_")

    config_path: Path | None = None
    """YAML bindings document loaded when the container is built from settings."""

    autoregister: bool = True
    """Bind unknown identifiers to themselves on first lookup instead of failing."""


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a class is a pydantic-settings model.

    Settings subclasses read their values from the environment, so the
    container constructs them with no arguments instead of reflecting on
    their fields.

    Args:
        candidate: Object to test.

    Returns:
        ``True`` when ``candidate`` is a runtime class that subclasses
        ``pydantic_settings.BaseSettings``; otherwise ``False``.

    """
    if not is_runtime_class(candidate):
        return False
    try:
        return issubclass(candidate, BaseSettings)
    except TypeError:
        return False


__all__ = [
    "ContainerSettings",
    "is_pydantic_settings_subclass",
]
