from wirebox._internal.integrations.pydantic_settings import (
    ContainerSettings,
    is_pydantic_settings_subclass,
)

__all__ = ["ContainerSettings", "is_pydantic_settings_subclass"]
