from wirebox._internal.integrations.pytest_plugin import wirebox_container

__all__ = ["wirebox_container"]
