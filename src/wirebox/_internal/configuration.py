from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from wirebox.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_BINDINGS_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def load_bindings(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read a YAML bindings document into an identifier-to-target mapping.

    Args:
        path: Location of the document.

    Returns:
        The top-level mapping, in document order. An empty document yields ``{}``.

    Raises:
        OSError: The file cannot be read.
        ConfigurationError: The document is not valid UTF-8 or YAML, or its
            top level is not a mapping with string keys.

    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        msg = f"Bindings document '{os.fspath(path)}' is not valid UTF-8: {exc}"
        raise ConfigurationError(msg) from exc

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        msg = f"Bindings document '{os.fspath(path)}' is not valid YAML: {exc}"
        raise ConfigurationError(msg) from exc

    if document is None:
        logger.warning("Bindings document %r is empty", os.fspath(path))
        return {}

    try:
        return _BINDINGS_ADAPTER.validate_python(document, strict=True)
    except ValidationError as exc:
        msg = (
            f"Bindings document '{os.fspath(path)}' must map identifiers to binding "
            f"targets at the top level: {exc}"
        )
        raise ConfigurationError(msg) from exc
