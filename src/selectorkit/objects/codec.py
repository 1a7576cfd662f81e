"""JSON encoding of plain values and reconstruction into typed objects."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import DecodeError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger("selectorkit.objects")

T = TypeVar("T")


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Encode *value* as compact JSON text.

    Dataclass instances are written as an object of their fields.  Key order
    follows field / insertion order.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Decode *text* and build a *cls* instance from the resulting object.

    The JSON object's keys must match the constructor's parameters; values
    are passed through unconverted.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("invalid JSON for %s: %s", cls.__name__, exc)
        raise DecodeError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    try:
        return cls(**data)
    except TypeError as exc:
        logger.debug("field mismatch for %s: %s", cls.__name__, exc)
        raise DecodeError(f"Cannot build {cls.__name__}: {exc}", cause=exc) from exc
