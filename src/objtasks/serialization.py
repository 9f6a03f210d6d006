"""JSON helpers that round-trip plain data objects through their constructors."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, TypeVar

from objtasks.errors import SerializationError

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    Dataclass instances serialise every field and other objects serialise
    every instance attribute, underscore-prefixed names included.
    Properties and class attributes are not serialised.
    """
    return json.dumps(value, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Rebuild an instance of *cls* from JSON *text*.

    Object values are passed to the constructor positionally, in the order
    their keys appear in *text*. Arrays are passed positionally as-is and
    any other value is passed as the single argument.

    Raises:
        SerializationError: *text* is not valid JSON, or its values do not
            fit the signature of *cls*.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON for {cls.__name__}: {exc}", cause=exc) from exc

    if isinstance(data, dict):
        args = list(data.values())
    elif isinstance(data, list):
        args = data
    else:
        args = [data]
    try:
        return cls(*args)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {cls.__name__} from {len(args)} value(s): {exc}", cause=exc
        ) from exc
