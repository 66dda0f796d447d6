"""Helpers for reading and writing fields of JSON objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Optional

Converter = Optional[Callable[[Any], Any]]


def _require_mapping(obj: Any) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise TypeError(f"expected a JSON object, got {type(obj).__name__}")
    return obj


def _apply(convert: Converter, value: Any) -> Any:
    return convert(value) if convert is not None else value


def read_optional(obj: Any, key: str, convert: Converter = None) -> Any:
    """Return the converted field, or None when it is absent or null."""
    value = _require_mapping(obj).get(key)
    if value is None:
        return None
    return _apply(convert, value)


def write_optional(
    obj: MutableMapping[str, Any], key: str, value: Any, convert: Converter = None
) -> None:
    """Store the converted value under key unless value is None."""
    if value is not None:
        obj[key] = _apply(convert, value)


def read_required(obj: Any, key: str, convert: Converter = None) -> Any:
    """Return the converted field; raise KeyError when it is missing."""
    mapping = _require_mapping(obj)
    try:
        value = mapping[key]
    except KeyError:
        raise KeyError(f"missing required field {key!r}") from None
    return _apply(convert, value)