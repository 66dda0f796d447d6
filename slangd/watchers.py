"""Registration options for watching files in the workspace."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Union

from slangd.jsonutil import read_optional, read_required, write_optional


class WatchKind(IntFlag):
    """File events a watcher is interested in."""

    CREATE = 1
    CHANGE = 2
    DELETE = 4


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _watch_kind(value: Any) -> WatchKind:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return WatchKind(value)


def _list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected an array, got {type(value).__name__}")
    return value


@dataclass
class RelativePattern:
    """A glob pattern relative to a base workspace folder or URI."""

    base_uri: Any
    pattern: str

    def to_json(self) -> dict[str, Any]:
        return {"baseUri": self.base_uri, "pattern": self.pattern}

    @classmethod
    def from_json(cls, data: Any) -> RelativePattern:
        return cls(
            base_uri=read_required(data, "baseUri"),
            pattern=read_required(data, "pattern", _string),
        )


GlobPattern = Union[str, RelativePattern]


def glob_pattern_to_json(pattern: GlobPattern) -> Any:
    """Return the JSON form of a plain or relative glob pattern."""
    if isinstance(pattern, str):
        return pattern
    if isinstance(pattern, RelativePattern):
        return pattern.to_json()
    raise TypeError(f"not a glob pattern: {type(pattern).__name__}")


def glob_pattern_from_json(data: Any) -> GlobPattern:
    """Read a glob pattern: a string, or an object for a relative pattern."""
    if isinstance(data, str):
        return data
    if isinstance(data, Mapping):
        return RelativePattern.from_json(data)
    raise TypeError(f"not a glob pattern: {type(data).__name__}")


@dataclass
class FileSystemWatcher:
    """One watched glob pattern and the kinds of events to report."""

    glob_pattern: GlobPattern
    kind: WatchKind | None = None

    def to_json(self) -> dict[str, Any]:
        data = {"globPattern": glob_pattern_to_json(self.glob_pattern)}
        write_optional(data, "kind", self.kind, int)
        return data

    @classmethod
    def from_json(cls, data: Any) -> FileSystemWatcher:
        return cls(
            glob_pattern=read_required(data, "globPattern", glob_pattern_from_json),
            kind=read_optional(data, "kind", _watch_kind),
        )


@dataclass
class DidChangeWatchedFilesRegistrationOptions:
    """Options sent when registering for watched-file notifications."""

    watchers: list[FileSystemWatcher] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"watchers": [watcher.to_json() for watcher in self.watchers]}

    @classmethod
    def from_json(cls, data: Any) -> DidChangeWatchedFilesRegistrationOptions:
        return cls(
            watchers=read_required(
                data,
                "watchers",
                lambda items: [FileSystemWatcher.from_json(i) for i in _list(items)],
            )
        )