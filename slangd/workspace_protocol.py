"""Workspace messages of the language server protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from slangd.jsonutil import read_optional, read_required, write_optional


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected an array, got {type(value).__name__}")
    return value


def _items_of(item_type: Any):
    return lambda value: [item_type.from_json(item) for item in _list(value)]


@dataclass
class WorkspaceSymbolParams:
    """Parameters of a workspace symbol query."""

    query: str

    def to_json(self) -> dict[str, Any]:
        return {"query": self.query}

    @classmethod
    def from_json(cls, data: Any) -> WorkspaceSymbolParams:
        return cls(query=read_required(data, "query", _string))


@dataclass
class ConfigurationItem:
    """One configuration section requested from the client."""

    scope_uri: str | None = None
    section: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        write_optional(data, "scopeUri", self.scope_uri)
        write_optional(data, "section", self.section)
        return data

    @classmethod
    def from_json(cls, data: Any) -> ConfigurationItem:
        return cls(
            scope_uri=read_optional(data, "scopeUri", _string),
            section=read_optional(data, "section", _string),
        )


@dataclass
class ConfigurationParams:
    """Parameters of a configuration request."""

    items: list[ConfigurationItem] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"items": [item.to_json() for item in self.items]}

    @classmethod
    def from_json(cls, data: Any) -> ConfigurationParams:
        return cls(items=read_required(data, "items", _items_of(ConfigurationItem)))


@dataclass
class DidChangeConfigurationParams:
    """Parameters of a configuration change notification."""

    settings: Any

    def to_json(self) -> dict[str, Any]:
        return {"settings": self.settings}

    @classmethod
    def from_json(cls, data: Any) -> DidChangeConfigurationParams:
        return cls(settings=read_required(data, "settings"))


@dataclass
class FileCreate:
    """A file that is created."""

    uri: str

    def to_json(self) -> dict[str, Any]:
        return {"uri": self.uri}

    @classmethod
    def from_json(cls, data: Any) -> FileCreate:
        return cls(uri=read_required(data, "uri", _string))


@dataclass
class CreateFilesParams:
    """Parameters of file creation notifications and requests."""

    files: list[FileCreate] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"files": [f.to_json() for f in self.files]}

    @classmethod
    def from_json(cls, data: Any) -> CreateFilesParams:
        return cls(files=read_required(data, "files", _items_of(FileCreate)))


@dataclass
class FileRename:
    """A file that is renamed."""

    old_uri: str
    new_uri: str

    def to_json(self) -> dict[str, Any]:
        return {"oldUri": self.old_uri, "newUri": self.new_uri}

    @classmethod
    def from_json(cls, data: Any) -> FileRename:
        return cls(
            old_uri=read_required(data, "oldUri", _string),
            new_uri=read_required(data, "newUri", _string),
        )


@dataclass
class RenameFilesParams:
    """Parameters of file rename notifications and requests."""

    files: list[FileRename] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"files": [f.to_json() for f in self.files]}

    @classmethod
    def from_json(cls, data: Any) -> RenameFilesParams:
        return cls(files=read_required(data, "files", _items_of(FileRename)))


@dataclass
class FileDelete:
    """A file that is deleted."""

    uri: str

    def to_json(self) -> dict[str, Any]:
        return {"uri": self.uri}

    @classmethod
    def from_json(cls, data: Any) -> FileDelete:
        return cls(uri=read_required(data, "uri", _string))


@dataclass
class DeleteFilesParams:
    """Parameters of file deletion notifications and requests."""

    files: list[FileDelete] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"files": [f.to_json() for f in self.files]}

    @classmethod
    def from_json(cls, data: Any) -> DeleteFilesParams:
        return cls(files=read_required(data, "files", _items_of(FileDelete)))


class FileChangeType(IntEnum):
    """Kind of change reported for a watched file."""

    CREATED = 1
    CHANGED = 2
    DELETED = 3


def _change_type(value: Any) -> FileChangeType:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return FileChangeType(value)


@dataclass
class FileEvent:
    """A change to one watched file."""

    uri: str
    type: FileChangeType

    def to_json(self) -> dict[str, Any]:
        return {"uri": self.uri, "type": int(self.type)}

    @classmethod
    def from_json(cls, data: Any) -> FileEvent:
        return cls(
            uri=read_required(data, "uri", _string),
            type=read_required(data, "type", _change_type),
        )


@dataclass
class DidChangeWatchedFilesParams:
    """Parameters of the watched-files change notification."""

    changes: list[FileEvent] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"changes": [change.to_json() for change in self.changes]}

    @classmethod
    def from_json(cls, data: Any) -> DidChangeWatchedFilesParams:
        return cls(changes=read_required(data, "changes", _items_of(FileEvent)))


@dataclass
class ExecuteCommandParams:
    """Parameters of a command execution request."""

    command: str
    arguments: list[Any] | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"command": self.command}
        write_optional(data, "arguments", self.arguments, list)
        return data

    @classmethod
    def from_json(cls, data: Any) -> ExecuteCommandParams:
        return cls(
            command=read_required(data, "command", _string),
            arguments=read_optional(data, "arguments", lambda v: list(_list(v))),
        )