"""Option objects that make up the server capabilities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union

from slangd.jsonutil import read_optional, write_optional


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


class TextDocumentSyncKind(IntEnum):
    """How the client sends document changes to the server."""

    NONE = 0
    FULL = 1
    INCREMENTAL = 2


def _sync_kind(value: Any) -> TextDocumentSyncKind:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return TextDocumentSyncKind(value)


@dataclass
class SaveOptions:
    """Options for the save notification."""

    include_text: bool | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        write_optional(data, "includeText", self.include_text)
        return data

    @classmethod
    def from_json(cls, data: Any) -> SaveOptions:
        return cls(include_text=read_optional(data, "includeText", _bool))


Save = Union[bool, SaveOptions]


def save_to_json(value: Save) -> Any:
    """Return the JSON form of a save setting: a boolean or an options object."""
    if isinstance(value, bool):
        return value
    if isinstance(value, SaveOptions):
        return value.to_json()
    raise TypeError(f"not a save setting: {type(value).__name__}")


def save_from_json(data: Any) -> Save:
    """Read a save setting: a boolean, or otherwise save options."""
    if isinstance(data, bool):
        return data
    return SaveOptions.from_json(data)


@dataclass
class TextDocumentSyncOptions:
    """How text documents are synchronised between client and server."""

    open_close: bool | None = True
    change: TextDocumentSyncKind | None = TextDocumentSyncKind.FULL
    will_save: bool | None = False
    will_save_wait_until: bool | None = False
    save: Save | None = True

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        write_optional(data, "openClose", self.open_close)
        write_optional(data, "change", self.change, int)
        write_optional(data, "willSave", self.will_save)
        write_optional(data, "willSaveWaitUntil", self.will_save_wait_until)
        write_optional(data, "save", self.save, save_to_json)
        return data

    @classmethod
    def from_json(cls, data: Any) -> TextDocumentSyncOptions:
        return cls(
            open_close=read_optional(data, "openClose", _bool),
            change=read_optional(data, "change", _sync_kind),
            will_save=read_optional(data, "willSave", _bool),
            will_save_wait_until=read_optional(data, "willSaveWaitUntil", _bool),
            save=read_optional(data, "save", save_from_json),
        )


ChangeNotifications = Union[str, bool]


def _change_notifications(value: Any) -> ChangeNotifications:
    if isinstance(value, (str, bool)):
        return value
    # Any other value leaves the default: an empty registration id.
    return ""


@dataclass
class WorkspaceFoldersServerCapabilities:
    """Server support for workspace folders."""

    supported: bool | None = None
    change_notifications: ChangeNotifications | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        write_optional(data, "supported", self.supported)
        write_optional(data, "changeNotifications", self.change_notifications)
        return data

    @classmethod
    def from_json(cls, data: Any) -> WorkspaceFoldersServerCapabilities:
        return cls(
            supported=read_optional(data, "supported", _bool),
            change_notifications=read_optional(
                data, "changeNotifications", _change_notifications
            ),
        )


@dataclass
class EmptyOptions:
    """Options object that carries no fields of its own."""

    def to_json(self) -> dict[str, Any]:
        return {}

    @classmethod
    def from_json(cls, data: Any) -> EmptyOptions:
        if data is not None and not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return cls()


@dataclass
class NotebookDocumentSyncOptions(EmptyOptions):
    """Notebook document synchronisation options."""


@dataclass
class NotebookDocumentSyncRegistrationOptions(EmptyOptions):
    """Notebook document synchronisation registration options."""


@dataclass
class CompletionOptions(EmptyOptions):
    """Completion options."""


@dataclass
class HoverOptions(EmptyOptions):
    """Hover options."""


@dataclass
class SignatureHelpOptions(EmptyOptions):
    """Signature help options."""


@dataclass
class DeclarationOptions(EmptyOptions):
    """Go-to-declaration options."""


@dataclass
class DeclarationRegistrationOptions(EmptyOptions):
    """Go-to-declaration registration options."""


@dataclass
class DefinitionOptions(EmptyOptions):
    """Go-to-definition options."""


@dataclass
class TypeDefinitionOptions(EmptyOptions):
    """Go-to-type-definition options."""


@dataclass
class TypeDefinitionRegistrationOptions(EmptyOptions):
    """Go-to-type-definition registration options."""


@dataclass
class ImplementationOptions(EmptyOptions):
    """Go-to-implementation options."""


@dataclass
class ImplementationRegistrationOptions(EmptyOptions):
    """Go-to-implementation registration options."""


@dataclass
class ReferenceOptions(EmptyOptions):
    """Find-references options."""


@dataclass
class DocumentHighlightOptions(EmptyOptions):
    """Document highlight options."""


@dataclass
class DocumentSymbolOptions(EmptyOptions):
    """Document symbol options."""


@dataclass
class CodeActionOptions(EmptyOptions):
    """Code action options."""


@dataclass
class CodeLensOptions(EmptyOptions):
    """Code lens options."""


@dataclass
class DocumentLinkOptions(EmptyOptions):
    """Document link options."""


@dataclass
class DocumentColorOptions(EmptyOptions):
    """Document color options."""


@dataclass
class DocumentColorRegistrationOptions(EmptyOptions):
    """Document color registration options."""


@dataclass
class DocumentFormattingOptions(EmptyOptions):
    """Document formatting options."""


@dataclass
class DocumentRangeFormattingOptions(EmptyOptions):
    """Document range formatting options."""


@dataclass
class DocumentOnTypeFormattingOptions(EmptyOptions):
    """On-type formatting options."""


@dataclass
class RenameOptions(EmptyOptions):
    """Rename options."""


@dataclass
class FoldingRangeOptions(EmptyOptions):
    """Folding range options."""


@dataclass
class FoldingRangeRegistrationOptions(EmptyOptions):
    """Folding range registration options."""


@dataclass
class ExecuteCommandOptions(EmptyOptions):
    """Execute command options."""


@dataclass
class SelectionRangeOptions(EmptyOptions):
    """Selection range options."""


@dataclass
class SelectionRangeRegistrationOptions(EmptyOptions):
    """Selection range registration options."""


@dataclass
class LinkedEditingRangeOptions(EmptyOptions):
    """Linked editing range options."""


@dataclass
class LinkedEditingRangeRegistrationOptions(EmptyOptions):
    """Linked editing range registration options."""


@dataclass
class CallHierarchyOptions(EmptyOptions):
    """Call hierarchy options."""


@dataclass
class CallHierarchyRegistrationOptions(EmptyOptions):
    """Call hierarchy registration options."""


@dataclass
class SemanticTokensOptions(EmptyOptions):
    """Semantic tokens options."""


@dataclass
class SemanticTokensRegistrationOptions(EmptyOptions):
    """Semantic tokens registration options."""


@dataclass
class MonikerOptions(EmptyOptions):
    """Moniker options."""


@dataclass
class MonikerRegistrationOptions(EmptyOptions):
    """Moniker registration options."""


@dataclass
class TypeHierarchyOptions(EmptyOptions):
    """Type hierarchy options."""


@dataclass
class TypeHierarchyRegistrationOptions(EmptyOptions):
    """Type hierarchy registration options."""


@dataclass
class InlineValueOptions(EmptyOptions):
    """Inline value options."""


@dataclass
class InlineValueRegistrationOptions(EmptyOptions):
    """Inline value registration options."""


@dataclass
class InlayHintOptions(EmptyOptions):
    """Inlay hint options."""


@dataclass
class InlayHintRegistrationOptions(EmptyOptions):
    """Inlay hint registration options."""


@dataclass
class DiagnosticOptions(EmptyOptions):
    """Pull diagnostic options."""


@dataclass
class DiagnosticRegistrationOptions(EmptyOptions):
    """Pull diagnostic registration options."""


@dataclass
class WorkspaceSymbolOptions(EmptyOptions):
    """Workspace symbol options."""


@dataclass
class FileOperationRegistrationOptions(EmptyOptions):
    """File operation registration options."""