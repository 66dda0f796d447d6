"""Capabilities the server announces in its initialize result."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import IntEnum
from functools import partial
from typing import Any, Callable, Optional, Union

from slangd.capability_options import (
    CallHierarchyOptions,
    CallHierarchyRegistrationOptions,
    CodeActionOptions,
    CodeLensOptions,
    CompletionOptions,
    DeclarationOptions,
    DeclarationRegistrationOptions,
    DefinitionOptions,
    DiagnosticOptions,
    DiagnosticRegistrationOptions,
    DocumentColorOptions,
    DocumentColorRegistrationOptions,
    DocumentFormattingOptions,
    DocumentHighlightOptions,
    DocumentLinkOptions,
    DocumentOnTypeFormattingOptions,
    DocumentRangeFormattingOptions,
    DocumentSymbolOptions,
    ExecuteCommandOptions,
    FileOperationRegistrationOptions,
    FoldingRangeOptions,
    FoldingRangeRegistrationOptions,
    HoverOptions,
    ImplementationOptions,
    ImplementationRegistrationOptions,
    InlayHintOptions,
    InlayHintRegistrationOptions,
    InlineValueOptions,
    InlineValueRegistrationOptions,
    LinkedEditingRangeOptions,
    LinkedEditingRangeRegistrationOptions,
    MonikerOptions,
    MonikerRegistrationOptions,
    NotebookDocumentSyncOptions,
    NotebookDocumentSyncRegistrationOptions,
    ReferenceOptions,
    RenameOptions,
    SelectionRangeOptions,
    SelectionRangeRegistrationOptions,
    SemanticTokensOptions,
    SemanticTokensRegistrationOptions,
    SignatureHelpOptions,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
    TypeDefinitionOptions,
    TypeDefinitionRegistrationOptions,
    TypeHierarchyOptions,
    TypeHierarchyRegistrationOptions,
    WorkspaceFoldersServerCapabilities,
    WorkspaceSymbolOptions,
)
from slangd.jsonutil import read_optional, write_optional

POSITION_ENCODING_UTF16 = "utf-16"


def provider_to_json(value: Any) -> Any:
    """Return the JSON form of a provider: a boolean, an enum or an options object."""
    if isinstance(value, bool):
        return value
    if isinstance(value, IntEnum):
        return int(value)
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    raise TypeError(f"not a provider value: {type(value).__name__}")


def provider_from_json(
    data: Any, options_type: type, registration_type: Optional[type] = None
) -> Any:
    """Read a provider: a boolean, registration options or plain options.

    Registration options are chosen when the object has a documentSelector
    and a registration type is given.
    """
    if isinstance(data, bool):
        return data
    if (
        registration_type is not None
        and isinstance(data, Mapping)
        and "documentSelector" in data
    ):
        return registration_type.from_json(data)
    return options_type.from_json(data)


TextDocumentSync = Union[TextDocumentSyncOptions, TextDocumentSyncKind]


def text_document_sync_from_json(data: Any) -> TextDocumentSync:
    """Read text document sync: options when openClose is present, else a kind."""
    if isinstance(data, Mapping) and "openClose" in data:
        return TextDocumentSyncOptions.from_json(data)
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"expected a sync kind, got {type(data).__name__}")
    return TextDocumentSyncKind(data)


NotebookDocumentSync = Union[
    NotebookDocumentSyncOptions, NotebookDocumentSyncRegistrationOptions
]


def notebook_document_sync_from_json(data: Any) -> NotebookDocumentSync:
    """Read notebook sync: registration options when an id is present."""
    if isinstance(data, Mapping) and "id" in data:
        return NotebookDocumentSyncRegistrationOptions.from_json(data)
    return NotebookDocumentSyncOptions.from_json(data)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _identity(value: Any) -> Any:
    return value


def _json_field(
    key: str,
    decode: Callable[[Any], Any],
    encode: Callable[[Any], Any] = provider_to_json,
    default: Any = None,
) -> Any:
    return field(
        default=default, metadata={"key": key, "decode": decode, "encode": encode}
    )


def _fields_to_json(obj: Any) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for f in fields(obj):
        write_optional(data, f.metadata["key"], getattr(obj, f.name), f.metadata["encode"])
    return data


def _fields_from_json(cls: type, data: Any) -> dict[str, Any]:
    return {
        f.name: read_optional(data, f.metadata["key"], f.metadata["decode"])
        for f in fields(cls)
    }


_file_op = FileOperationRegistrationOptions.from_json


@dataclass
class FileOperations:
    """File operation notifications and requests the server is interested in."""

    did_create: Optional[FileOperationRegistrationOptions] = _json_field("didCreate", _file_op)
    will_create: Optional[FileOperationRegistrationOptions] = _json_field("willCreate", _file_op)
    did_rename: Optional[FileOperationRegistrationOptions] = _json_field("didRename", _file_op)
    will_rename: Optional[FileOperationRegistrationOptions] = _json_field("willRename", _file_op)
    did_delete: Optional[FileOperationRegistrationOptions] = _json_field("didDelete", _file_op)
    will_delete: Optional[FileOperationRegistrationOptions] = _json_field("willDelete", _file_op)

    def to_json(self) -> dict[str, Any]:
        return _fields_to_json(self)

    @classmethod
    def from_json(cls, data: Any) -> FileOperations:
        return cls(**_fields_from_json(cls, data))


@dataclass
class WorkspaceCapabilities:
    """Workspace-specific server capabilities."""

    workspace_folders: Optional[WorkspaceFoldersServerCapabilities] = _json_field(
        "workspaceFolders", WorkspaceFoldersServerCapabilities.from_json
    )
    file_operations: Optional[FileOperations] = _json_field(
        "fileOperations", FileOperations.from_json
    )

    def to_json(self) -> dict[str, Any]:
        return _fields_to_json(self)

    @classmethod
    def from_json(cls, data: Any) -> WorkspaceCapabilities:
        return cls(**_fields_from_json(cls, data))


def _provider(options_type: type, registration_type: Optional[type] = None):
    return partial(
        provider_from_json,
        options_type=options_type,
        registration_type=registration_type,
    )


@dataclass
class ServerCapabilities:
    """The full set of capabilities a server announces."""

    position_encoding: Optional[str] = _json_field(
        "positionEncoding", _string, _identity, POSITION_ENCODING_UTF16
    )
    text_document_sync: Optional[TextDocumentSync] = _json_field(
        "textDocumentSync", text_document_sync_from_json
    )
    notebook_document_sync: Optional[NotebookDocumentSync] = _json_field(
        "notebookDocumentSync", notebook_document_sync_from_json
    )
    completion_provider: Optional[CompletionOptions] = _json_field(
        "completionProvider", CompletionOptions.from_json
    )
    hover_provider: Any = _json_field("hoverProvider", _provider(HoverOptions))
    signature_help_provider: Optional[SignatureHelpOptions] = _json_field(
        "signatureHelpProvider", SignatureHelpOptions.from_json
    )
    declaration_provider: Any = _json_field(
        "declarationProvider",
        _provider(DeclarationOptions, DeclarationRegistrationOptions),
    )
    definition_provider: Any = _json_field(
        "definitionProvider", _provider(DefinitionOptions)
    )
    type_definition_provider: Any = _json_field(
        "typeDefinitionProvider",
        _provider(TypeDefinitionOptions, TypeDefinitionRegistrationOptions),
    )
    implementation_provider: Any = _json_field(
        "implementationProvider",
        _provider(ImplementationOptions, ImplementationRegistrationOptions),
    )
    references_provider: Any = _json_field(
        "referencesProvider", _provider(ReferenceOptions)
    )
    document_highlight_provider: Any = _json_field(
        "documentHighlightProvider", _provider(DocumentHighlightOptions)
    )
    document_symbol_provider: Any = _json_field(
        "documentSymbolProvider", _provider(DocumentSymbolOptions)
    )
    code_action_provider: Any = _json_field(
        "codeActionProvider", _provider(CodeActionOptions)
    )
    code_lens_provider: Optional[CodeLensOptions] = _json_field(
        "codeLensProvider", CodeLensOptions.from_json
    )
    document_link_provider: Optional[DocumentLinkOptions] = _json_field(
        "documentLinkProvider", DocumentLinkOptions.from_json
    )
    color_provider: Any = _json_field(
        "colorProvider",
        _provider(DocumentColorOptions, DocumentColorRegistrationOptions),
    )
    document_formatting_provider: Any = _json_field(
        "documentFormattingProvider", _provider(DocumentFormattingOptions)
    )
    document_range_formatting_provider: Any = _json_field(
        "documentRangeFormattingProvider", _provider(DocumentRangeFormattingOptions)
    )
    document_on_type_formatting_provider: Optional[
        DocumentOnTypeFormattingOptions
    ] = _json_field(
        "documentOnTypeFormattingProvider", DocumentOnTypeFormattingOptions.from_json
    )
    rename_provider: Any = _json_field("renameProvider", _provider(RenameOptions))
    folding_range_provider: Any = _json_field(
        "foldingRangeProvider",
        _provider(FoldingRangeOptions, FoldingRangeRegistrationOptions),
    )
    execute_command_provider: Optional[ExecuteCommandOptions] = _json_field(
        "executeCommandProvider", ExecuteCommandOptions.from_json
    )
    selection_range_provider: Any = _json_field(
        "selectionRangeProvider",
        _provider(SelectionRangeOptions, SelectionRangeRegistrationOptions),
    )
    linked_editing_range_provider: Any = _json_field(
        "linkedEditingRangeProvider",
        _provider(LinkedEditingRangeOptions, LinkedEditingRangeRegistrationOptions),
    )
    call_hierarchy_provider: Any = _json_field(
        "callHierarchyProvider",
        _provider(CallHierarchyOptions, CallHierarchyRegistrationOptions),
    )
    semantic_tokens_provider: Any = _json_field(
        "semanticTokensProvider",
        _provider(SemanticTokensOptions, SemanticTokensRegistrationOptions),
    )
    moniker_provider: Any = _json_field(
        "monikerProvider", _provider(MonikerOptions, MonikerRegistrationOptions)
    )
    type_hierarchy_provider: Any = _json_field(
        "typeHierarchyProvider",
        _provider(TypeHierarchyOptions, TypeHierarchyRegistrationOptions),
    )
    inline_value_provider: Any = _json_field(
        "inlineValueProvider",
        _provider(InlineValueOptions, InlineValueRegistrationOptions),
    )
    inlay_hint_provider: Any = _json_field(
        "inlayHintProvider",
        _provider(InlayHintOptions, InlayHintRegistrationOptions),
    )
    diagnostic_provider: Any = _json_field(
        "diagnosticProvider",
        _provider(DiagnosticOptions, DiagnosticRegistrationOptions),
    )
    workspace_symbol_provider: Any = _json_field(
        "workspaceSymbolProvider", _provider(WorkspaceSymbolOptions)
    )
    workspace: Optional[WorkspaceCapabilities] = _json_field(
        "workspace", WorkspaceCapabilities.from_json
    )
    experimental: Any = _json_field("experimental", _identity, _identity)

    def to_json(self) -> dict[str, Any]:
        return _fields_to_json(self)

    @classmethod
    def from_json(cls, data: Any) -> ServerCapabilities:
        return cls(**_fields_from_json(cls, data))