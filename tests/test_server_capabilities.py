import pytest

from slangd.capability_options import (
    CompletionOptions,
    DeclarationOptions,
    DeclarationRegistrationOptions,
    DefinitionOptions,
    FileOperationRegistrationOptions,
    HoverOptions,
    NotebookDocumentSyncOptions,
    NotebookDocumentSyncRegistrationOptions,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
    WorkspaceFoldersServerCapabilities,
)
from slangd.server_capabilities import (
    FileOperations,
    ServerCapabilities,
    WorkspaceCapabilities,
    notebook_document_sync_from_json,
    provider_from_json,
    provider_to_json,
    text_document_sync_from_json,
)


def _slangd_capabilities():
    return ServerCapabilities(
        text_document_sync=TextDocumentSyncOptions(
            open_close=True, change=TextDocumentSyncKind.FULL
        ),
        definition_provider=True,
        document_symbol_provider=True,
        workspace=WorkspaceCapabilities(
            workspace_folders=WorkspaceFoldersServerCapabilities(supported=True)
        ),
    )


def test_default_capabilities_only_position_encoding():
    assert ServerCapabilities().to_json() == {"positionEncoding": "utf-16"}


def test_slangd_capabilities_json():
    assert _slangd_capabilities().to_json() == {
        "positionEncoding": "utf-16",
        "textDocumentSync": {
            "openClose": True,
            "change": 1,
            "willSave": False,
            "willSaveWaitUntil": False,
            "save": True,
        },
        "definitionProvider": True,
        "documentSymbolProvider": True,
        "workspace": {"workspaceFolders": {"supported": True}},
    }


def test_capabilities_round_trip():
    caps = _slangd_capabilities()
    assert ServerCapabilities.from_json(caps.to_json()) == caps


def test_round_trip_with_options_objects():
    caps = ServerCapabilities(
        completion_provider=CompletionOptions(),
        hover_provider=HoverOptions(),
        declaration_provider=DeclarationRegistrationOptions(),
        text_document_sync=TextDocumentSyncKind.INCREMENTAL,
        notebook_document_sync=NotebookDocumentSyncOptions(),
        experimental={"flag": [1, 2]},
    )
    data = caps.to_json()
    assert data["textDocumentSync"] == int(TextDocumentSyncKind.INCREMENTAL)
    assert data["experimental"] == {"flag": [1, 2]}
    back = ServerCapabilities.from_json(data)
    assert back.completion_provider == CompletionOptions()
    assert back.hover_provider == HoverOptions()
    assert back.text_document_sync is TextDocumentSyncKind.INCREMENTAL
    assert back.experimental == {"flag": [1, 2]}


def test_from_json_missing_fields_are_none():
    caps = ServerCapabilities.from_json({})
    assert caps.position_encoding is None
    assert caps.definition_provider is None
    assert caps.to_json() == {}


def test_from_json_null_treated_as_absent():
    caps = ServerCapabilities.from_json({"hoverProvider": None, "definitionProvider": False})
    assert caps.hover_provider is None
    assert caps.definition_provider is False


def test_provider_from_json_boolean():
    assert provider_from_json(True, DefinitionOptions) is True
    assert provider_from_json(False, DeclarationOptions, DeclarationRegistrationOptions) is False


def test_provider_from_json_registration_with_document_selector():
    result = provider_from_json(
        {"documentSelector": []}, DeclarationOptions, DeclarationRegistrationOptions
    )
    assert result == DeclarationRegistrationOptions()
    assert result != DeclarationOptions()


def test_provider_from_json_plain_options():
    result = provider_from_json({}, DeclarationOptions, DeclarationRegistrationOptions)
    assert result == DeclarationOptions()
    assert result != DeclarationRegistrationOptions()


def test_provider_from_json_without_registration_type():
    result = provider_from_json({"documentSelector": []}, DefinitionOptions)
    assert result == DefinitionOptions()
    assert result.to_json() == {}


def test_provider_to_json_values():
    assert provider_to_json(True) is True
    assert provider_to_json(HoverOptions()) == {}
    assert provider_to_json(TextDocumentSyncKind.NONE) == 0


def test_provider_to_json_rejects_other():
    with pytest.raises(TypeError):
        provider_to_json(3.5)


def test_text_document_sync_kind():
    assert text_document_sync_from_json(2) is TextDocumentSyncKind.INCREMENTAL


def test_text_document_sync_options():
    result = text_document_sync_from_json({"openClose": False})
    assert isinstance(result, TextDocumentSyncOptions)
    assert result.open_close is False
    assert result.change is None


def test_text_document_sync_object_without_open_close_fails():
    with pytest.raises(TypeError):
        text_document_sync_from_json({"change": 1})


def test_notebook_sync_registration_with_id():
    result = notebook_document_sync_from_json({"id": "nb"})
    assert result == NotebookDocumentSyncRegistrationOptions()
    assert result != NotebookDocumentSyncOptions()


def test_notebook_sync_plain():
    result = notebook_document_sync_from_json({})
    assert result == NotebookDocumentSyncOptions()
    assert result != NotebookDocumentSyncRegistrationOptions()


def test_file_operations_round_trip():
    ops = FileOperations(
        did_create=FileOperationRegistrationOptions(),
        will_delete=FileOperationRegistrationOptions(),
    )
    data = ops.to_json()
    assert set(data) == {"didCreate", "willDelete"}
    assert FileOperations.from_json(data) == ops


def test_file_operations_empty():
    assert FileOperations().to_json() == {}


def test_workspace_capabilities_round_trip():
    ws = WorkspaceCapabilities(
        workspace_folders=WorkspaceFoldersServerCapabilities(
            supported=True, change_notifications="reg"
        ),
        file_operations=FileOperations(did_rename=FileOperationRegistrationOptions()),
    )
    assert WorkspaceCapabilities.from_json(ws.to_json()) == ws


def test_server_capabilities_rejects_non_object():
    with pytest.raises(TypeError):
        ServerCapabilities.from_json([1, 2])