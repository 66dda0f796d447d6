# slangd

Building blocks for a SystemVerilog language server:

- Language Server Protocol message types that convert to and from plain
  JSON-ready dictionaries.
- Reading of the `.slangd` project configuration file.
- A configuration manager that works out the source files, include
  directories and defines of a workspace.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `slangd.errors` | `LspErrorCode`, `LspError` (an exception), `default_message` |
| `slangd.jsonutil` | `read_optional`, `write_optional`, `read_required` for JSON object fields |
| `slangd.watchers` | `WatchKind`, `RelativePattern`, `FileSystemWatcher`, `DidChangeWatchedFilesRegistrationOptions`, `glob_pattern_to_json`, `glob_pattern_from_json` |
| `slangd.workspace_protocol` | Workspace messages: `WorkspaceSymbolParams`, `ConfigurationItem`, `ConfigurationParams`, `DidChangeConfigurationParams`, `FileCreate`, `CreateFilesParams`, `FileRename`, `RenameFilesParams`, `FileDelete`, `DeleteFilesParams`, `FileChangeType`, `FileEvent`, `DidChangeWatchedFilesParams`, `ExecuteCommandParams` |
| `slangd.capability_options` | `TextDocumentSyncKind`, `SaveOptions`, `TextDocumentSyncOptions`, `WorkspaceFoldersServerCapabilities`, `save_to_json`, `save_from_json`, and the field-less option classes built on `EmptyOptions` |
| `slangd.server_capabilities` | `ServerCapabilities`, `WorkspaceCapabilities`, `FileOperations`, `provider_to_json`, `provider_from_json`, `text_document_sync_from_json`, `notebook_document_sync_from_json` |
| `slangd.lifecycle` | `InitializeResult`, `ServerInfo`, `Registration`, `RegistrationParams`, `Unregistration`, `UnregistrationParams`, `StaticRegistrationOptions`, `LogTraceParams` |
| `slangd.config_file` | `SlangdConfigFile`, `FileLists` |
| `slangd.config_manager` | `ConfigManager`, `is_systemverilog_file`, `is_config_file` |

## Protocol messages

Every message type is a dataclass with `to_json()` and a `from_json()` class
method. Field names are snake case in Python and camel case in JSON. Optional
fields that are `None` are left out of the JSON. A missing required field
raises `KeyError`, and a value of the wrong JSON type raises `TypeError`.

```python
from slangd.server_capabilities import ServerCapabilities
from slangd.capability_options import TextDocumentSyncOptions, TextDocumentSyncKind

caps = ServerCapabilities(
    text_document_sync=TextDocumentSyncOptions(change=TextDocumentSyncKind.FULL),
    definition_provider=True,
    document_symbol_provider=True,
)
payload = caps.to_json()
assert ServerCapabilities.from_json(payload).to_json() == payload
```

`ServerCapabilities.position_encoding` defaults to `"utf-16"`. When reading a
provider, a boolean stays a boolean; an object with a `documentSelector` key
becomes the registration options type where the provider has one, and any
other object becomes the plain options type. `textDocumentSync` is read as
`TextDocumentSyncOptions` when it has an `openClose` key and as a
`TextDocumentSyncKind` otherwise.

Errors are raised as `LspError`, which carries an `LspErrorCode`:

```python
from slangd.errors import LspError, LspErrorCode

error = LspError.from_code(LspErrorCode.DOCUMENT_NOT_OPEN)
error.to_json()   # {"code": 10, "message": "Document not open"}
```

## The `.slangd` file

A YAML file at the root of the workspace:

```yaml
Files:
  - rtl/top.sv
IncludeDirs:
  - rtl/include
Defines:
  - SIMULATION
FileLists:
  Paths:
    - sources.f
  Absolute: false
```

Every section is optional. Entries under `Files` and `IncludeDirs` are turned
into resolved paths (relative ones against the current working directory).
`FileLists.Absolute` must be a boolean.

`SlangdConfigFile.load_from_file(path)` returns the configuration, or `None`
if the file does not exist, is not valid YAML, or has sections of the wrong
shape. `SlangdConfigFile.create_default()` returns a configuration whose only
include directory is the current working directory.

## Configuration manager

```python
from slangd.config_manager import ConfigManager

manager = ConfigManager("/path/to/workspace")
manager.load_config("/path/to/workspace")

sources = manager.get_source_files()
include_dirs = manager.get_include_directories()
defines = manager.get_defines()
```

`load_config` reads `<workspace>/.slangd` and returns whether it was loaded.

With a configuration loaded, `get_source_files` returns the `Files` entries
followed by the entries of each file list. File list paths are taken relative
to the workspace root unless `Absolute` is true. A file list holds one path
per line; blank lines and lines that start with `#` or `/` are skipped, and a
trailing backslash joins a line to the next one. Paths inside a file list are
relative to the list's own directory unless `Absolute` is true.

Without a configuration, `get_source_files` searches the workspace for
SystemVerilog files (`.sv`, `.svh`, `.v`, `.vh`), `get_include_directories`
returns every directory below the workspace root, and `get_defines` returns an
empty list.

`handle_config_file_change(path)` ignores a config file outside the workspace
and returns `False`. Otherwise it reloads the file and returns `True`, or
clears the loaded configuration and returns `False` if the file is gone or
cannot be parsed.

Messages are written through the standard `logging` module; `ConfigManager`
accepts a `logger` argument.

## What this package does not do

It has no JSON-RPC transport, no running server and no command to start one.
It does not parse or compile SystemVerilog, and so offers no diagnostics,
symbols or go-to-definition. It supplies the message types and the workspace
configuration that such a server would be built on.