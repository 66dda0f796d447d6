import pytest

from slangd.watchers import (
    DidChangeWatchedFilesRegistrationOptions,
    FileSystemWatcher,
    RelativePattern,
    WatchKind,
    glob_pattern_from_json,
    glob_pattern_to_json,
)

SV_GLOB = "**/*.{sv,svh,v,vh}"
CONFIG_GLOB = "**/.slangd"


@pytest.mark.parametrize(
    ("kind", "value"),
    [(WatchKind.CREATE, 1), (WatchKind.CHANGE, 2), (WatchKind.DELETE, 4)],
)
def test_watch_kind_values(kind, value):
    data = FileSystemWatcher(glob_pattern=SV_GLOB, kind=kind).to_json()
    assert data["kind"] == value
    assert FileSystemWatcher.from_json({"globPattern": SV_GLOB, "kind": value}).kind == kind


def test_plain_glob_round_trip():
    assert glob_pattern_from_json(glob_pattern_to_json(SV_GLOB)) == SV_GLOB


def test_relative_pattern_round_trip():
    pattern = RelativePattern(
        base_uri={"uri": "file:///work", "name": "work"}, pattern="*.sv"
    )
    data = glob_pattern_to_json(pattern)
    assert data == {"baseUri": {"uri": "file:///work", "name": "work"}, "pattern": "*.sv"}
    assert glob_pattern_from_json(data) == pattern


def test_glob_pattern_from_json_rejects_number():
    with pytest.raises(TypeError):
        glob_pattern_from_json(42)


def test_glob_pattern_to_json_rejects_other_types():
    with pytest.raises(TypeError):
        glob_pattern_to_json(["*.sv"])


def test_relative_pattern_missing_pattern():
    with pytest.raises(KeyError):
        RelativePattern.from_json({"baseUri": "file:///work"})


def test_watcher_without_kind_omits_key():
    assert FileSystemWatcher(glob_pattern=CONFIG_GLOB).to_json() == {
        "globPattern": CONFIG_GLOB
    }


def test_watcher_with_kind():
    data = FileSystemWatcher(glob_pattern=SV_GLOB, kind=WatchKind.CHANGE).to_json()
    assert data == {"globPattern": SV_GLOB, "kind": 2}
    assert FileSystemWatcher.from_json(data).kind is WatchKind.CHANGE


def test_watcher_combined_kind_round_trip():
    watcher = FileSystemWatcher(
        glob_pattern=SV_GLOB, kind=WatchKind.CREATE | WatchKind.DELETE
    )
    restored = FileSystemWatcher.from_json(watcher.to_json())
    assert restored == watcher
    assert WatchKind.DELETE in restored.kind
    assert WatchKind.CHANGE not in restored.kind


def test_watcher_null_kind_reads_as_none():
    watcher = FileSystemWatcher.from_json({"globPattern": SV_GLOB, "kind": None})
    assert watcher.kind is None


def test_watcher_missing_glob_raises():
    with pytest.raises(KeyError):
        FileSystemWatcher.from_json({"kind": 1})


def test_watcher_bad_kind_type():
    with pytest.raises(TypeError):
        FileSystemWatcher.from_json({"globPattern": SV_GLOB, "kind": "create"})


def test_registration_options_round_trip():
    options = DidChangeWatchedFilesRegistrationOptions(
        watchers=[
            FileSystemWatcher(glob_pattern=SV_GLOB),
            FileSystemWatcher(glob_pattern=CONFIG_GLOB),
        ]
    )
    data = options.to_json()
    assert data == {
        "watchers": [{"globPattern": SV_GLOB}, {"globPattern": CONFIG_GLOB}]
    }
    assert DidChangeWatchedFilesRegistrationOptions.from_json(data) == options


def test_registration_options_requires_list():
    with pytest.raises(TypeError):
        DidChangeWatchedFilesRegistrationOptions.from_json({"watchers": SV_GLOB})


def test_registration_options_missing_watchers():
    with pytest.raises(KeyError):
        DidChangeWatchedFilesRegistrationOptions.from_json({})