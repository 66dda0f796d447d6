from pathlib import Path

from slangd.config_file import FileLists, SlangdConfigFile


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_gives_none(tmp_path):
    assert SlangdConfigFile.load_from_file(tmp_path / ".slangd") is None


def test_loads_all_sections(tmp_path):
    a = tmp_path / "a.sv"
    inc = tmp_path / "inc"
    config_path = _write(
        tmp_path / ".slangd",
        f"FileLists:\n  Paths:\n    - files.f\n    - more.f\n  Absolute: true\n"
        f"Files:\n  - {a}\nIncludeDirs:\n  - {inc}\nDefines:\n  - FOO\n  - BAR=1\n",
    )
    config = SlangdConfigFile.load_from_file(config_path)
    assert config.file_lists == FileLists(paths=["files.f", "more.f"], absolute=True)
    assert config.files == [a.resolve()]
    assert config.include_dirs == [inc.resolve()]
    assert config.defines == ["FOO", "BAR=1"]


def test_empty_file_gives_empty_config(tmp_path):
    config = SlangdConfigFile.load_from_file(_write(tmp_path / ".slangd", ""))
    assert config == SlangdConfigFile()
    assert config.file_lists.absolute is False


def test_absent_absolute_defaults_to_relative(tmp_path):
    config = SlangdConfigFile.load_from_file(
        _write(tmp_path / ".slangd", "FileLists:\n  Paths: [x.f]\n")
    )
    assert config.file_lists.paths == ["x.f"]
    assert config.file_lists.absolute is False


def test_malformed_yaml_gives_none(tmp_path):
    path = _write(tmp_path / ".slangd", "Files: [unclosed\n")
    assert SlangdConfigFile.load_from_file(path) is None


def test_non_scalar_entry_gives_none(tmp_path):
    path = _write(tmp_path / ".slangd", "Defines:\n  - {a: b}\n")
    assert SlangdConfigFile.load_from_file(path) is None


def test_non_boolean_absolute_gives_none(tmp_path):
    path = _write(tmp_path / ".slangd", "FileLists:\n  Absolute: maybe\n")
    assert SlangdConfigFile.load_from_file(path) is None


def test_scalar_defines_are_text(tmp_path):
    config = SlangdConfigFile.load_from_file(
        _write(tmp_path / ".slangd", "Defines:\n  - WIDTH\n  - 8\n")
    )
    assert config.defines == ["WIDTH", "8"]


def test_create_default_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = SlangdConfigFile.create_default()
    assert config.include_dirs == [tmp_path.resolve()]
    assert config.files == []
    assert config.defines == []