"""The .slangd project configuration file."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_LOG = logging.getLogger(__name__)


def _canonical(path: str | Path) -> Path:
    return Path(path).resolve()


def _scalar_string(node: Any, section: str) -> str:
    if node is None or isinstance(node, (Mapping, list)):
        raise ValueError(f"{section}: expected a scalar value, got {node!r}")
    if isinstance(node, bool):
        return "true" if node else "false"
    return str(node)


def _sequence(node: Any, section: str) -> list:
    if isinstance(node, list):
        return node
    if isinstance(node, Mapping):
        raise ValueError(f"{section}: expected a sequence")
    return []


def _strings(node: Any, section: str) -> list[str]:
    return [_scalar_string(item, section) for item in _sequence(node, section)]


@dataclass
class FileLists:
    """File-list files named by the configuration."""

    paths: list[str] = field(default_factory=list)
    absolute: bool = False


@dataclass
class SlangdConfigFile:
    """Sources, include directories and defines of a project."""

    file_lists: FileLists = field(default_factory=FileLists)
    files: list[Path] = field(default_factory=list)
    include_dirs: list[Path] = field(default_factory=list)
    defines: list[str] = field(default_factory=list)

    @classmethod
    def create_default(cls) -> SlangdConfigFile:
        """Return a configuration using the current directory for includes."""
        return cls(include_dirs=[_canonical(Path.cwd())])

    @classmethod
    def load_from_file(cls, config_path: str | Path) -> SlangdConfigFile | None:
        """Load the configuration, or return None if missing or malformed."""
        config_path = Path(config_path)
        if not config_path.exists():
            _LOG.debug("No .slangd configuration file found at %s", config_path)
            return None
        try:
            with config_path.open(encoding="utf-8") as stream:
                document = yaml.safe_load(stream)
            config = cls._from_document(document)
        except yaml.YAMLError as exc:
            _LOG.error("Error parsing .slangd configuration file: %s", exc)
            return None
        except (OSError, ValueError, UnicodeDecodeError) as exc:
            _LOG.error("Error loading .slangd configuration file: %s", exc)
            return None
        _LOG.debug("Loaded .slangd configuration from %s", config_path)
        return config

    @classmethod
    def _from_document(cls, document: Any) -> SlangdConfigFile:
        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            raise ValueError("configuration must be a mapping")
        config = cls()

        file_lists = document.get("FileLists")
        if file_lists is not None:
            if not isinstance(file_lists, Mapping):
                raise ValueError("FileLists: expected a mapping")
            if "Paths" in file_lists:
                config.file_lists.paths = _strings(file_lists["Paths"], "FileLists.Paths")
            if "Absolute" in file_lists:
                absolute = file_lists["Absolute"]
                if not isinstance(absolute, bool):
                    raise ValueError("FileLists.Absolute: expected a boolean")
                config.file_lists.absolute = absolute

        if "Files" in document:
            config.files = [_canonical(p) for p in _strings(document["Files"], "Files")]
        if "IncludeDirs" in document:
            config.include_dirs = [
                _canonical(p) for p in _strings(document["IncludeDirs"], "IncludeDirs")
            ]
        if "Defines" in document:
            config.defines = _strings(document["Defines"], "Defines")
        return config