"""Project configuration for a workspace and the source files it names."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from slangd.config_file import SlangdConfigFile

CONFIG_FILE_NAME = ".slangd"
SYSTEMVERILOG_SUFFIXES = frozenset({".sv", ".svh", ".v", ".vh"})

_WHITESPACE = " \t\n\v\f\r"


def _canonical(path: str | Path) -> Path:
    return Path(path).resolve()


def is_systemverilog_file(path: str | Path) -> bool:
    """Return True if the path has a SystemVerilog or Verilog extension."""
    return Path(path).suffix.lower() in SYSTEMVERILOG_SUFFIXES


def is_config_file(path: str | Path) -> bool:
    """Return True if the path names a .slangd configuration file."""
    return Path(path).name == CONFIG_FILE_NAME


class ConfigManager:
    """Holds the configuration of one workspace and answers questions about it."""

    def __init__(self, workspace_root: str | Path, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self.workspace_root = _canonical(workspace_root)
        self.config: SlangdConfigFile | None = None

    def has_valid_config(self) -> bool:
        """Return True if a configuration file is loaded."""
        return self.config is not None

    def _log_config(self) -> None:
        config = self.config
        self._logger.debug("  Include directories: %d", len(config.include_dirs))
        self._logger.debug("  Defines: %d", len(config.defines))
        self._logger.debug("  Source files: %d", len(config.files))
        self._logger.debug("  File lists: %d", len(config.file_lists.paths))

    def load_config(self, workspace_root: str | Path) -> bool:
        """Load the .slangd file of the workspace; return True if one was found."""
        with self._lock:
            self.workspace_root = _canonical(workspace_root)
            self._logger.debug(
                "ConfigManager loading config from workspace: %s", self.workspace_root
            )
            config_path = self.workspace_root / CONFIG_FILE_NAME
            loaded = SlangdConfigFile.load_from_file(config_path)
            if loaded is None:
                self._logger.debug(
                    "ConfigManager no .slangd config file found at %s", config_path
                )
                return False
            self.config = loaded
            self._logger.info("ConfigManager loaded .slangd config file from %s", config_path)
            self._log_config()
            return True

    def handle_config_file_change(self, config_path: str | Path) -> bool:
        """Reload after a change to a config file; return True if it was reloaded."""
        with self._lock:
            config_path = _canonical(config_path)
            self._logger.info("ConfigManager reloading config file: %s", config_path)
            if not config_path.is_relative_to(self.workspace_root):
                self._logger.warning(
                    "ConfigManager ignoring config file outside current workspace: %s",
                    config_path,
                )
                return False
            loaded = SlangdConfigFile.load_from_file(config_path)
            if loaded is None:
                self._logger.info(
                    "ConfigManager config file was removed or contains errors"
                )
                self.config = None
                return False
            self.config = loaded
            self._logger.info("ConfigManager successfully reloaded configuration")
            self._log_config()
            return True

    def get_source_files(self) -> list[Path]:
        """Return the configured source files, or all SystemVerilog files found."""
        if self.config is not None:
            all_files = list(self.config.files)
            file_lists = self.config.file_lists
            for rel_path in file_lists.paths:
                resolved = (
                    _canonical(rel_path)
                    if file_lists.absolute
                    else _canonical(self.workspace_root / rel_path)
                )
                all_files.extend(self.process_file_list(resolved, file_lists.absolute))
            self._logger.debug(
                "ConfigManager using %d source files from config file", len(all_files)
            )
            return all_files

        self._logger.debug(
            "ConfigManager scanning workspace folder: %s", self.workspace_root
        )
        files = self.find_systemverilog_files(self.workspace_root)
        self._logger.debug(
            "ConfigManager found %d SystemVerilog files in %s",
            len(files),
            self.workspace_root,
        )
        return files

    def get_include_directories(self) -> list[Path]:
        """Return configured include directories, or every workspace directory."""
        if self.config is not None:
            self._logger.debug("ConfigManager using include directories from config")
            return list(self.config.include_dirs)

        self._logger.debug("ConfigManager using all workspace directories as fallback")
        include_dirs: list[Path] = []
        for dirpath, dirnames, _ in os.walk(self.workspace_root, onerror=self._walk_error):
            include_dirs.extend(_canonical(Path(dirpath) / name) for name in dirnames)
        return include_dirs

    def get_defines(self) -> list[str]:
        """Return configured preprocessor defines, or an empty list."""
        if self.config is not None:
            self._logger.debug("ConfigManager using defines from config")
            return list(self.config.defines)
        self._logger.debug("ConfigManager using empty defines list as fallback")
        return []

    def process_file_list(self, path: str | Path, absolute: bool) -> list[Path]:
        """Read a file list: one path per line, '#' or '/' comments, '\\' continuation."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError:
            self._logger.warning("ConfigManager failed to read filelist: %s", path)
            return []

        files: list[Path] = []
        accumulated = ""
        for raw_line in text.split("\n"):
            line = raw_line.strip(_WHITESPACE)
            if not line or line[0] in "#/":
                continue
            if line.endswith("\\"):
                accumulated += line[:-1]
                continue
            accumulated += line
            if accumulated:
                if absolute:
                    files.append(_canonical(accumulated))
                else:
                    files.append(_canonical(path.parent / accumulated))
            accumulated = ""
        return files

    def find_systemverilog_files(self, directory: str | Path) -> list[Path]:
        """Return every SystemVerilog file below a directory."""
        directory = Path(directory)
        self._logger.debug("ConfigManager scanning directory: %s", directory)
        found: list[Path] = []
        for dirpath, _, filenames in os.walk(directory, onerror=self._walk_error):
            for name in filenames:
                candidate = Path(dirpath) / name
                if candidate.is_file() and is_systemverilog_file(candidate):
                    found.append(_canonical(candidate))
        return found

    def _walk_error(self, error: OSError) -> None:
        self._logger.error("Error scanning directory %s: %s", error.filename, error)