"""
Save and restore a package manager configuration file around a build step.

A task that rewrites ``.npmrc`` (to inject credentials, for example) saves the
original first and restores it afterwards. Backups are plain files at
predictable paths:

- ``<agent dir>/npm/<basename>`` for ``backup``/``restore``
- ``<directory>/<name>.npmrc`` for ``backup_named``/``restore_named``

There is one slot per file name: two tasks on the same agent backing up files
with the same base name share it.

Filesystem errors are not handled here; a failed read or write reaches the
caller unchanged.

Example:
    >>> backup = ConfigBackup(EnvironmentTaskHost())
    >>> backup.backup("/src/app/.npmrc")
    >>> # ... rewrite /src/app/.npmrc and run npm ...
    >>> backup.restore("/src/app/.npmrc")
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from packaging_common.config.settings import PackagingSettings
from packaging_common.enums import LogType
from packaging_common.exceptions import ConfigurationError
from packaging_common.host.base import FileSystem, TaskHost
from packaging_common.host.filesystem import LocalFileSystem

log = structlog.get_logger(__name__)

PathLike = str | os.PathLike[str]


class ConfigBackup:
    """Backup and restore of configuration files through a task host."""

    def __init__(
        self,
        host: TaskHost,
        filesystem: FileSystem | None = None,
        settings: PackagingSettings | None = None,
    ) -> None:
        self.host = host
        self.filesystem = filesystem or LocalFileSystem()
        self.settings = settings or PackagingSettings()

    def temp_path(self) -> Path:
        """Return the agent folder holding unnamed backups, creating it if needed.

        Raises:
            ConfigurationError: If the agent defines neither the build nor the
                temp directory variable
        """
        base = self.host.get_variable(self.settings.build_directory_variable) or self.host.get_variable(
            self.settings.temp_directory_variable
        )
        if not base:
            raise ConfigurationError(
                f"Neither {self.settings.build_directory_variable} nor "
                f"{self.settings.temp_directory_variable} is set; cannot locate the backup folder"
            )

        path = Path(base) / self.settings.temp_subdirectory
        if not self.filesystem.exists(path):
            self.filesystem.make_dirs(path)
        return path

    def backup(self, file: PathLike | None) -> None:
        """Copy ``file`` into the agent backup folder; no-op if it does not exist."""
        if not file or not self.filesystem.exists(Path(file)):
            return
        source = Path(file)
        self._save(source, self.temp_path() / source.name)

    def backup_named(self, file: PathLike | None, name: str, directory: PathLike) -> None:
        """Copy ``file`` to ``<directory>/<name><ext>``; no-op if it does not exist."""
        if not file or not self.filesystem.exists(Path(file)):
            return
        self._save(Path(file), self.named_path(name, directory))

    def restore(self, file: PathLike | None) -> None:
        """Put back the copy saved by ``backup`` and delete it, if there is one."""
        if not file:
            return
        target = Path(file)
        self._restore(self.temp_path() / target.name, target)

    def restore_named(self, file: PathLike | None, name: str, directory: PathLike) -> None:
        """Put back the copy saved by ``backup_named`` and delete it, if there is one."""
        if not file:
            return
        self._restore(self.named_path(name, directory), Path(file))

    def named_path(self, name: str, directory: PathLike) -> Path:
        return Path(directory) / f"{name}{self.settings.config_extension}"

    def _save(self, source: Path, destination: Path) -> None:
        self.host.log(f"Saving file {source}", LogType.DEBUG)
        self._copy(source, destination)
        log.info("config_saved", source=str(source), backup=str(destination))

    def _restore(self, backup: Path, target: Path) -> None:
        if not self.filesystem.exists(backup):
            log.debug("config_backup_missing", backup=str(backup))
            return
        self.host.log(f"Restoring file {target}", LogType.DEBUG)
        self._copy(backup, target)
        self.filesystem.remove(backup)
        log.info("config_restored", target=str(target), backup=str(backup))

    def _copy(self, source: Path, destination: Path) -> None:
        self.filesystem.write_bytes(destination, self.filesystem.read_bytes(source))


def get_temp_path(host: TaskHost, settings: PackagingSettings | None = None) -> Path:
    """Return (and create) the agent folder holding unnamed backups."""
    return ConfigBackup(host, settings=settings).temp_path()


def save_file(host: TaskHost, file: PathLike | None) -> None:
    ConfigBackup(host).backup(file)


def save_file_with_name(host: TaskHost, file: PathLike | None, name: str, directory: PathLike) -> None:
    ConfigBackup(host).backup_named(file, name, directory)


def restore_file(host: TaskHost, file: PathLike | None) -> None:
    ConfigBackup(host).restore(file)


def restore_file_with_name(host: TaskHost, file: PathLike | None, name: str, directory: PathLike) -> None:
    ConfigBackup(host).restore_named(file, name, directory)
