"""Build agent collaborators: task host and filesystem."""

from packaging_common.host.base import FileSystem, TaskHost
from packaging_common.host.environment_host import EnvironmentTaskHost
from packaging_common.host.filesystem import LocalFileSystem
from packaging_common.host.memory_host import InMemoryTaskHost

__all__ = [
    "EnvironmentTaskHost",
    "FileSystem",
    "InMemoryTaskHost",
    "LocalFileSystem",
    "TaskHost",
]
