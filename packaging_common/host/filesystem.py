"""Local disk implementation of the FileSystem protocol."""

import shutil
from pathlib import Path


class LocalFileSystem:
    """Plain ``pathlib``/``shutil`` file operations.

    Errors are not caught: ``OSError`` and its subclasses reach the caller
    exactly as the operating system reported them.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def remove(self, path: Path) -> None:
        """Delete ``path`` recursively; a missing path is not an error."""
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        elif target.exists() or target.is_symlink():
            target.unlink()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, content: bytes) -> None:
        Path(path).write_bytes(content)
