"""In-memory filesystem for fast, isolated testing.

Simulates filesystem operations without disk I/O.
Async operations complete immediately but maintain async interface.
"""

import asyncio
import errno
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath

from .models import AbsolutePath, FileContent, WriteResult
from .utils import split_lines


def _key(path: str | PurePosixPath | AbsolutePath) -> str:
    """Normalize a path to the registry key form ("/a/b")."""
    p = PurePosixPath(str(path).replace("\\", "/"))
    if not p.is_absolute():
        p = PurePosixPath("/") / p
    return str(p)


class FakeFileSystem:
    """
    In-memory async filesystem for testing.

    Seeded with a mapping of path -> content at construction. The seed is
    copied, so instances never share mutable state with each other or with
    the caller. Paths that were never seeded or written do not exist.
    Not thread-safe (use per-test instance).

    Example:
        >>> fs = FakeFileSystem({"/data/dealers.csv": "a\\nb"})
        >>> await fs.read_lines(absolute_path("/data/dealers.csv"))
        ['a', 'b']
    """

    def __init__(
        self,
        files: Mapping[str, FileContent] | None = None,
        dirs: Iterable[str] | None = None,
    ) -> None:
        self._files: dict[str, FileContent] = {}
        self._dirs: set[str] = {"/"}  # Root always exists

        for d in dirs or ():
            self._ensure_dirs(_key(d))
        for path, content in (files or {}).items():
            key = _key(path)
            if key in self._dirs:
                raise FileExistsError(f"Directory exists: {key}")
            self._ensure_dirs(str(PurePosixPath(key).parent))
            self._files[key] = content

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths (sync - no I/O)."""
        result = PurePosixPath(_key(base)).joinpath(*parts)
        return AbsolutePath(Path(_key(result)))

    async def exists(self, path: AbsolutePath) -> bool:
        """Check existence (async, immediate)."""
        key = _key(path)
        return key in self._files or key in self._dirs

    async def is_file(self, path: AbsolutePath) -> bool:
        """Check if file (async, immediate)."""
        return _key(path) in self._files

    async def is_dir(self, path: AbsolutePath) -> bool:
        """Check if directory (async, immediate)."""
        return _key(path) in self._dirs

    def _content(self, path: AbsolutePath) -> FileContent:
        key = _key(path)
        if key not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[key]

    async def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        """Read text (async, immediate)."""
        content = self._content(path)
        if isinstance(content, bytes):
            return content.decode(encoding)
        return content

    async def read_bytes(self, path: AbsolutePath) -> bytes:
        """Read bytes (async, immediate)."""
        content = self._content(path)
        if isinstance(content, str):
            return content.encode("utf-8")
        return content

    async def read_lines(self, path: AbsolutePath, encoding: str = "utf-8") -> list[str]:
        """Read all lines (async, immediate)."""
        return split_lines(await self.read_text(path, encoding))

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Write text (async, immediate)."""
        key = _key(path)
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path}")

        # Encode before mutating so a failed write leaves nothing behind
        bytes_written = len(content.encode(encoding))

        # Auto-create parent directories
        self._ensure_dirs(str(PurePosixPath(key).parent))
        self._files[key] = content

        return WriteResult(
            path=key,
            bytes_written=bytes_written,
            duration_ms=0.0,
        )

    def _ensure_dirs(self, key: str) -> None:
        """Register a directory and all of its parents (sync helper)."""
        p = PurePosixPath(key)
        chain = [str(d) for d in (p, *p.parents)]
        for d_key in chain:
            if d_key in self._files:
                raise FileExistsError(f"File exists: {d_key}")
        self._dirs.update(chain)

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory (async, immediate)."""
        key = _key(path)
        if not exist_ok and key in self._dirs:
            raise FileExistsError(f"Directory exists: {path}")
        self._ensure_dirs(key)

    async def listdir(self, path: AbsolutePath) -> list[str]:
        """List directory (async, immediate)."""
        key = _key(path)
        if key not in self._dirs:
            raise FileNotFoundError(f"Directory not found: {path}")

        parent = PurePosixPath(key)
        children = {
            PurePosixPath(p).name
            for p in (*self._files, *self._dirs)
            if p != key and PurePosixPath(p).parent == parent
        }
        return sorted(children)

    async def remove(self, path: AbsolutePath) -> None:
        """Remove file (async, immediate)."""
        key = _key(path)
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path}")
        if key not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        del self._files[key]

    async def rmdir(self, path: AbsolutePath, recursive: bool = False) -> None:
        """Remove directory (async, immediate)."""
        key = _key(path)
        if key not in self._dirs:
            raise FileNotFoundError(f"Directory not found: {path}")

        prefix = key.rstrip("/") + "/"
        nested_files = [p for p in self._files if p.startswith(prefix)]
        nested_dirs = [p for p in self._dirs if p != key and p.startswith(prefix)]

        if not recursive and (nested_files or nested_dirs):
            raise OSError(errno.ENOTEMPTY, "Directory not empty", str(path))

        for p in nested_files:
            del self._files[p]
        for p in nested_dirs:
            self._dirs.discard(p)

        if key != "/":
            self._dirs.discard(key)


class FakeFileSystemSync:
    """
    Synchronous wrapper around FakeFileSystem.

    Since fake operations are instant, this is a thin wrapper
    using asyncio.run() for consistency with RealFileSystemSync.
    """

    def __init__(
        self,
        files: Mapping[str, FileContent] | None = None,
        dirs: Iterable[str] | None = None,
    ) -> None:
        self._async_fs = FakeFileSystem(files, dirs)

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths (sync - no I/O)."""
        return self._async_fs.join(base, *parts)

    def exists(self, path: AbsolutePath) -> bool:
        """Check existence (blocking)."""
        return asyncio.run(self._async_fs.exists(path))

    def is_file(self, path: AbsolutePath) -> bool:
        """Check if file (blocking)."""
        return asyncio.run(self._async_fs.is_file(path))

    def is_dir(self, path: AbsolutePath) -> bool:
        """Check if directory (blocking)."""
        return asyncio.run(self._async_fs.is_dir(path))

    def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        """Read text file (blocking)."""
        return asyncio.run(self._async_fs.read_text(path, encoding))

    def read_bytes(self, path: AbsolutePath) -> bytes:
        """Read bytes (blocking)."""
        return asyncio.run(self._async_fs.read_bytes(path))

    def read_lines(self, path: AbsolutePath, encoding: str = "utf-8") -> list[str]:
        """Read all lines (blocking)."""
        return asyncio.run(self._async_fs.read_lines(path, encoding))

    def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Write text file (blocking)."""
        return asyncio.run(self._async_fs.write_text(path, content, encoding))

    def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory (blocking)."""
        asyncio.run(self._async_fs.mkdirs(path, exist_ok))

    def listdir(self, path: AbsolutePath) -> list[str]:
        """List directory (blocking)."""
        return asyncio.run(self._async_fs.listdir(path))

    def remove(self, path: AbsolutePath) -> None:
        """Remove file (blocking)."""
        asyncio.run(self._async_fs.remove(path))

    def rmdir(self, path: AbsolutePath, recursive: bool = False) -> None:
        """Remove directory (blocking)."""
        asyncio.run(self._async_fs.rmdir(path, recursive))
