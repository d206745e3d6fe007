"""Real filesystem implementation using aiofiles for async I/O.

Provides atomic writes via temp file + os.replace().
Read errors that mean "no readable file here" are reported as
FileNotFoundError; PermissionError propagates unchanged.
"""

import asyncio
import contextlib
import logging
import os
import shutil
import time
from collections.abc import Iterator
from pathlib import Path
from tempfile import NamedTemporaryFile

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]

from .models import AbsolutePath, WriteResult
from .utils import split_lines

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _readable_file(path: AbsolutePath) -> Iterator[None]:
    """Translate OS errors raised while opening a file for reading."""
    try:
        yield
    except (IsADirectoryError, NotADirectoryError) as e:
        logger.debug(f"Not a readable file: {path} ({e.__class__.__name__})")
        raise FileNotFoundError(f"File not found: {path}") from e
    except PermissionError:
        logger.debug(f"Permission denied reading: {path}")
        raise


class RealFileSystem:
    """
    Real filesystem implementation using aiofiles for async I/O.

    Stateless: every operation delegates to the operating system.
    """

    def join(self, base: AbsolutePath, *parts: str) -> AbsolutePath:
        """Join paths (sync - no I/O)."""
        result = Path(base).joinpath(*parts).resolve()

        # Security: Ensure result is still under base
        base_resolved = Path(base).resolve()
        try:
            result.relative_to(base_resolved)
        except ValueError as e:
            raise ValueError(f"Path traversal detected: {result} escapes {base}") from e

        return AbsolutePath(result)

    async def exists(self, path: AbsolutePath) -> bool:
        """Check existence asynchronously."""
        return bool(await aiofiles.os.path.exists(path))

    async def is_file(self, path: AbsolutePath) -> bool:
        """Check if file asynchronously."""
        return bool(await aiofiles.os.path.isfile(path))

    async def is_dir(self, path: AbsolutePath) -> bool:
        """Check if directory asynchronously."""
        return bool(await aiofiles.os.path.isdir(path))

    async def read_text(self, path: AbsolutePath, encoding: str = "utf-8") -> str:
        """Read text file asynchronously."""
        with _readable_file(path):
            async with aiofiles.open(path, encoding=encoding, newline="") as f:
                content: str = await f.read()
                return content

    async def read_bytes(self, path: AbsolutePath) -> bytes:
        """Read binary file asynchronously."""
        with _readable_file(path):
            async with aiofiles.open(path, mode="rb") as f:
                content: bytes = await f.read()
                return content

    async def read_lines(self, path: AbsolutePath, encoding: str = "utf-8") -> list[str]:
        """Read all lines asynchronously."""
        return split_lines(await self.read_text(path, encoding))

    async def write_text(
        self,
        path: AbsolutePath,
        content: str,
        encoding: str = "utf-8",
    ) -> WriteResult:
        """Atomically write text file asynchronously."""
        start = time.perf_counter()
        path_obj = Path(path)

        # Fail on unencodable content before anything touches disk
        bytes_written = len(content.encode(encoding))

        # Ensure parent directory exists
        await aiofiles.os.makedirs(path_obj.parent, exist_ok=True)

        # Temp file in the same directory so os.replace stays atomic
        loop = asyncio.get_running_loop()

        def create_temp_file() -> str:
            tmp = NamedTemporaryFile(
                mode="w",
                encoding=encoding,
                dir=path_obj.parent,
                delete=False,
            )
            tmp_path = tmp.name
            tmp.close()
            return tmp_path

        tmp_path = await loop.run_in_executor(None, create_temp_file)

        replaced = False
        try:
            async with aiofiles.open(tmp_path, mode="w", encoding=encoding, newline="") as f:
                await f.write(content)

            await loop.run_in_executor(None, os.replace, tmp_path, str(path))
            replaced = True
        finally:
            # Temp file must not outlive a failed or cancelled write
            if not replaced:
                logger.debug(f"Write failed, removing temp file: {tmp_path}")
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_path)

        duration = (time.perf_counter() - start) * 1000

        return WriteResult(
            path=str(path),
            bytes_written=bytes_written,
            duration_ms=duration,
        )

    async def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory and parents asynchronously."""
        await aiofiles.os.makedirs(path, exist_ok=exist_ok)

    async def listdir(self, path: AbsolutePath) -> list[str]:
        """List directory contents asynchronously."""
        entries: list[str] = await aiofiles.os.listdir(path)
        return sorted(entries)

    async def remove(self, path: AbsolutePath) -> None:
        """Remove file asynchronously."""
        # unlink() on a directory reports EPERM on some platforms
        if await self.is_dir(path):
            raise IsADirectoryError(f"Is a directory: {path}")
        await aiofiles.os.unlink(path)

    async def rmdir(self, path: AbsolutePath, recursive: bool = False) -> None:
        """Remove directory asynchronously."""
        if recursive:
            # shutil.rmtree is blocking, run in executor
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, shutil.rmtree, str(path))
        else:
            await aiofiles.os.rmdir(path)


class RealFileSystemSync:
    """
    Synchronous wrapper around RealFileSystem.

    Uses asyncio.run() to execute async operations in blocking mode.
    Suitable for simple scripts, tests, and non-async contexts.
    """

    def __init__(self) -> None:
        self._async_fs = RealFileSystem()

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
        """Read binary file (blocking)."""
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
        """Write text file atomically (blocking)."""
        return asyncio.run(self._async_fs.write_text(path, content, encoding))

    def mkdirs(self, path: AbsolutePath, exist_ok: bool = True) -> None:
        """Create directory and parents (blocking)."""
        asyncio.run(self._async_fs.mkdirs(path, exist_ok))

    def listdir(self, path: AbsolutePath) -> list[str]:
        """List directory contents (blocking)."""
        return asyncio.run(self._async_fs.listdir(path))

    def remove(self, path: AbsolutePath) -> None:
        """Remove file (blocking)."""
        asyncio.run(self._async_fs.remove(path))

    def rmdir(self, path: AbsolutePath, recursive: bool = False) -> None:
        """Remove directory (blocking)."""
        asyncio.run(self._async_fs.rmdir(path, recursive))
