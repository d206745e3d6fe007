"""Filesystem abstraction layer for fsseam.

Consumers depend on the FileSystem protocol and receive an implementation
by injection: RealFileSystem in production, FakeFileSystem in tests.

Example (async):
    >>> from fsseam.core.io import FakeFileSystem, absolute_path
    >>> fs = FakeFileSystem({"/data/dealers.csv": "a\\nb"})
    >>> lines = await fs.read_lines(absolute_path("/data/dealers.csv"))

Example (sync):
    >>> from fsseam.core.io import RealFileSystemSync, absolute_path
    >>> fs = RealFileSystemSync()
    >>> path = fs.join(absolute_path("/tmp"), "fsseam", "test.txt")
    >>> fs.write_text(path, "Hello, world!")
    >>> lines = fs.read_lines(path)
"""

from .impl_fake import FakeFileSystem, FakeFileSystemSync
from .impl_real import RealFileSystem, RealFileSystemSync
from .models import AbsolutePath, FileContent, WriteResult, absolute_path
from .protocols import FileSystem, FileSystemSync
from .utils import split_lines

__all__ = [
    # Path types and constructors
    "AbsolutePath",
    "absolute_path",
    # Result and content types
    "FileContent",
    "WriteResult",
    # Protocols
    "FileSystem",
    "FileSystemSync",
    # Async implementations
    "RealFileSystem",
    "FakeFileSystem",
    # Sync wrappers
    "RealFileSystemSync",
    "FakeFileSystemSync",
    # Utilities
    "split_lines",
]
