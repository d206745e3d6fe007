"""Dealership importer.

Reads CSV files exclusively through the FileSystem protocol, so the same
code runs against the real disk in production and an in-memory fake in
tests.
"""

from __future__ import annotations

import asyncio
import logging

from fsseam.core.importers.models import Dealership, DealershipParseError
from fsseam.core.io import AbsolutePath, FileSystem, RealFileSystem

logger = logging.getLogger(__name__)


class DealershipImporter:
    """
    Async dealership importer.

    One record per line, no header row. Blank lines are skipped unless
    skip_blank_lines is False, in which case they fail to parse.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        *,
        encoding: str = "utf-8",
        skip_blank_lines: bool = True,
    ) -> None:
        """
        Initialize importer.

        Args:
            fs: Async filesystem implementation (defaults to RealFileSystem)
            encoding: Text encoding of import files
            skip_blank_lines: Ignore whitespace-only lines
        """
        self.fs: FileSystem = fs if fs is not None else RealFileSystem()
        self.encoding = encoding
        self.skip_blank_lines = skip_blank_lines

    async def import_file(self, path: AbsolutePath) -> list[Dealership]:
        """
        Import all dealerships from a CSV file.

        Args:
            path: Absolute path of the CSV file

        Returns:
            Dealership records in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            PermissionError: If the file can't be read
            DealershipParseError: If a line is not a valid dealership
        """
        lines = await self.fs.read_lines(path, self.encoding)

        records: list[Dealership] = []
        for line_number, line in enumerate(lines, start=1):
            if self.skip_blank_lines and not line.strip():
                logger.debug(f"Skipping blank line {path}:{line_number}")
                continue
            try:
                records.append(Dealership.from_csv_line(line))
            except ValueError as e:
                raise DealershipParseError(str(path), line_number, line, str(e)) from e

        logger.info(f"Imported {len(records)} dealerships from {path}")
        return records

    async def import_directory(
        self, path: AbsolutePath, suffix: str = ".csv"
    ) -> list[Dealership]:
        """
        Import every file in a directory whose name ends with suffix.

        Files are processed in sorted name order; subdirectories are ignored.

        Raises:
            FileNotFoundError: If the directory doesn't exist
            DealershipParseError: If any line of any file is invalid
        """
        records: list[Dealership] = []
        for name in sorted(await self.fs.listdir(path)):
            if not name.endswith(suffix):
                continue
            file_path = self.fs.join(path, name)
            if not await self.fs.is_file(file_path):
                continue
            records.extend(await self.import_file(file_path))
        return records

    async def import_path(self, path: AbsolutePath, suffix: str = ".csv") -> list[Dealership]:
        """
        Import a CSV file, or every matching file if path is a directory.

        Raises:
            FileNotFoundError: If nothing exists at path
            DealershipParseError: If any line of any file is invalid
        """
        if await self.fs.is_dir(path):
            return await self.import_directory(path, suffix)
        return await self.import_file(path)


class DealershipImporterSync:
    """
    Synchronous wrapper around DealershipImporter.

    Uses asyncio.run() to execute async operations in blocking mode.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        *,
        encoding: str = "utf-8",
        skip_blank_lines: bool = True,
    ) -> None:
        self._async_importer = DealershipImporter(
            fs, encoding=encoding, skip_blank_lines=skip_blank_lines
        )

    @property
    def fs(self) -> FileSystem:
        """Filesystem the importer reads through."""
        return self._async_importer.fs

    def import_file(self, path: AbsolutePath) -> list[Dealership]:
        """Import a CSV file (blocking)."""
        return asyncio.run(self._async_importer.import_file(path))

    def import_directory(self, path: AbsolutePath, suffix: str = ".csv") -> list[Dealership]:
        """Import every matching file in a directory (blocking)."""
        return asyncio.run(self._async_importer.import_directory(path, suffix))

    def import_path(self, path: AbsolutePath, suffix: str = ".csv") -> list[Dealership]:
        """Import a file or directory of CSV files (blocking)."""
        return asyncio.run(self._async_importer.import_path(path, suffix))
