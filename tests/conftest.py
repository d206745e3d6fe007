"""Shared pytest fixtures for fsseam tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fsseam.core.io import AbsolutePath, FakeFileSystem, absolute_path


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def real_root(tmp_path: Path) -> AbsolutePath:
    """Temporary directory as an AbsolutePath for real filesystem tests."""
    return absolute_path(tmp_path)


# ============================================================================
# Dealership Data Fixtures
# ============================================================================

DEALERSHIP_LINES = [
    "Acme Motors,100 Main St,Springfield,IL,62701,217-555-0100",
    "Bayside Auto,22 Harbor Rd,Monterey,CA,93940,831-555-0122",
    'Capital Cars,"1 Capitol Way, Suite 4",Olympia,WA,98501,360-555-0190',
    "Delta Trucks,9 Levee Dr,Memphis,TN,38103,901-555-0144",
    "Evergreen Autos,500 Pine Ave,Portland,OR,97205,503-555-0175",
]


@pytest.fixture
def dealership_lines() -> list[str]:
    """Five well-formed dealership CSV lines."""
    return list(DEALERSHIP_LINES)


@pytest.fixture
def dealership_csv(dealership_lines: list[str]) -> str:
    """Dealership CSV content with a trailing newline."""
    return "\n".join(dealership_lines) + "\n"


@pytest.fixture
def dealers_path() -> AbsolutePath:
    """Path of the seeded dealership file in the fake filesystem."""
    return absolute_path("/data/dealers.csv")


@pytest.fixture
def seeded_fs(dealers_path: AbsolutePath, dealership_csv: str) -> FakeFileSystem:
    """Fresh FakeFileSystem seeded with one dealership file."""
    return FakeFileSystem({str(dealers_path): dealership_csv})
