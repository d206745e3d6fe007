"""Models for the filesystem abstraction layer.

Provides the type-safe path wrapper and operation result types shared by
every FileSystem implementation.
"""

from pathlib import Path
from typing import NewType, TypeAlias

from pydantic import BaseModel, Field

# Type-safe path wrapper
AbsolutePath = NewType("AbsolutePath", Path)

# Content a file may hold (the fake stores either form as seeded)
FileContent: TypeAlias = str | bytes


def absolute_path(path: str | Path) -> AbsolutePath:
    """
    Validate and construct an absolute path.

    Args:
        path: String or Path object

    Returns:
        AbsolutePath instance

    Raises:
        ValueError: If path is not absolute

    Example:
        >>> p = absolute_path("/data/dealers.csv")
        >>> assert Path(p).is_absolute()
    """
    p = Path(path).resolve()
    if not p.is_absolute():
        raise ValueError(f"Path must be absolute: {path}")
    return AbsolutePath(p)


class WriteResult(BaseModel):
    """Result of a filesystem write operation.

    Attributes:
        path: Final path written
        bytes_written: Number of bytes written
        duration_ms: Operation duration in milliseconds
    """

    path: str = Field(description="Final path written")
    bytes_written: int = Field(description="Number of bytes written", ge=0)
    duration_ms: float = Field(description="Operation duration in milliseconds", ge=0.0)
