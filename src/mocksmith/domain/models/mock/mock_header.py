#!/usr/bin/env python3

"""Generated mock and mock header models."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Mock:
    """Rendered mock for a single class."""

    class_name: str
    mock_name: str
    code: str
    source_file: Path | None = None


@dataclass(frozen=True)
class MockHeader:
    """A complete header file with one or more mocks."""

    code: str
    source_files: tuple[Path, ...] = field(default_factory=tuple)
    mock_names: tuple[str, ...] = field(default_factory=tuple)
