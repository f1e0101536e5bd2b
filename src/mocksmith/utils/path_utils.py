"""Path utilities for cross-platform file operations."""

from collections.abc import Sequence
from pathlib import Path

from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


def canonicalize(path: Path) -> Path:
    """Resolve a path, returning it unchanged if it cannot be resolved."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path


def header_path(header: Path, include_paths: Sequence[Path]) -> str:
    """Find the path to use when including a header.

    Among the include paths containing the header, the one giving the shortest
    relative path wins. If none contains it, the header path is used as given.

    Args:
        header: Path to the header file
        include_paths: Include directories to search

    Returns:
        Include path with forward slashes
    """
    canonic_header = canonicalize(header)

    best_match: Path | None = None
    for include_path in include_paths:
        canonic_include_path = canonicalize(include_path)
        try:
            relative = canonic_header.relative_to(canonic_include_path)
        except ValueError:
            continue
        if best_match is None or len(relative.parts) < len(best_match.parts):
            best_match = relative

    result = best_match if best_match is not None else header
    return result.as_posix().replace("\\", "/")


def maybe_write_file(file: Path, content: str, always_write: bool = False) -> bool:
    """Write content to a file unless the file already holds exactly that content.

    Args:
        file: File to write
        content: New file content
        always_write: Write even if the content is unchanged

    Returns:
        True if the file was written
    """
    if not always_write:
        try:
            if file.read_text(encoding="utf-8") == content:
                logger.debug(f"{file} is up to date")
                return False
        except (OSError, UnicodeDecodeError):
            pass

    file.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {file}")
    return True
