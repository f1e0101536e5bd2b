"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from mocksmith.domain.exceptions import ClangError
from mocksmith.infrastructure.clang import ClangSession, ParserGuard
from mocksmith.infrastructure.logging import LoggerSetup


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def clean_parser_state() -> Generator[None, None, None]:
    """Leave the process-wide parser usable for the next test."""
    yield
    ParserGuard.clear_poison()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Allow a test to initialize logging and restore the previous state afterwards."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture(scope="session")
def libclang_available() -> bool:
    """Whether libclang can be loaded at all."""
    guard = ParserGuard.acquire(blocking=True)
    try:
        ClangSession(guard)
    except ClangError:
        return False
    finally:
        guard.release()
    return True


@pytest.fixture
def requires_libclang(libclang_available: bool) -> None:
    """Skip the test if libclang cannot be loaded."""
    if not libclang_available:
        pytest.skip("libclang is not available")


@pytest.fixture
def header_file(tmp_path: Path):
    """Factory writing C++ code to a header in a temporary include directory."""

    def write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write
