#!/usr/bin/env python3

"""Errors raised while creating mocks."""

from pathlib import Path


class MocksmithError(Exception):
    """Base class for all mocksmith errors."""


class ParserBusyError(MocksmithError):
    """The C++ parser is already in use by another Mocksmith instance."""

    def __init__(self) -> None:
        super().__init__("Clang parser is already in use by another Mocksmith instance")


class ParserPoisonedError(MocksmithError):
    """A previous holder of the C++ parser failed while using it."""

    def __init__(self) -> None:
        super().__init__("Clang parser was left in a failed state by a previous user")


class ClangError(MocksmithError):
    """libclang could not be loaded or initialized."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Clang error: {message}")
        self.message = message


class ParseError(MocksmithError):
    """Parsing a translation unit failed.

    Attributes:
        message: Diagnostic text reported by the parser
        file: File the error was found in, None when parsing a string
        line: 1-based line of the error, 0 if unknown
        column: 1-based column of the error, 0 if unknown
    """

    def __init__(
        self, message: str, file: Path | None = None, line: int = 0, column: int = 0
    ) -> None:
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.file is not None:
            return f"Parse error: {self.file}:{self.line}:{self.column}: {self.message}"
        if self.line:
            return f"Parse error: {self.line}:{self.column}: {self.message}"
        return f"Parse error: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.message, self.file, self.line, self.column) == (
            other.message,
            other.file,
            other.line,
            other.column,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.file, self.line, self.column))


class InvalidSedReplacementError(MocksmithError, ValueError):
    """A sed style replacement string could not be used for naming."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid sed style replacement string: {message}")
        self.message = message


class NothingToMockError(MocksmithError):
    """No class in the parsed files had any method to mock."""

    def __init__(self, source_files: list[Path]) -> None:
        files = ", ".join(str(path) for path in source_files)
        super().__init__(f"No mockable classes found in {files}")
        self.source_files = source_files
