#!/usr/bin/env python3

"""Parsing of C++ headers with libclang."""

from collections.abc import Sequence
from pathlib import Path

from clang import cindex

from ...domain.exceptions import ClangError, ParseError
from ..logging import get_logger, log_timing
from .clang_entity import ClangEntity, SourceFiles
from .parser_guard import ParserGuard

logger = get_logger(__name__)

# File name used when parsing strings
DUMMY_FILE = "mocksmith_dummy_input_file.h"

DEFAULT_CPP_STANDARD = "c++17"


class ClangSession:
    """Parses translation units while holding the parser guard.

    Diagnostics of error severity abort parsing with a ParseError unless
    errors are ignored, in which case they are only logged.
    """

    def __init__(
        self,
        guard: ParserGuard,
        ignore_errors: bool = False,
        cpp_standard: str | None = None,
        additional_clang_args: Sequence[str] = (),
        parse_function_bodies: bool = False,
    ) -> None:
        """Initialize session and load libclang.

        Args:
            guard: Held parser guard
            ignore_errors: Log parse errors instead of failing
            cpp_standard: C++ standard to parse with (default c++17)
            additional_clang_args: Extra arguments passed to clang
            parse_function_bodies: Parse inline function bodies (slower)

        Raises:
            ClangError: If libclang cannot be loaded
        """
        if not guard.held:
            raise RuntimeError("Parser guard must be held to create a clang session")
        self.guard = guard
        self.ignore_errors = ignore_errors
        self.cpp_standard = cpp_standard
        self.additional_clang_args = list(additional_clang_args)
        self.parse_function_bodies = parse_function_bodies

        try:
            self.index = cindex.Index.create()
        except cindex.LibclangError as e:
            raise ClangError(str(e)) from e
        logger.debug(f"libclang loaded, parsing with -std={self.cpp_standard or DEFAULT_CPP_STANDARD}")

    @log_timing
    def parse_file(self, include_paths: Sequence[Path], file: Path) -> ClangEntity:
        """Parse a header file.

        Returns:
            Root entity of the translation unit

        Raises:
            ParseError: If parsing fails or reports errors
        """
        translation_unit = self._parse(str(file), include_paths, None, file)
        return ClangEntity(translation_unit.cursor, SourceFiles(translation_unit))

    @log_timing
    def parse_string(self, include_paths: Sequence[Path], content: str) -> ClangEntity:
        """Parse C++ code held in a string.

        Returns:
            Root entity of the translation unit

        Raises:
            ParseError: If parsing fails or reports errors
        """
        unsaved_files = {DUMMY_FILE: content}
        translation_unit = self._parse(DUMMY_FILE, include_paths, unsaved_files, None)
        return ClangEntity(translation_unit.cursor, SourceFiles(translation_unit, unsaved_files))

    def clang_arguments(self, include_paths: Sequence[Path]) -> list[str]:
        arguments = [
            "-x",
            "c++",
            f"-std={self.cpp_standard or DEFAULT_CPP_STANDARD}",
            # Headers are parsed as main files
            "-Wno-pragma-once-outside-header",
        ]
        if include_paths:
            arguments.extend(f"-I{path}" for path in include_paths)
        else:
            arguments.append("-I.")
        arguments.extend(self.additional_clang_args)
        return arguments

    def _parse(
        self,
        path: str,
        include_paths: Sequence[Path],
        unsaved_files: dict[str, str] | None,
        file: Path | None,
    ) -> cindex.TranslationUnit:
        options = 0
        if not self.parse_function_bodies:
            options |= cindex.TranslationUnit.PARSE_SKIP_FUNCTION_BODIES

        arguments = self.clang_arguments(include_paths)
        logger.debug(f"Parsing {file if file is not None else 'string'} with {' '.join(arguments)}")
        try:
            translation_unit = self.index.parse(
                path,
                args=arguments,
                unsaved_files=list(unsaved_files.items()) if unsaved_files else None,
                options=options,
            )
        except cindex.TranslationUnitLoadError as e:
            raise ParseError(str(e), file) from e

        self.check_diagnostics(translation_unit)
        return translation_unit

    def check_diagnostics(self, translation_unit: cindex.TranslationUnit) -> None:
        """Log diagnostics and raise for the first error unless errors are ignored."""
        errors = []
        for diagnostic in translation_unit.diagnostics:
            is_error = diagnostic.severity >= cindex.Diagnostic.Error
            if is_error:
                errors.append(diagnostic)
            if self.ignore_errors and is_error:
                logger.info(self._format(diagnostic))
            else:
                logger.debug(self._format(diagnostic))

        if errors and not self.ignore_errors:
            diagnostic = errors[0]
            location = diagnostic.location
            raise ParseError(
                diagnostic.spelling,
                self._reported_file(location),
                location.line,
                location.column,
            )

    @classmethod
    def _format(cls, diagnostic: cindex.Diagnostic) -> str:
        location = diagnostic.location
        file = cls._reported_file(location)
        prefix = f"{file}:" if file is not None else ""
        return f"{prefix}{location.line}:{location.column}: {diagnostic.spelling}"

    @staticmethod
    def _reported_file(location: cindex.SourceLocation) -> Path | None:
        # The dummy file means parsing from a string, don't report its name
        if location.file is None or location.file.name == DUMMY_FILE:
            return None
        return Path(location.file.name)
