#!/usr/bin/env python3

"""Mock generation facade (Application Layer).

Ties together the modular components:
- ClangSession: Parsing headers with libclang
- ModelBuilder: Finding the classes and methods to mock
- MockNamer: Naming the mocks
- MockGenerator / HeaderGenerator: Rendering mocks and mock headers
"""

from collections.abc import Sequence
from pathlib import Path
from types import TracebackType

from ..domain.exceptions import MocksmithError, NothingToMockError
from ..domain.models import Entity
from ..domain.models.mock import Mock, MockHeader
from ..domain.services.generation import HeaderGenerator, MockGenerator
from ..domain.services.parsing import ModelBuilder
from ..infrastructure.clang import ClangSession, ParserGuard
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing
from .options import GeneratorOptions

logger = get_logger(__name__)


class Mocksmith:
    """Creates gMock mocks from C++ headers.

    Only one instance can use the parser at a time, so an instance must be
    entered as a context manager before generating mocks:

        with Mocksmith(GeneratorOptions(include_paths=(Path("include"),))) as mocksmith:
            header = mocksmith.create_mock_header_for_files([Path("include/foo.h")])
    """

    def __init__(self, options: GeneratorOptions | None = None, blocking: bool = False):
        """Initialize mocksmith.

        Args:
            options: Generation options (defaults from GeneratorOptions.from_config())
            blocking: Wait for the parser if another instance is using it,
                instead of failing with ParserBusyError
        """
        self.options = options if options is not None else GeneratorOptions.from_config()
        self.blocking = blocking
        self.guard: ParserGuard | None = None
        self.session: ClangSession | None = None
        self.mock_generator = MockGenerator(
            indent_str=self.options.indent_str,
            simplified_nested_namespaces=self.options.simplified_nested_namespaces,
        )
        self.header_generator = HeaderGenerator(
            include_paths=self.options.include_paths,
            msvc_allow_overriding_deprecated_methods=self.options.msvc_allow_overriding_deprecated_methods,
        )
        self.progress = ProgressTracker(logger)

    def __enter__(self) -> "Mocksmith":
        """Acquire the parser and load libclang.

        Raises:
            ParserBusyError: If not blocking and the parser is in use
            ParserPoisonedError: If not blocking and a previous user failed
            ClangError: If libclang cannot be loaded
        """
        self.guard = ParserGuard.acquire(blocking=self.blocking)
        try:
            self.session = ClangSession(
                self.guard,
                ignore_errors=self.options.ignore_errors,
                cpp_standard=self.options.cpp_standard,
                additional_clang_args=self.options.clang_args,
                parse_function_bodies=self.options.parse_function_bodies,
            )
        except MocksmithError:
            self.guard.release()
            self.guard = None
            raise
        self.progress.reset()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Release the parser, marking it as failed on unexpected exceptions."""
        self.progress.report_summary()
        self.session = None
        if self.guard is not None:
            failed = exc_type is not None and not issubclass(exc_type, MocksmithError)
            self.guard.release(failed=failed)
            self.guard = None

    @log_timing
    def create_mocks_from_string(self, content: str) -> list[Mock]:
        """Create mocks for the classes declared in a string of C++ code.

        Raises:
            ParseError: If the code has errors and errors are not ignored
        """
        session = self._session()
        with self.progress.track_translation_unit(None):
            root = session.parse_string(self.options.include_paths, content)
            return self._create_mocks(root, None)

    @log_timing
    def create_mocks_for_file(self, file: Path) -> list[Mock]:
        """Create mocks for the classes declared in a header file.

        Raises:
            ParseError: If the file cannot be parsed or has errors and errors
                are not ignored
        """
        session = self._session()
        with self.progress.track_translation_unit(file):
            root = session.parse_file(self.options.include_paths, file)
            return self._create_mocks(root, file)

    @log_timing
    def create_mock_header_for_files(self, files: Sequence[Path]) -> MockHeader:
        """Create a header with the mocks of all classes declared in the files.

        Raises:
            ParseError: If a file cannot be parsed
            NothingToMockError: If no file declares a class with methods to mock
        """
        mocks: list[Mock] = []
        for file in files:
            mocks.extend(self.create_mocks_for_file(file))
        if not mocks:
            raise NothingToMockError(list(files))
        return self.header_generator.generate_header(files, mocks)

    def _create_mocks(self, root: Entity, source_file: Path | None) -> list[Mock]:
        # One builder per translation unit since it caches the file contents
        builder = ModelBuilder(self.options.methods_to_mock, self.options.class_filter)
        mocks = []
        for class_model in builder.classes_in_tree(root):
            mock_name = self.options.namer.name(class_model.name)
            logger.debug(f"Mocking {class_model.name} as {mock_name}")
            mocks.append(
                Mock(
                    class_name=class_model.name,
                    mock_name=mock_name,
                    code=self.mock_generator.generate_mock(class_model, mock_name),
                    source_file=source_file,
                )
            )
            self.progress.count_class(len(class_model.methods))
        return mocks

    def _session(self) -> ClangSession:
        if self.session is None:
            raise RuntimeError("Mocksmith must be used as a context manager")
        return self.session
