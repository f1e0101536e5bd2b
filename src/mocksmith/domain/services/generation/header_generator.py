#!/usr/bin/env python3

"""Assembly of complete mock header files.

A mock header includes the headers the mocked classes come from and gMock,
followed by the mocks themselves.
"""

from collections.abc import Sequence
from pathlib import Path

from ....infrastructure.logging import get_logger
from ....utils.path_utils import header_path
from ...models.mock import Mock, MockHeader

logger = get_logger(__name__)

GENERATED_FILE_MARKER = "// Automatically generated by mocksmith. Do not edit!"
GMOCK_INCLUDE = "#include <gmock/gmock.h>"

# MSVC warns (C4996) when overriding methods marked [[deprecated]]
MSVC_DISABLE_DEPRECATED = [
    "#ifdef _MSC_VER",
    "#  pragma warning(push)",
    "#  pragma warning(disable : 4996)",
    "#endif",
    "",
]
MSVC_RESTORE_DEPRECATED = [
    "#ifdef _MSC_VER",
    "#  pragma warning(pop)",
    "#endif",
]


class HeaderGenerator:
    """Combines generated mocks into a header file."""

    def __init__(
        self,
        include_paths: Sequence[Path] = (),
        msvc_allow_overriding_deprecated_methods: bool = False,
    ) -> None:
        """Initialize header generator.

        Args:
            include_paths: Include directories used to compute include directives
            msvc_allow_overriding_deprecated_methods: Wrap the mocks in pragmas
                disabling MSVC deprecation warnings
        """
        self.include_paths = list(include_paths)
        self.msvc_allow_overriding_deprecated_methods = msvc_allow_overriding_deprecated_methods

    def generate_header(self, source_files: Sequence[Path], mocks: Sequence[Mock]) -> MockHeader:
        """Generate a header with all mocks.

        Args:
            source_files: Headers declaring the mocked classes
            mocks: Mocks in the order they should appear

        Returns:
            MockHeader with the complete header text
        """
        lines = [
            GENERATED_FILE_MARKER,
            "#pragma once",
            "",
        ]
        lines.extend(f'#include "{include}"' for include in self.source_includes(source_files))
        lines.extend([GMOCK_INCLUDE, ""])

        if self.msvc_allow_overriding_deprecated_methods:
            lines.extend(MSVC_DISABLE_DEPRECATED)

        code = "\n".join(lines) + "\n" + "\n".join(mock.code for mock in mocks)

        if self.msvc_allow_overriding_deprecated_methods:
            code += "\n".join(MSVC_RESTORE_DEPRECATED) + "\n"

        logger.debug(f"Generated header with {len(mocks)} mocks from {len(source_files)} files")
        return MockHeader(
            code=code,
            source_files=tuple(source_files),
            mock_names=tuple(mock.mock_name for mock in mocks),
        )

    def source_includes(self, source_files: Sequence[Path]) -> list[str]:
        """Include paths for the source files, without duplicates."""
        includes: list[str] = []
        for source_file in source_files:
            include = header_path(source_file, self.include_paths)
            if include not in includes:
                includes.append(include)
        return includes
