#!/usr/bin/env python3

"""Naming of mock classes and generated mock header files.

Two strategies are built in: a heuristic that strips common interface
prefixes/suffixes, and sed style regex replacements such as
``s/Ifc(.*)/Mock\\1/``. Any callable can be plugged in through FunctionNamer.
"""

import re
from collections.abc import Callable
from typing import Protocol

from ....infrastructure.logging import get_logger
from ...exceptions import InvalidSedReplacementError
from ...models.mock import MockHeader

logger = get_logger(__name__)

MOCK_PREFIX = "Mock"

# Checked in order, the first match is stripped
_INTERFACE_SUFFIXES = ("Interface", "Ifc")
_INTERFACE_PREFIXES = ("Interface", "Ifc")


class MockNamer(Protocol):
    """Derives a name from a class name (or a file name)."""

    def name(self, class_name: str) -> str: ...


def default_name_mock(class_name: str) -> str:
    """Name a mock by stripping interface markers and prepending "Mock".

    Strips, in priority order, a trailing "Interface", a trailing "Ifc", a
    leading "Interface", a leading "Ifc" or a leading "I" followed by an
    uppercase letter. Names that match none of these are prefixed unchanged.

    Args:
        class_name: Name of the class to mock

    Returns:
        Name of the mock class
    """
    for suffix in _INTERFACE_SUFFIXES:
        if class_name.endswith(suffix):
            return MOCK_PREFIX + class_name[: -len(suffix)]
    for prefix in _INTERFACE_PREFIXES:
        if class_name.startswith(prefix):
            return MOCK_PREFIX + class_name[len(prefix) :]
    if len(class_name) > 1 and class_name[0] == "I" and class_name[1].isupper():
        return MOCK_PREFIX + class_name[1:]
    return MOCK_PREFIX + class_name


def default_name_output_file(header: MockHeader) -> str:
    """Name the file a mock header is written to.

    A header with a single mock is named after the mock, otherwise after the
    source header it was generated from.
    """
    if len(header.mock_names) == 1:
        return f"{header.mock_names[0]}.h"
    if header.source_files:
        return f"{header.source_files[0].stem}_mocks.h"
    return "mocks.h"


class DefaultNamer:
    """MockNamer using the default_name_mock() heuristic."""

    def name(self, class_name: str) -> str:
        return default_name_mock(class_name)


class FunctionNamer:
    """MockNamer delegating to an arbitrary function."""

    def __init__(self, function: Callable[[str], str]):
        self.function = function

    def name(self, class_name: str) -> str:
        return self.function(class_name)


class SedReplacement:
    """Names mocks with a sed style regex replacement.

    The regex must match the whole class name. Captured groups are inserted
    into the replacement with ``\\1`` to ``\\N``. Names that do not match are
    prefixed with "Mock".
    """

    _BACKREFERENCE = re.compile(r"\\(\d+)")

    def __init__(self, regex: str, name_pattern: str):
        """Initialize from an already split regex and replacement.

        Raises:
            InvalidSedReplacementError: If the regex does not compile
        """
        try:
            self.regex = re.compile(regex)
        except re.error as e:
            raise InvalidSedReplacementError(
                f"Invalid regex for name replacement: {e}"
            ) from e
        self.name_pattern = name_pattern

    @classmethod
    def from_sed_replacement(cls, sed_replacement: str) -> "SedReplacement":
        """Create a namer from a string like ``s/Ifc(.*)/Mock\\1/``.

        Raises:
            InvalidSedReplacementError: If the string is not of the form
                s/<regex>/<replacement>/ or the regex is invalid
        """
        parts = sed_replacement.split("/")
        if not sed_replacement.endswith("/") or len(parts) != 4 or parts[0] != "s":
            raise InvalidSedReplacementError(
                f"Got {sed_replacement}, but expected s/<regex>/<replacement>/"
            )
        return cls(parts[1], parts[2])

    def name(self, class_name: str) -> str:
        match = self.regex.fullmatch(class_name)
        if match is None:
            logger.debug(f"'{class_name}' does not match {self.regex.pattern}, using default prefix")
            return MOCK_PREFIX + class_name

        def group(reference: re.Match[str]) -> str:
            index = int(reference.group(1))
            if index > len(match.groups()):
                return reference.group(0)
            return match.group(index) or ""

        return self._BACKREFERENCE.sub(group, self.name_pattern)
