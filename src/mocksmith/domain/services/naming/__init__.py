#!/usr/bin/env python3

"""Naming of mocks and mock header files."""

from .mock_namer import (
    DefaultNamer,
    FunctionNamer,
    MockNamer,
    SedReplacement,
    default_name_mock,
    default_name_output_file,
)

__all__ = [
    "DefaultNamer",
    "FunctionNamer",
    "MockNamer",
    "SedReplacement",
    "default_name_mock",
    "default_name_output_file",
]
