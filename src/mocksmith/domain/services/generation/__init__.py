#!/usr/bin/env python3

"""Generation services for mock classes and mock headers."""

from .header_generator import HeaderGenerator
from .mock_generator import MockGenerator

__all__ = [
    "HeaderGenerator",
    "MockGenerator",
]
