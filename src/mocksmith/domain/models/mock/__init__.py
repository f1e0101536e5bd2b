#!/usr/bin/env python3

"""Mock domain models."""

from .argument import Argument
from .class_model import ClassModel
from .method_model import MethodModel
from .mock_header import Mock, MockHeader
from .strategy import MethodsToMockStrategy

__all__ = [
    "Argument",
    "ClassModel",
    "MethodModel",
    "MethodsToMockStrategy",
    "Mock",
    "MockHeader",
]
