"""mocksmith - gMock mock generation from C++ headers."""

from .application import GeneratorOptions, Mocksmith
from .domain.exceptions import MocksmithError
from .domain.models.mock import MethodsToMockStrategy, Mock, MockHeader
from .main import main

__all__ = [
    "GeneratorOptions",
    "MethodsToMockStrategy",
    "Mock",
    "MockHeader",
    "Mocksmith",
    "MocksmithError",
    "main",
]
