#!/usr/bin/env python3

"""Application layer for mock generation."""

from .mocksmith import Mocksmith
from .options import GeneratorOptions

__all__ = ["GeneratorOptions", "Mocksmith"]
