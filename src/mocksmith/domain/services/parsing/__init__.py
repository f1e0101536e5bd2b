#!/usr/bin/env python3

"""Parsing services turning declaration trees into mock models."""

from .method_signature import MethodSignature
from .model_builder import ModelBuilder
from .model_factory import ModelFactory

__all__ = [
    "MethodSignature",
    "ModelBuilder",
    "ModelFactory",
]
