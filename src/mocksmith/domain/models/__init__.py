#!/usr/bin/env python3

"""Domain models for mocksmith."""

from . import mock
from .entity import Entity, EntityKind, RefQualifier

__all__ = [
    "Entity",
    "EntityKind",
    "RefQualifier",
    "mock",
]
