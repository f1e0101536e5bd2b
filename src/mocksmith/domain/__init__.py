#!/usr/bin/env python3

"""Domain layer containing business logic and models."""

from . import exceptions, models, services

__all__ = [
    "exceptions",
    "models",
    "services",
]
