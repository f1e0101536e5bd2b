#!/usr/bin/env python3

"""Domain services layer."""

from . import generation, naming, parsing

__all__ = [
    "generation",
    "naming",
    "parsing",
]
