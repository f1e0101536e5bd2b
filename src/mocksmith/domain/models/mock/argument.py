#!/usr/bin/env python3

"""Argument model for mocked methods."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Argument:
    """A method argument."""

    type_name: str
    name: str | None = None
