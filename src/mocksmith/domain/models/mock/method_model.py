#!/usr/bin/env python3

"""Method model for mocked methods."""

from dataclasses import dataclass, field

from ..entity import RefQualifier
from .argument import Argument


@dataclass(frozen=True)
class MethodModel:
    """A method of a class to mock, ready for rendering."""

    name: str
    result_type: str
    arguments: tuple[Argument, ...] = field(default_factory=tuple)
    is_const: bool = False
    is_virtual: bool = False
    is_pure_virtual: bool = False
    is_static: bool = False
    is_noexcept: bool = False
    ref_qualifier: RefQualifier | None = None
