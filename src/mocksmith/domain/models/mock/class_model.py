#!/usr/bin/env python3

"""Class model for classes to mock."""

from dataclasses import dataclass, field

from .method_model import MethodModel


@dataclass(frozen=True)
class ClassModel:
    """A class to mock.

    ``namespaces`` lists the enclosing namespaces, outermost first.
    ``methods`` only holds the methods selected for mocking, in declaration order.
    """

    name: str
    namespaces: tuple[str, ...] = field(default_factory=tuple)
    methods: tuple[MethodModel, ...] = field(default_factory=tuple)
