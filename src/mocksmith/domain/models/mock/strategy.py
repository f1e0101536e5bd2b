#!/usr/bin/env python3

"""Strategy deciding which methods of a class get mocked."""

from enum import Enum

from .method_model import MethodModel


class MethodsToMockStrategy(Enum):
    """Which methods to mock.

    ALL mocks every non-static method, ALL_VIRTUAL every virtual method (pure or
    not) and ONLY_PURE_VIRTUAL only the pure virtual ones.
    """

    ALL = "all"
    ALL_VIRTUAL = "virtual"
    ONLY_PURE_VIRTUAL = "pure"

    def should_mock(self, method: MethodModel) -> bool:
        if self is MethodsToMockStrategy.ALL:
            return not method.is_static
        if self is MethodsToMockStrategy.ALL_VIRTUAL:
            return method.is_virtual or method.is_pure_virtual
        return method.is_pure_virtual

    @classmethod
    def from_name(cls, name: str) -> "MethodsToMockStrategy":
        """Look up a strategy by its command line name ("all", "virtual", "pure")."""
        for strategy in cls:
            if strategy.value == name.lower():
                return strategy
        valid = ", ".join(strategy.value for strategy in cls)
        raise ValueError(f"Unknown method strategy '{name}', expected one of: {valid}")
