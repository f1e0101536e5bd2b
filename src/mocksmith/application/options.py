#!/usr/bin/env python3

"""Options controlling how mocks are generated."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ..domain.models.mock import MethodsToMockStrategy
from ..domain.services.naming import DefaultNamer, MockNamer
from ..infrastructure.config import get_config, uses_simplified_namespaces


@dataclass(frozen=True)
class GeneratorOptions:
    """Everything a Mocksmith instance needs to parse headers and render mocks."""

    include_paths: tuple[Path, ...] = ()
    methods_to_mock: MethodsToMockStrategy = MethodsToMockStrategy.ALL_VIRTUAL
    ignore_errors: bool = False
    cpp_standard: str | None = None
    clang_args: tuple[str, ...] = ()
    parse_function_bodies: bool = False
    indent_str: str = "  "
    simplified_nested_namespaces: bool = True
    msvc_allow_overriding_deprecated_methods: bool = False
    class_filter: str | None = None
    namer: MockNamer = field(default_factory=DefaultNamer)

    @classmethod
    def from_config(cls, **overrides: Any) -> "GeneratorOptions":
        """Create options from get_config() defaults, replacing the given fields.

        Unless overridden explicitly, the namespace style follows the C++
        standard in effect.

        Raises:
            ValueError: If the configured method strategy is unknown
        """
        config = get_config()
        options = cls(
            methods_to_mock=MethodsToMockStrategy.from_name(config["METHODS_TO_MOCK"]),
            ignore_errors=config["IGNORE_ERRORS"],
            cpp_standard=config["CPP_STANDARD"],
            parse_function_bodies=config["PARSE_FUNCTION_BODIES"],
            indent_str=config["INDENT"],
        )
        options = replace(options, **overrides)
        if "simplified_nested_namespaces" not in overrides:
            options = replace(
                options,
                simplified_nested_namespaces=uses_simplified_namespaces(options.cpp_standard),
            )
        return options
