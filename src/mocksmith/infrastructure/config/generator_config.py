#!/usr/bin/env python3

"""Default settings for mock generation."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Output formatting
    "INDENT": "  ",

    # Parsing
    "CPP_STANDARD": "c++17",
    "IGNORE_ERRORS": False,
    "PARSE_FUNCTION_BODIES": False,

    # Method selection: "all", "virtual" or "pure"
    "METHODS_TO_MOCK": "virtual",
}

# Standards supporting nested namespace definitions (namespace A::B {)
SIMPLIFIED_NAMESPACE_STANDARDS = (
    "c++17", "c++20", "c++23", "c++2c",
    "gnu++17", "gnu++20", "gnu++23", "gnu++2c",
)

SUPPORTED_STANDARDS = (
    "c++98", "c++03", "c++11", "c++14", "c++17", "c++20", "c++23", "c++2c",
    "gnu++98", "gnu++03", "gnu++11", "gnu++14", "gnu++17", "gnu++20", "gnu++23", "gnu++2c",
)


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden with a MOCKSMITH_<KEY> environment variable.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"MOCKSMITH_{key}")
        if env_value is not None:
            # Convert to appropriate type
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            else:
                config[key] = env_value

    return config


def uses_simplified_namespaces(cpp_standard: str | None) -> bool:
    """Whether mocks for this C++ standard may use ``namespace A::B {``."""
    if cpp_standard is None:
        return True
    return cpp_standard in SIMPLIFIED_NAMESPACE_STANDARDS
