"""Infrastructure configuration module."""

from .application_config import Config
from .generator_config import (
    SUPPORTED_STANDARDS,
    get_config,
    uses_simplified_namespaces,
)

__all__ = ["Config", "SUPPORTED_STANDARDS", "get_config", "uses_simplified_namespaces"]
