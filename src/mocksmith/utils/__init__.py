"""Utility modules for mocksmith."""

from .path_utils import canonicalize, header_path, maybe_write_file

__all__ = ["canonicalize", "header_path", "maybe_write_file"]
