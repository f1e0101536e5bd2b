#!/usr/bin/env python3

"""libclang front-end for parsing C++ headers."""

from .clang_entity import ClangEntity, SourceFiles
from .clang_session import DUMMY_FILE, ClangSession
from .parser_guard import ParserGuard

__all__ = [
    "ClangEntity",
    "ClangSession",
    "DUMMY_FILE",
    "ParserGuard",
    "SourceFiles",
]
