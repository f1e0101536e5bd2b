#!/usr/bin/env python3

"""Syntactic inspection of method declarations taken from source text.

The parser's semantic flags are unreliable when a declaration refers to types
it could not resolve, e.g. a method with an unknown return type is not
reported as virtual. The source text of the declaration is used as a second
opinion.
"""

import re
from dataclasses import dataclass

_BODY_START = re.compile(r"[;{]")
_LINE_BREAK = re.compile(r"\s*\n\s*")
_ATTRIBUTE = re.compile(r"\[\[.*?\]\]")
_DECL_SPECIFIER = re.compile(
    r"\b(?:virtual|static|inline|constexpr|consteval|explicit|friend)\b"
)


def strip_body(declaration: str) -> str:
    """Cut a declaration at the first ';' or '{' to drop bodies and trailing text."""
    return _BODY_START.split(declaration, maxsplit=1)[0]


def collapse_line_breaks(text: str) -> str:
    """Join a multi-line spelling into a single line."""
    return _LINE_BREAK.sub(" ", text)


@dataclass(frozen=True)
class MethodSignature:
    """Qualifiers found in the source text of a method declaration."""

    is_virtual: bool
    is_pure_virtual: bool
    is_static: bool

    @classmethod
    def parse_declaration(cls, declaration: str) -> "MethodSignature | None":
        """Scan a declaration for virtual, override, static and "= 0".

        Args:
            declaration: Source text of the method declaration

        Returns:
            MethodSignature, or None if the text has no argument list
        """
        signature = strip_body(declaration)
        head, open_paren, _ = signature.partition("(")
        _, close_paren, tail = signature.rpartition(")")
        if not open_paren or not close_paren:
            return None

        pre_parts = head.split()
        post_parts = tail.split()

        is_virtual = "virtual" in pre_parts or "override" in post_parts
        is_pure_virtual = is_virtual and (
            "=0" in post_parts
            or any(
                first == "=" and second == "0"
                for first, second in zip(post_parts, post_parts[1:])
            )
        )
        return cls(
            is_virtual=is_virtual,
            is_pure_virtual=is_pure_virtual,
            is_static="static" in pre_parts,
        )


def result_type_from_declaration(declaration: str, method_name: str) -> str | None:
    """Extract the return type spelling written before the method name.

    Declaration specifiers and attributes are removed. Returns None when
    nothing usable is found, including for trailing return types (``auto``).
    """
    if not method_name:
        return None
    signature = strip_body(declaration)
    name_match = re.search(rf"(?<![\w:~]){re.escape(method_name)}\s*\(", signature)
    if name_match is None:
        return None

    head = _ATTRIBUTE.sub(" ", signature[: name_match.start()])
    head = _DECL_SPECIFIER.sub(" ", head)
    # Removed specifiers leave runs of blanks behind
    result_type = re.sub(r"\s{2,}", " ", collapse_line_breaks(head)).strip()
    if not result_type or result_type == "auto":
        return None
    return result_type
