#!/usr/bin/env python3

"""Declaration tree interface consumed by the model builder.

The C++ front-end exposes parsed declarations as a tree of entities. Only the
handful of entity kinds that matter for mocking are distinguished; every other
parser kind maps to ``EntityKind.OTHER`` and is ignored.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol


class EntityKind(Enum):
    """Entity kinds the model builder acts on."""

    CLASS_DECLARATION = "class"
    NAMESPACE = "namespace"
    METHOD = "method"
    ARGUMENT = "argument"
    OTHER = "other"


class RefQualifier(Enum):
    """Ref-qualifier of a non-static member function."""

    LVALUE = "&"
    RVALUE = "&&"


class Entity(Protocol):
    """A parsed declaration as seen by the model builder.

    Offsets are byte offsets into the contents of the file the entity is
    declared in.
    """

    @property
    def kind(self) -> EntityKind: ...

    @property
    def name(self) -> str | None: ...

    def children(self) -> Sequence[Entity]: ...

    def is_definition(self) -> bool: ...

    def is_in_main_file(self) -> bool: ...

    def is_const_method(self) -> bool: ...

    def is_virtual_method(self) -> bool: ...

    def is_pure_virtual_method(self) -> bool: ...

    def is_static_method(self) -> bool: ...

    def is_noexcept(self) -> bool: ...

    def ref_qualifier(self) -> RefQualifier | None: ...

    def result_type_name(self) -> str | None:
        """Parser display name of a method's return type."""
        ...

    def type_name(self) -> str | None:
        """Parser display name of the entity's own type."""
        ...

    def arguments(self) -> Sequence[Entity]: ...

    def extent(self) -> tuple[int, int] | None:
        """Start and end offsets of the whole declaration."""
        ...

    def location_offset(self) -> int | None:
        """Offset of the entity's location (its name, or where the name would be)."""
        ...

    def file_contents(self) -> bytes | None: ...
