#!/usr/bin/env python3

"""Creation of mock models from declaration tree entities.

Type spellings are taken from the source text whenever possible instead of
from the parser's display names. The parser reports unresolved types (e.g.
when an include is missing) as ``int``, while the source text still holds
what the developer wrote.
"""

from collections.abc import Sequence

from ....infrastructure.logging import get_logger
from ...models.entity import Entity, EntityKind
from ...models.mock import Argument, ClassModel, MethodModel, MethodsToMockStrategy
from .method_signature import MethodSignature, collapse_line_breaks, result_type_from_declaration

logger = get_logger(__name__)

_OPENING = b"(<[{"
_CLOSING = b")>]}"


class ModelFactory:
    """Builds ClassModel and MethodModel objects from entities.

    The contents of the parsed file are read once, from the first entity
    examined, and reused for every declaration of the translation unit.
    """

    def __init__(self) -> None:
        self.file_contents: bytes | None = None

    def class_from_entity(
        self,
        class_entity: Entity,
        namespaces: Sequence[str],
        methods_to_mock: MethodsToMockStrategy,
    ) -> ClassModel:
        """Create a class model holding the methods selected by the strategy.

        Args:
            class_entity: Class definition entity
            namespaces: Enclosing namespace names, outermost first
            methods_to_mock: Strategy selecting methods to include

        Returns:
            ClassModel, possibly without methods
        """
        self._cache_file_contents(class_entity)
        methods = []
        for child in class_entity.children():
            if child.kind is not EntityKind.METHOD:
                continue
            method = self.method_from_entity(child)
            if methods_to_mock.should_mock(method):
                methods.append(method)
            else:
                logger.debug(f"Not mocking {class_entity.name}::{method.name}")

        return ClassModel(
            name=class_entity.name or "",
            namespaces=tuple(namespaces),
            methods=tuple(methods),
        )

    def method_from_entity(self, method: Entity) -> MethodModel:
        """Create a method model, combining parser flags with the source text."""
        self._cache_file_contents(method)
        name = method.name or ""
        declaration = self.extract_method_declaration_from_source(method)
        signature = MethodSignature.parse_declaration(declaration) if declaration else None
        logger.debug(f"Processing method {name}: {declaration!r}")

        result_type = result_type_from_declaration(declaration, name) if declaration else None
        if result_type is None:
            result_type = method.result_type_name() or "void"

        return MethodModel(
            name=name,
            result_type=result_type,
            arguments=tuple(self.argument_from_entity(argument) for argument in method.arguments()),
            is_const=method.is_const_method(),
            is_virtual=method.is_virtual_method()
            or (signature is not None and signature.is_virtual),
            is_pure_virtual=method.is_pure_virtual_method()
            or (signature is not None and signature.is_pure_virtual),
            is_static=method.is_static_method()
            or (signature is not None and signature.is_static),
            is_noexcept=method.is_noexcept(),
            ref_qualifier=method.ref_qualifier(),
        )

    def argument_from_entity(self, argument: Entity) -> Argument:
        """Create an argument model.

        A name inside a declarator, as in ``int values[3]`` or
        ``void (*cb)(int)``, cannot be split from its type. The whole
        declarator is then kept as the type and the argument has no name.
        """
        declarator = self.extract_declarator_from_source(argument)
        if declarator is not None:
            return Argument(type_name=declarator)
        return Argument(type_name=self.get_argument_type(argument), name=argument.name or None)

    def get_argument_type(self, argument: Entity) -> str:
        """Type of an argument, from source if possible, else from the parser."""
        type_name = self.extract_argument_type_from_source(argument)
        if type_name is None:
            type_name = argument.type_name() or ""
        return type_name

    def extract_method_declaration_from_source(self, method: Entity) -> str | None:
        """Source text of the whole method declaration, or None."""
        extent = method.extent()
        if extent is None or self.file_contents is None:
            return None
        start, end = extent
        if start >= end or end > len(self.file_contents):
            logger.debug(f"Illegal declaration range {start}-{end} for method {method.name}")
            return None
        return self._text(start, end)

    def extract_declarator_from_source(self, argument: Entity) -> str | None:
        """Source text of a declarator enclosing the argument name, or None.

        A default value following the declarator is not included.
        """
        if not argument.name or self.file_contents is None:
            return None
        extent = argument.extent()
        location = argument.location_offset()
        if extent is None or location is None:
            return None
        start, end = extent
        name = argument.name.encode("utf-8")
        if start >= end or end > len(self.file_contents):
            return None
        if self.file_contents[end - len(name) : end] == name:
            return None
        if self.file_contents[location : location + len(name)] != name:
            return None
        after_name = location + len(name)
        if self._default_value_follows(after_name, end):
            return None
        declarator_end = self._default_value_start(after_name, end)
        return collapse_line_breaks(self._text(start, declarator_end)) or None

    def extract_argument_type_from_source(self, argument: Entity) -> str | None:
        """Source spelling of an argument type, or None to use the parser's name."""
        argument_range = self._argument_range(argument)
        if argument_range is None or self.file_contents is None:
            logger.debug(
                f"Falling back to clang type extraction for argument {argument.name!r} "
                "due to missing range or file contents"
            )
            return None

        start, end = argument_range
        if start >= end or end > len(self.file_contents):
            logger.debug(
                f"Falling back to clang type extraction for argument {argument.name!r} "
                f"due to illegal file position {start}-{end}"
            )
            return None
        return collapse_line_breaks(self._text(start, end)) or None

    def _argument_range(self, argument: Entity) -> tuple[int, int] | None:
        # The declaration range is only reliable for named arguments. For
        # unnamed ones the location is right after the type, so the start is
        # found by scanning backwards.
        if argument.name:
            extent = argument.extent()
            if extent is None:
                return None
            start, end = extent
            name = argument.name.encode("utf-8")
            name_end = end - len(name)
            if (
                self.file_contents is not None
                and name_end >= 0
                and self.file_contents[name_end:end] != name
            ):
                # Range includes a default value after the name
                location = argument.location_offset()
                if (
                    location is None
                    or self.file_contents[location : location + len(name)] != name
                    or not self._default_value_follows(location + len(name), end)
                ):
                    return None
                name_end = location
            return start, name_end

        location = argument.location_offset()
        if self.file_contents is None or location is None:
            return None
        return self._start_of_argument(location), location

    def _default_value_follows(self, offset: int, end: int) -> bool:
        assert self.file_contents is not None
        return self.file_contents[offset:end].lstrip().startswith(b"=")

    def _default_value_start(self, offset: int, end: int) -> int:
        """Offset of the first '=' outside brackets between offset and end, else end."""
        assert self.file_contents is not None
        depth = 0
        for index in range(offset, end):
            char = self.file_contents[index]
            if char in _OPENING:
                depth += 1
            elif char in _CLOSING:
                depth -= 1
            elif char == ord("=") and depth <= 0:
                return index
        return end

    def _start_of_argument(self, end: int) -> int:
        """Offset right after the ',' or '(' preceding an argument ending at `end`.

        Delimiters nested in template argument lists, function types, arrays
        or braces are skipped.
        """
        assert self.file_contents is not None
        depth = 0
        for index in range(min(end, len(self.file_contents)) - 1, -1, -1):
            char = self.file_contents[index]
            if char in _CLOSING:
                depth += 1
            elif char in _OPENING:
                if depth > 0:
                    depth -= 1
                elif char == ord("("):
                    return index + 1
            elif char == ord(",") and depth == 0:
                return index + 1
        return 0

    def _text(self, start: int, end: int) -> str:
        assert self.file_contents is not None
        return self.file_contents[start:end].decode("utf-8", errors="replace").strip()

    def _cache_file_contents(self, entity: Entity) -> None:
        if self.file_contents is None:
            self.file_contents = entity.file_contents()
