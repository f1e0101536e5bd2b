#!/usr/bin/env python3

"""Declaration tree entities backed by libclang cursors."""

import os
from pathlib import Path

from clang import cindex

from ...domain.models.entity import EntityKind, RefQualifier
from ..logging import get_logger

logger = get_logger(__name__)

_ENTITY_KINDS = {
    cindex.CursorKind.CLASS_DECL: EntityKind.CLASS_DECLARATION,
    cindex.CursorKind.STRUCT_DECL: EntityKind.CLASS_DECLARATION,
    cindex.CursorKind.NAMESPACE: EntityKind.NAMESPACE,
    cindex.CursorKind.CXX_METHOD: EntityKind.METHOD,
    cindex.CursorKind.PARM_DECL: EntityKind.ARGUMENT,
}

_REF_QUALIFIERS = {
    cindex.RefQualifierKind.LVALUE: RefQualifier.LVALUE,
    cindex.RefQualifierKind.RVALUE: RefQualifier.RVALUE,
}


class SourceFiles:
    """Contents of the files of one translation unit, read on demand."""

    def __init__(
        self,
        translation_unit: cindex.TranslationUnit,
        unsaved_files: dict[str, str] | None = None,
    ) -> None:
        self.translation_unit = translation_unit
        self.main_file = translation_unit.spelling
        self._contents: dict[str, bytes | None] = {
            name: content.encode("utf-8") for name, content in (unsaved_files or {}).items()
        }

    def is_main_file(self, file_name: str) -> bool:
        return file_name == self.main_file or os.path.abspath(file_name) == os.path.abspath(
            self.main_file
        )

    def contents(self, file_name: str) -> bytes | None:
        if file_name not in self._contents:
            try:
                self._contents[file_name] = Path(file_name).read_bytes()
            except OSError as e:
                logger.debug(f"Could not read {file_name}: {e}")
                self._contents[file_name] = None
        return self._contents[file_name]


class ClangEntity:
    """Entity implementation wrapping a clang.cindex.Cursor."""

    def __init__(self, cursor: cindex.Cursor, source_files: SourceFiles) -> None:
        self.cursor = cursor
        self.source_files = source_files

    def __repr__(self) -> str:
        return f"ClangEntity({self.cursor.kind.name}, {self.cursor.spelling!r})"

    @property
    def kind(self) -> EntityKind:
        return _ENTITY_KINDS.get(self.cursor.kind, EntityKind.OTHER)

    @property
    def name(self) -> str | None:
        return self.cursor.spelling or None

    def children(self) -> list["ClangEntity"]:
        return [ClangEntity(child, self.source_files) for child in self.cursor.get_children()]

    def is_definition(self) -> bool:
        return self.cursor.is_definition()

    def is_in_main_file(self) -> bool:
        location = self.cursor.location
        return location.file is not None and self.source_files.is_main_file(location.file.name)

    def is_const_method(self) -> bool:
        return self.cursor.is_const_method()

    def is_virtual_method(self) -> bool:
        return self.cursor.is_virtual_method()

    def is_pure_virtual_method(self) -> bool:
        return self.cursor.is_pure_virtual_method()

    def is_static_method(self) -> bool:
        return self.cursor.is_static_method()

    def is_noexcept(self) -> bool:
        return (
            self.cursor.exception_specification_kind
            == cindex.ExceptionSpecificationKind.BASIC_NOEXCEPT
        )

    def ref_qualifier(self) -> RefQualifier | None:
        return _REF_QUALIFIERS.get(self.cursor.type.get_ref_qualifier())

    def result_type_name(self) -> str | None:
        return self.cursor.result_type.spelling or None

    def type_name(self) -> str | None:
        return self.cursor.type.spelling or None

    def arguments(self) -> list["ClangEntity"]:
        return [ClangEntity(argument, self.source_files) for argument in self.cursor.get_arguments()]

    def extent(self) -> tuple[int, int] | None:
        extent = self.cursor.extent
        if extent.start.file is None or extent.end.file is None:
            return None
        return extent.start.offset, extent.end.offset

    def location_offset(self) -> int | None:
        location = self.cursor.location
        if location.file is None:
            return None
        return location.offset

    def file_contents(self) -> bytes | None:
        location = self.cursor.location
        if location.file is None:
            return None
        return self.source_files.contents(location.file.name)
