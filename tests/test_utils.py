"""Shared test utilities building fake declaration trees from C++ source text."""

from dataclasses import dataclass, field

from mocksmith.domain.models.entity import EntityKind, RefQualifier


def offset_of(source: str, text: str, start: int = 0) -> int:
    """Byte offset of the first occurrence of text at or after byte offset start."""
    encoded = source.encode("utf-8")
    index = encoded.index(text.encode("utf-8"), start)
    return index


@dataclass
class FakeEntity:
    """Entity with explicitly set properties."""

    kind: EntityKind
    name: str | None = None
    child_entities: list["FakeEntity"] = field(default_factory=list)
    definition: bool = True
    in_main_file: bool = True
    const: bool = False
    virtual: bool = False
    pure_virtual: bool = False
    static: bool = False
    noexcept: bool = False
    ref: RefQualifier | None = None
    result_type: str | None = None
    type_spelling: str | None = None
    argument_entities: list["FakeEntity"] = field(default_factory=list)
    declaration_range: tuple[int, int] | None = None
    location: int | None = None
    contents: bytes | None = None

    def children(self) -> list["FakeEntity"]:
        return self.child_entities

    def is_definition(self) -> bool:
        return self.definition

    def is_in_main_file(self) -> bool:
        return self.in_main_file

    def is_const_method(self) -> bool:
        return self.const

    def is_virtual_method(self) -> bool:
        return self.virtual

    def is_pure_virtual_method(self) -> bool:
        return self.pure_virtual

    def is_static_method(self) -> bool:
        return self.static

    def is_noexcept(self) -> bool:
        return self.noexcept

    def ref_qualifier(self) -> RefQualifier | None:
        return self.ref

    def result_type_name(self) -> str | None:
        return self.result_type

    def type_name(self) -> str | None:
        return self.type_spelling

    def arguments(self) -> list["FakeEntity"]:
        return self.argument_entities

    def extent(self) -> tuple[int, int] | None:
        return self.declaration_range

    def location_offset(self) -> int | None:
        return self.location

    def file_contents(self) -> bytes | None:
        return self.contents


def argument(
    source: str,
    spelling: str,
    name: str | None = None,
    parser_type: str = "int",
    start: int = 0,
) -> FakeEntity:
    """Argument entity for the first occurrence of spelling in source.

    Named arguments span their whole declaration and are located at the name.
    Unnamed arguments are located right after their type.
    """
    begin = offset_of(source, spelling, start)
    end = begin + len(spelling.encode("utf-8"))
    if name:
        head = spelling.split("=")[0].rstrip()
        location = begin + len(head[: head.rindex(name)].encode("utf-8"))
    else:
        location = end
    return FakeEntity(
        kind=EntityKind.ARGUMENT,
        name=name,
        type_spelling=parser_type,
        declaration_range=(begin, end),
        location=location,
        contents=source.encode("utf-8"),
    )


def method(
    source: str,
    declaration: str,
    name: str,
    arguments: list[FakeEntity] | None = None,
    result_type: str = "void",
    **flags: object,
) -> FakeEntity:
    """Method entity spanning the first occurrence of declaration in source."""
    begin = offset_of(source, declaration)
    end = begin + len(declaration.encode("utf-8"))
    return FakeEntity(
        kind=EntityKind.METHOD,
        name=name,
        result_type=result_type,
        argument_entities=arguments or [],
        declaration_range=(begin, end),
        location=offset_of(source, name, begin),
        contents=source.encode("utf-8"),
        **flags,
    )


def class_entity(name: str, methods: list[FakeEntity], **properties: object) -> FakeEntity:
    return FakeEntity(
        kind=EntityKind.CLASS_DECLARATION, name=name, child_entities=list(methods), **properties
    )


def namespace(name: str | None, children: list[FakeEntity], **properties: object) -> FakeEntity:
    return FakeEntity(kind=EntityKind.NAMESPACE, name=name, child_entities=list(children), **properties)


def translation_unit(children: list[FakeEntity]) -> FakeEntity:
    return FakeEntity(kind=EntityKind.OTHER, name="header.h", child_entities=list(children))
