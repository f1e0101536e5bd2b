#!/usr/bin/env python3

"""Integration tests generating mocks from C++ code with libclang."""

from pathlib import Path

import pytest

from mocksmith.application import GeneratorOptions, Mocksmith
from mocksmith.domain.exceptions import NothingToMockError, ParseError, ParserBusyError
from mocksmith.domain.models.mock import MethodsToMockStrategy
from mocksmith.domain.services.naming import SedReplacement

pytestmark = pytest.mark.usefixtures("requires_libclang")


def lines(*text: str) -> str:
    return "".join(f"{line}\n" for line in text)


def mocks_from_string(content: str, **options) -> list[str]:
    with Mocksmith(GeneratorOptions(**options)) as mocksmith:
        return [mock.code for mock in mocksmith.create_mocks_from_string(content)]


@pytest.mark.integration
class TestMocksFromString:
    """Test suite for mocks of classes given as strings."""

    def test_simple_pure_virtual_method(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual ~Foo() = default;
              virtual void bar() = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (), (override));",
                "};",
            )
        ]

    def test_non_virtual_method_is_ignored(self) -> None:
        cpp_class = """
            class Foo {
            public:
              void bar();
            };"""
        assert mocks_from_string(cpp_class) == []

    def test_non_virtual_method_with_all_strategy(self) -> None:
        cpp_class = """
            class Foo {
            public:
              Foo();
              void bar(int value);
              static Foo create();
            };"""
        assert mocks_from_string(cpp_class, methods_to_mock=MethodsToMockStrategy.ALL) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (int value), ());",
                "};",
            )
        ]

    def test_qualifiers(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual ~Foo() = default;
              virtual void bar() const = 0;
              virtual void fizz() noexcept = 0;
              virtual void buzz() const noexcept = 0;
              virtual void lvalue() const & = 0;
              virtual void rvalue() && = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (), (const, override));",
                "  MOCK_METHOD(void, fizz, (), (noexcept, override));",
                "  MOCK_METHOD(void, buzz, (), (const, noexcept, override));",
                "  MOCK_METHOD(void, lvalue, (), (const, ref(&), override));",
                "  MOCK_METHOD(void, rvalue, (), (ref(&&), override));",
                "};",
            )
        ]

    def test_types_with_commas_are_wrapped(self) -> None:
        cpp_class = """
            template <typename K, typename V> class Map {};
            class Foo {
            public:
              virtual ~Foo() = default;
              virtual Map<int, int> bar(const Map<int, int>& arg) = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD((Map<int, int>), bar, ((const Map<int, int>& arg)), (override));",
                "};",
            )
        ]

    def test_unnamed_and_default_arguments(self) -> None:
        cpp_class = """
            template <typename K, typename V> class Map {};
            class Foo {
            public:
              virtual void bar(int, const Map<int, int>&, long count = 5) = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (int, (const Map<int, int>&), long count), (override));",
                "};",
            )
        ]

    def test_protected_and_private_methods_are_mocked_as_public(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual ~Foo() = default;
            protected:
              virtual void bar() = 0;
            private:
              virtual void fizz() = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (), (override));",
                "  MOCK_METHOD(void, fizz, (), (override));",
                "};",
            )
        ]

    def test_namespaces(self) -> None:
        cpp_class = """
            namespace outer {
            namespace inner {
            class IFoo {
            public:
              virtual void bar() = 0;
            };
            }
            }"""
        expected_body = (
            "class MockFoo : public IFoo",
            "{",
            "public:",
            "  MOCK_METHOD(void, bar, (), (override));",
            "};",
        )
        assert mocks_from_string(cpp_class) == [
            lines("namespace outer::inner {", *expected_body, "}")
        ]
        assert mocks_from_string(cpp_class, simplified_nested_namespaces=False) == [
            lines("namespace outer { namespace inner {", *expected_body, "}}")
        ]

    def test_forward_declarations_are_ignored(self) -> None:
        cpp_class = """
            class IFoo;
            class IBar {
            public:
              virtual void bar(IFoo& foo) = 0;
            };"""
        mocks = mocks_from_string(cpp_class)
        assert len(mocks) == 1
        assert "class MockBar : public IBar" in mocks[0]

    def test_class_filter_and_namer(self) -> None:
        cpp_class = """
            class IFoo {
            public:
              virtual void foo() = 0;
            };
            class IBar {
            public:
              virtual void bar() = 0;
            };"""
        mocks = mocks_from_string(
            cpp_class,
            class_filter="Bar",
            namer=SedReplacement.from_sed_replacement(r"s/I(.*)/Fake\1/"),
        )
        assert len(mocks) == 1
        assert mocks[0].startswith("class FakeBar : public IBar\n")

    def test_struct_is_mocked(self) -> None:
        assert mocks_from_string("struct IFoo { virtual void f() = 0; };") == [
            lines(
                "class MockFoo : public IFoo",
                "{",
                "public:",
                "  MOCK_METHOD(void, f, (), (override));",
                "};",
            )
        ]

    def test_array_and_function_pointer_arguments(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual void bar(int values[3], void (*cb)(int)) = 0;
            };"""
        assert mocks_from_string(cpp_class) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (int values[3], void (*cb)(int)), (override));",
                "};",
            )
        ]

    def test_unknown_type_is_an_error(self) -> None:
        cpp_class = "class Foo {\npublic:\n  virtual void bar(const Unknown& arg) = 0;\n};\n"
        with pytest.raises(ParseError) as error:
            mocks_from_string(cpp_class)

        assert error.value.message == "unknown type name 'Unknown'"
        assert error.value.file is None
        assert error.value.line == 3

    def test_unknown_types_keep_source_spelling_when_ignoring_errors(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual void bar(const Unknown& arg, Other* other) = 0;
            };"""
        assert mocks_from_string(cpp_class, ignore_errors=True) == [
            lines(
                "class MockFoo : public Foo",
                "{",
                "public:",
                "  MOCK_METHOD(void, bar, (const Unknown& arg, Other* other), (override));",
                "};",
            )
        ]

    def test_clang_arguments_are_passed(self) -> None:
        cpp_class = """
            class Foo {
            public:
              virtual FOO_TYPE bar() = 0;
            };"""
        mocks = mocks_from_string(cpp_class, clang_args=("-DFOO_TYPE=int",))
        assert "MOCK_METHOD(FOO_TYPE, bar, (), (override));" in mocks[0]


@pytest.mark.integration
class TestMocksFromFiles:
    """Test suite for mocks and mock headers of header files."""

    @pytest.fixture
    def headers(self, header_file) -> list[Path]:
        """Two headers in include/, one including a type from the other."""
        types = header_file("include/types/id.h", "#pragma once\nusing Id = unsigned int;\n")
        foo = header_file(
            "include/foo/ifoo.h",
            '#pragma once\n#include "types/id.h"\n'
            "class IFoo {\npublic:\n  virtual ~IFoo() = default;\n  virtual Id id() const = 0;\n};\n",
        )
        bar = header_file(
            "include/bar/ibar.h",
            "#pragma once\nnamespace bar {\nclass IBar {\npublic:\n  virtual void bar() = 0;\n};\n}\n",
        )
        return [types, foo, bar]

    def test_mocks_for_file(self, headers: list[Path], tmp_path: Path) -> None:
        options = GeneratorOptions(include_paths=(tmp_path / "include",))
        with Mocksmith(options) as mocksmith:
            mocks = mocksmith.create_mocks_for_file(headers[1])

        # Classes of included headers are not mocked
        assert [mock.mock_name for mock in mocks] == ["MockFoo"]
        assert mocks[0].source_file == headers[1]
        assert "MOCK_METHOD(Id, id, (), (const, override));" in mocks[0].code

    def test_mock_header_for_files(self, headers: list[Path], tmp_path: Path) -> None:
        options = GeneratorOptions(include_paths=(tmp_path / "include",))
        with Mocksmith(options) as mocksmith:
            header = mocksmith.create_mock_header_for_files(headers[1:])

        assert header.mock_names == ("MockFoo", "MockBar")
        assert header.code.startswith(
            "// Automatically generated by mocksmith. Do not edit!\n"
            "#pragma once\n"
            "\n"
            '#include "foo/ifoo.h"\n'
            '#include "bar/ibar.h"\n'
            "#include <gmock/gmock.h>\n"
            "\n"
            "class MockFoo : public IFoo\n"
        )
        assert "};\n\nnamespace bar {\nclass MockBar : public IBar\n" in header.code

    def test_nothing_to_mock(self, headers: list[Path], tmp_path: Path) -> None:
        options = GeneratorOptions(include_paths=(tmp_path / "include",))
        with Mocksmith(options) as mocksmith:
            with pytest.raises(NothingToMockError):
                mocksmith.create_mock_header_for_files([headers[0]])

    def test_missing_include_is_a_parse_error(self, header_file) -> None:
        header = header_file("lonely/ifoo.h", '#include "missing.h"\nclass IFoo {};\n')
        with Mocksmith() as mocksmith:
            with pytest.raises(ParseError) as error:
                mocksmith.create_mocks_for_file(header)

        assert error.value.file is not None
        assert error.value.line == 1


@pytest.mark.integration
def test_parser_is_exclusive() -> None:
    with Mocksmith():
        with pytest.raises(ParserBusyError):
            with Mocksmith():
                pass

    with Mocksmith() as mocksmith:
        assert mocksmith.create_mocks_from_string("class Foo {};") == []
