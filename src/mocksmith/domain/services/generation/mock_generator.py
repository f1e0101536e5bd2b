#!/usr/bin/env python3

"""gMock class generation from ClassModel objects.

Each method becomes one ``MOCK_METHOD(return, name, (args), (qualifiers));``
line. MOCK_METHOD is a preprocessor macro, so any type spelling with a comma
is wrapped in parentheses to keep it a single macro argument.
"""

from ...models.mock import ClassModel, MethodModel


def wrap_with_parentheses_if_contains_comma(type_or_argument: str) -> str:
    """Wrap a return type or argument in parentheses if it contains a comma."""
    if "," in type_or_argument:
        return f"({type_or_argument})"
    return type_or_argument


def method_arguments(method: MethodModel) -> list[str]:
    arguments = []
    for argument in method.arguments:
        if argument.name:
            text = f"{argument.type_name} {argument.name}"
        else:
            text = argument.type_name
        arguments.append(wrap_with_parentheses_if_contains_comma(text))
    return arguments


def method_qualifiers(method: MethodModel) -> list[str]:
    qualifiers = []
    if method.is_const:
        qualifiers.append("const")
    if method.is_noexcept:
        qualifiers.append("noexcept")
    if method.ref_qualifier is not None:
        qualifiers.append(f"ref({method.ref_qualifier.value})")
    # A mock always overrides, also when the base method is pure virtual
    if method.is_virtual or method.is_pure_virtual:
        qualifiers.append("override")
    return qualifiers


def mock_method_line(method: MethodModel) -> str:
    return "MOCK_METHOD({}, {}, ({}), ({}));".format(
        wrap_with_parentheses_if_contains_comma(method.result_type),
        method.name,
        ", ".join(method_arguments(method)),
        ", ".join(method_qualifiers(method)),
    )


class MockGenerator:
    """Renders ClassModel objects as gMock classes.

    This class handles:
    - The mock class declaration inheriting from the mocked class
    - One MOCK_METHOD line per selected method
    - Namespace wrapping, either C++17 nested style or one level at a time
    """

    def __init__(self, indent_str: str = "  ", simplified_nested_namespaces: bool = True) -> None:
        """Initialize mock generator.

        Args:
            indent_str: Indentation used for MOCK_METHOD lines
            simplified_nested_namespaces: Use ``namespace A::B {`` instead of
                ``namespace A { namespace B {``
        """
        self.indent_str = indent_str
        self.simplified_nested_namespaces = simplified_nested_namespaces

    def generate_mock(self, class_model: ClassModel, mock_name: str) -> str:
        """Generate the mock class for a class model.

        Args:
            class_model: Class to mock
            mock_name: Name of the mock class

        Returns:
            Mock source code, each line terminated by a newline
        """
        lines = []
        namespace_start = self.namespace_start(class_model.namespaces)
        if namespace_start:
            lines.append(namespace_start)

        lines.extend(
            [
                f"class {mock_name} : public {class_model.name}",
                "{",
                "public:",
            ]
        )
        lines.extend(self.indent_str + mock_method_line(method) for method in class_model.methods)
        lines.append("};")

        namespace_end = self.namespace_end(class_model.namespaces)
        if namespace_end:
            lines.append(namespace_end)

        return "".join(f"{line}\n" for line in lines)

    def namespace_start(self, namespaces: tuple[str, ...]) -> str | None:
        if not namespaces:
            return None
        if self._use_simplified(namespaces):
            return f"namespace {'::'.join(namespaces)} {{"
        return " ".join(self._open_namespace(namespace) for namespace in namespaces)

    def namespace_end(self, namespaces: tuple[str, ...]) -> str | None:
        if not namespaces:
            return None
        if self._use_simplified(namespaces):
            return "}"
        return "}" * len(namespaces)

    def _use_simplified(self, namespaces: tuple[str, ...]) -> bool:
        # Anonymous namespaces cannot be part of a nested namespace definition
        return self.simplified_nested_namespaces and all(namespaces)

    @staticmethod
    def _open_namespace(namespace: str) -> str:
        return f"namespace {namespace} {{" if namespace else "namespace {"
