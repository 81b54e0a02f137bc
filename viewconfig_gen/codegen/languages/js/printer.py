"""
Serializer for the JavaScript syntax model.

Output uses single-quoted strings and, by default, trailing commas in
multi-line object literals.
"""

from ...core.config import GeneratorConfig
from ...core.errors import GeneratorError
from .naming import property_key, quote_string
from .nodes import (
    Node,
    Literal,
    Identifier,
    ArrayExpression,
    CallExpression,
    ObjectExpression,
    Property,
    SpreadElement,
    Method,
    NamedExport,
)


class JSPrinter:
    """Prints nodes from ``nodes.py`` as JavaScript source."""

    def __init__(self, indent: str = "  ", trailing_comma: bool = True):
        self.indent = indent
        self.trailing_comma = trailing_comma

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "JSPrinter":
        return cls(indent=config.indent, trailing_comma=config.trailing_comma)

    def print(self, node: Node, level: int = 0) -> str:
        """
        Print a node.

        Args:
            node: Node to print
            level: Indentation level of the line the node starts on

        Returns:
            JavaScript source for the node
        """
        match node:
            case Literal(value=bool() as value):
                return "true" if value else "false"
            case Literal(value=str() as value):
                return quote_string(value)
            case Literal(value=int() | float() as value):
                return repr(value)
            case Identifier(name=name):
                return name
            case ArrayExpression(elements=elements):
                return "[" + ", ".join(self.print(e, level) for e in elements) + "]"
            case CallExpression(callee=callee, arguments=arguments):
                args = ", ".join(self.print(arg, level) for arg in arguments)
                return f"{self.print(callee, level)}({args})"
            case ObjectExpression(properties=properties):
                return self._print_object(properties, level)
            case NamedExport(name=name, value=value):
                return f"export const {name} = {self.print(value, level)};"
            case _:
                raise GeneratorError(f"Cannot print node: {node!r}")

    def _print_object(self, properties, level: int) -> str:
        if not properties:
            return "{}"

        inner = level + 1
        members = [
            self.indent * inner + self._print_member(member, inner)
            for member in properties
        ]
        body = ",\n".join(members)
        if self.trailing_comma:
            body += ","
        return "{\n" + body + "\n" + self.indent * level + "}"

    def _print_member(self, member, level: int) -> str:
        match member:
            case Property(key=key, value=value):
                return f"{property_key(key)}: {self.print(value, level)}"
            case SpreadElement(argument=argument):
                return f"...{self.print(argument, level)}"
            case Method(key=key, params=params, body=body):
                statements = "".join(
                    self.indent * (level + 1) + self.print(stmt, level + 1) + ";\n"
                    for stmt in body
                )
                return (
                    f"{property_key(key)}({', '.join(params)}) {{\n"
                    f"{statements}{self.indent * level}}}"
                )
            case _:
                raise GeneratorError(f"Cannot print object member: {member!r}")
