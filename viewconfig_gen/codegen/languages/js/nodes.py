"""
Minimal JavaScript syntax model used to build view configs.

Only the constructs that appear in generated view config modules are
modelled; ``JSPrinter`` turns them into source text.
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class Literal:
    value: Union[bool, int, float, str]


@dataclass
class Identifier:
    name: str


@dataclass
class ArrayExpression:
    elements: List["Node"] = field(default_factory=list)


@dataclass
class CallExpression:
    callee: "Node"
    arguments: List["Node"] = field(default_factory=list)


@dataclass
class Property:
    """``key: value`` inside an object literal."""

    key: str
    value: "Node"


@dataclass
class SpreadElement:
    """``...argument`` inside an object literal."""

    argument: "Node"


@dataclass
class Method:
    """Shorthand method ``key(params) { body; }`` inside an object literal."""

    key: str
    params: List[str] = field(default_factory=list)
    body: List["Node"] = field(default_factory=list)


@dataclass
class ObjectExpression:
    properties: List[Union[Property, SpreadElement, Method]] = field(
        default_factory=list
    )

    def get(self, key: str) -> "Node":
        """Return the value of the property named ``key``."""
        for prop in self.properties:
            if isinstance(prop, Property) and prop.key == key:
                return prop.value
        raise KeyError(key)

    def keys(self) -> List[str]:
        return [
            prop.key
            for prop in self.properties
            if isinstance(prop, (Property, Method))
        ]


@dataclass
class NamedExport:
    """``export const name = value;``"""

    name: str
    value: "Node"


Node = Union[
    Literal,
    Identifier,
    ArrayExpression,
    CallExpression,
    ObjectExpression,
    NamedExport,
]
