"""
Core schema representation for code generation.

Converts the component schema JSON (as produced by the schema parser)
into typed dataclasses that the generators work with consistently.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Union, Any, Iterator, Tuple, Mapping
from enum import Enum

from .errors import UnknownTypeAnnotation


class PrimitiveKind(str, Enum):
    """Prop types that need no processing on the host side."""

    BOOLEAN = "BooleanTypeAnnotation"
    STRING = "StringTypeAnnotation"
    INT32 = "Int32TypeAnnotation"
    DOUBLE = "DoubleTypeAnnotation"
    FLOAT = "FloatTypeAnnotation"
    OBJECT = "ObjectTypeAnnotation"
    STRING_ENUM = "StringEnumTypeAnnotation"
    INT32_ENUM = "Int32EnumTypeAnnotation"


class ReservedPrimitive(str, Enum):
    """Names of the reserved (host-defined) prop types."""

    COLOR = "ColorPrimitive"
    IMAGE_SOURCE = "ImageSourcePrimitive"
    POINT = "PointPrimitive"
    EDGE_INSETS = "EdgeInsetsPrimitive"


class BubblingType(str, Enum):
    """How an event is delivered through the view hierarchy."""

    BUBBLE = "bubble"
    DIRECT = "direct"


RESERVED_TYPE_TAG = "ReservedPropTypeAnnotation"
ARRAY_TYPE_TAG = "ArrayTypeAnnotation"
COMPONENT_MODULE_TYPE = "Component"


@dataclass(frozen=True)
class PrimitiveTypeAnnotation:
    """A pass-through prop type such as Boolean or Int32."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class ReservedPropTypeAnnotation:
    """A reserved prop type, identified by name (e.g. ColorPrimitive)."""

    # Kept as a plain string so unknown names reach the type mapper
    name: str


@dataclass(frozen=True)
class ArrayTypeAnnotation:
    """An array prop type."""

    element_type: "TypeAnnotation"


TypeAnnotation = Union[
    PrimitiveTypeAnnotation, ReservedPropTypeAnnotation, ArrayTypeAnnotation
]


@dataclass
class Prop:
    """A single component prop."""

    name: str
    type_annotation: TypeAnnotation


@dataclass
class Event:
    """An event emitted by a native component."""

    name: str
    bubbling_type: str
    paper_top_level_name_deprecated: Optional[str] = None


@dataclass
class CommandParam:
    name: str


@dataclass
class Command:
    """An imperative command dispatched to a live native view."""

    name: str
    params: List[CommandParam] = field(default_factory=list)


@dataclass
class ExtendsEntry:
    """A base whose props a component inherits."""

    type: str
    known_type_name: str


@dataclass
class Component:
    """Represents a single native component."""

    props: List[Prop] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)
    extends_props: List[ExtendsEntry] = field(default_factory=list)
    paper_component_name: Optional[str] = None
    paper_component_name_deprecated: Optional[str] = None


@dataclass
class Module:
    """A schema module; only Component modules produce view configs."""

    type: str
    components: Dict[str, Component] = field(default_factory=dict)

    @property
    def is_component_module(self) -> bool:
        return self.type == COMPONENT_MODULE_TYPE


@dataclass
class Schema:
    """The full library schema: module name -> Module, in key order."""

    modules: Dict[str, Module] = field(default_factory=dict)

    def iter_components(self) -> Iterator[Tuple[str, str, Component]]:
        """
        Iterate over every component of every Component module.

        Yields:
            (module_name, component_name, component) in schema key order
        """
        for module_name, module in self.modules.items():
            if not module.is_component_module:
                continue
            for component_name, component in module.components.items():
                yield module_name, component_name, component


def convert_type_annotation(raw: Mapping[str, Any]) -> TypeAnnotation:
    """
    Convert a raw typeAnnotation mapping into a TypeAnnotation.

    Raises:
        UnknownTypeAnnotation: If the tag is outside the supported set
    """
    tag = raw.get("type")

    if tag == RESERVED_TYPE_TAG:
        return ReservedPropTypeAnnotation(name=raw["name"])
    if tag == ARRAY_TYPE_TAG:
        return ArrayTypeAnnotation(
            element_type=convert_type_annotation(raw["elementType"])
        )

    try:
        return PrimitiveTypeAnnotation(kind=PrimitiveKind(tag))
    except ValueError:
        raise UnknownTypeAnnotation(tag) from None


def convert_component(raw: Mapping[str, Any]) -> Component:
    """Convert a raw component mapping into a Component."""
    props = [
        Prop(
            name=prop["name"],
            type_annotation=convert_type_annotation(prop["typeAnnotation"]),
        )
        for prop in raw.get("props", [])
    ]

    events = [
        Event(
            name=event["name"],
            bubbling_type=event["bubblingType"],
            paper_top_level_name_deprecated=event.get("paperTopLevelNameDeprecated"),
        )
        for event in raw.get("events", [])
    ]

    commands = []
    for command in raw.get("commands", []):
        params = command.get("typeAnnotation", {}).get("params", [])
        commands.append(
            Command(
                name=command["name"],
                params=[CommandParam(name=param["name"]) for param in params],
            )
        )

    extends_props = [
        ExtendsEntry(type=entry["type"], known_type_name=entry.get("knownTypeName"))
        for entry in raw.get("extendsProps", [])
    ]

    return Component(
        props=props,
        events=events,
        commands=commands,
        extends_props=extends_props,
        paper_component_name=raw.get("paperComponentName"),
        paper_component_name_deprecated=raw.get("paperComponentNameDeprecated"),
    )


def convert_schema(raw: Mapping[str, Any]) -> Schema:
    """
    Convert the parser's schema JSON into a Schema.

    Accepts either the full document (``{"modules": {...}}``) or the
    module mapping itself. Only Component modules have their components
    converted; other module kinds are kept as empty placeholders.

    Args:
        raw: Parsed schema JSON

    Returns:
        Schema with module and component order preserved
    """
    raw_modules = raw["modules"] if "modules" in raw else raw

    modules = {}
    for module_name, raw_module in raw_modules.items():
        module_type = raw_module.get("type")
        components = {}
        if module_type == COMPONENT_MODULE_TYPE:
            components = {
                component_name: convert_component(raw_component)
                for component_name, raw_component in raw_module.get(
                    "components", {}
                ).items()
            }
        modules[module_name] = Module(type=module_type, components=components)

    return Schema(modules=modules)


def dump_schema(schema: Union[Schema, Mapping[str, Any]]) -> str:
    """
    Serialize a schema (typed or raw) to JSON for diagnostics.

    Never raises on malformed input; data JSON cannot represent falls back
    to its repr.
    """
    data = asdict(schema) if isinstance(schema, Schema) else schema
    try:
        return json.dumps(data, default=str)
    except (TypeError, ValueError):
        return repr(data)
