"""
Prop type mapping for view configs.

Maps a prop's type annotation to the validator descriptor the host uses
to compare or transform incoming values.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from ...core.errors import UnknownTypeAnnotation
from ...core.schema import (
    TypeAnnotation,
    PrimitiveTypeAnnotation,
    PrimitiveKind,
    ReservedPropTypeAnnotation,
    ReservedPrimitive,
    ArrayTypeAnnotation,
)
from .imports import (
    ImportSet,
    RuntimeImport,
    PROCESS_COLOR,
    PROCESS_COLOR_ARRAY,
    RESOLVE_ASSET_SOURCE,
    POINTS_DIFFER,
    INSETS_DIFFER,
)
from .nodes import Node, Literal, Identifier, ObjectExpression, Property


class ValidatorKind(Enum):
    """What the host does with an incoming prop value."""

    PASS_THROUGH = "pass_through"  # presence check only
    PROCESS = "process"
    DIFF = "diff"


@dataclass(frozen=True)
class ValidatorDescriptor:
    """Per-prop validator: pass-through, or process/diff with a capability."""

    kind: ValidatorKind
    capability: Optional[RuntimeImport] = None

    @classmethod
    def pass_through(cls) -> "ValidatorDescriptor":
        return cls(ValidatorKind.PASS_THROUGH)

    @classmethod
    def process(cls, capability: RuntimeImport) -> "ValidatorDescriptor":
        return cls(ValidatorKind.PROCESS, capability)

    @classmethod
    def diff(cls, capability: RuntimeImport) -> "ValidatorDescriptor":
        return cls(ValidatorKind.DIFF, capability)

    def to_node(self) -> Node:
        """Render as ``true`` or ``{process: fn}`` / ``{diff: fn}``."""
        if self.kind is ValidatorKind.PASS_THROUGH:
            return Literal(True)
        return ObjectExpression(
            [Property(self.kind.value, Identifier(self.capability.identifier))]
        )


PASS_THROUGH = ValidatorDescriptor.pass_through()


class PropTypeMapper:
    """Maps prop type annotations to validator descriptors."""

    def map_prop_type(
        self, annotation: TypeAnnotation, imports: Optional[ImportSet] = None
    ) -> ValidatorDescriptor:
        """
        Map a prop type annotation.

        Args:
            annotation: The prop's type annotation
            imports: Accumulator receiving any processor/differ import

        Returns:
            The validator descriptor for the prop

        Raises:
            UnknownTypeAnnotation: For any tag or reserved name outside
                the supported set
        """
        descriptor = self._map(annotation)
        if imports is not None and descriptor.capability is not None:
            imports.add(descriptor.capability)
        return descriptor

    def _map(self, annotation: TypeAnnotation) -> ValidatorDescriptor:
        match annotation:
            case PrimitiveTypeAnnotation(kind=kind) if isinstance(kind, PrimitiveKind):
                return PASS_THROUGH
            case ReservedPropTypeAnnotation(name=name):
                return self._map_reserved(name)
            case ArrayTypeAnnotation(element_type=element_type):
                return self._map_array(element_type)
            case _:
                raise UnknownTypeAnnotation(_describe(annotation))

    def _map_reserved(self, name: str) -> ValidatorDescriptor:
        match name:
            case ReservedPrimitive.COLOR:
                return ValidatorDescriptor.process(PROCESS_COLOR)
            case ReservedPrimitive.IMAGE_SOURCE:
                return ValidatorDescriptor.process(RESOLVE_ASSET_SOURCE)
            case ReservedPrimitive.POINT:
                return ValidatorDescriptor.diff(POINTS_DIFFER)
            case ReservedPrimitive.EDGE_INSETS:
                return ValidatorDescriptor.diff(INSETS_DIFFER)
            case _:
                raise UnknownTypeAnnotation(name)

    def _map_array(self, element_type: TypeAnnotation) -> ValidatorDescriptor:
        match element_type:
            case ReservedPropTypeAnnotation(name=ReservedPrimitive.COLOR):
                return ValidatorDescriptor.process(PROCESS_COLOR_ARRAY)
            case ReservedPropTypeAnnotation(
                name=ReservedPrimitive.IMAGE_SOURCE | ReservedPrimitive.POINT
            ):
                return PASS_THROUGH
            case ReservedPropTypeAnnotation(name=name):
                raise UnknownTypeAnnotation(name, array_element=True)
            case _:
                check_known_type(element_type)
                return PASS_THROUGH


_RESERVED_NAMES = frozenset(p.value for p in ReservedPrimitive)


def check_known_type(annotation: TypeAnnotation):
    """
    Check that every tag and reserved name in an annotation is known.

    Unlike mapping, no array-element restriction applies at any depth.

    Raises:
        UnknownTypeAnnotation: For the first unknown tag or reserved name
    """
    match annotation:
        case PrimitiveTypeAnnotation(kind=kind) if isinstance(kind, PrimitiveKind):
            return
        case ReservedPropTypeAnnotation(name=name):
            if name not in _RESERVED_NAMES:
                raise UnknownTypeAnnotation(name)
        case ArrayTypeAnnotation(element_type=element_type):
            check_known_type(element_type)
        case _:
            raise UnknownTypeAnnotation(_describe(annotation))


def _describe(annotation) -> str:
    """Best-effort tag for an annotation outside the union."""
    match annotation:
        case PrimitiveTypeAnnotation(kind=kind):
            return str(getattr(kind, "value", kind))
        case {"type": tag}:
            return str(tag)
        case _:
            return type(annotation).__name__


_default_mapper = PropTypeMapper()


def map_prop_type(
    annotation: TypeAnnotation, imports: Optional[ImportSet] = None
) -> ValidatorDescriptor:
    """Map a prop type annotation using the default mapper."""
    return _default_mapper.map_prop_type(annotation, imports)
