"""
Unit tests for prop type mapping.
"""

from dataclasses import dataclass

import pytest

from viewconfig_gen.codegen.core.errors import UnknownTypeAnnotation
from viewconfig_gen.codegen.core.schema import (
    ArrayTypeAnnotation,
    PrimitiveKind,
    PrimitiveTypeAnnotation,
    ReservedPropTypeAnnotation,
)
from viewconfig_gen.codegen.languages.js import imports as runtime
from viewconfig_gen.codegen.languages.js.nodes import Identifier, Literal, ObjectExpression
from viewconfig_gen.codegen.languages.js.types import (
    PASS_THROUGH,
    ValidatorDescriptor,
    ValidatorKind,
    map_prop_type,
)


def reserved(name):
    return ReservedPropTypeAnnotation(name)


@dataclass(frozen=True)
class MixedTypeAnnotation:
    """Stands in for a tag the mapper does not know."""

    type: str = "MixedTypeAnnotation"


class TestPassThroughTypes:
    """Primitive prop types need no host processing."""

    @pytest.mark.parametrize("kind", list(PrimitiveKind))
    def test_primitive_kinds_pass_through(self, kind, imports):
        descriptor = map_prop_type(PrimitiveTypeAnnotation(kind), imports)

        assert descriptor == PASS_THROUGH
        assert len(imports) == 0

    def test_pass_through_renders_true(self):
        assert PASS_THROUGH.to_node() == Literal(True)


class TestReservedTypes:
    """Reserved primitives map to processors and differs."""

    @pytest.mark.parametrize(
        "name, kind, capability",
        [
            ("ColorPrimitive", ValidatorKind.PROCESS, runtime.PROCESS_COLOR),
            ("ImageSourcePrimitive", ValidatorKind.PROCESS, runtime.RESOLVE_ASSET_SOURCE),
            ("PointPrimitive", ValidatorKind.DIFF, runtime.POINTS_DIFFER),
            ("EdgeInsetsPrimitive", ValidatorKind.DIFF, runtime.INSETS_DIFFER),
        ],
    )
    def test_reserved_mapping(self, name, kind, capability, imports):
        descriptor = map_prop_type(reserved(name), imports)

        assert descriptor == ValidatorDescriptor(kind, capability)
        assert capability in imports

    def test_process_descriptor_node(self):
        node = map_prop_type(reserved("ColorPrimitive")).to_node()

        assert isinstance(node, ObjectExpression)
        assert node.get("process") == Identifier("processColor")

    def test_diff_descriptor_node(self):
        node = map_prop_type(reserved("EdgeInsetsPrimitive")).to_node()

        assert node.get("diff") == Identifier("insetsDiffer")

    def test_unknown_reserved_name_is_fatal(self):
        with pytest.raises(UnknownTypeAnnotation) as exc_info:
            map_prop_type(reserved("Unknown"))

        assert exc_info.value.name == "Unknown"
        assert '"Unknown"' in str(exc_info.value)

    def test_works_without_import_accumulator(self):
        descriptor = map_prop_type(reserved("PointPrimitive"))

        assert descriptor.kind is ValidatorKind.DIFF


class TestArrayTypes:
    """Arrays only need processing for colors."""

    def test_color_array_is_processed(self, imports):
        descriptor = map_prop_type(ArrayTypeAnnotation(reserved("ColorPrimitive")), imports)

        assert descriptor == ValidatorDescriptor.process(runtime.PROCESS_COLOR_ARRAY)
        assert list(imports) == [runtime.PROCESS_COLOR_ARRAY]

    @pytest.mark.parametrize("name", ["PointPrimitive", "ImageSourcePrimitive"])
    def test_point_and_image_arrays_pass_through(self, name, imports):
        descriptor = map_prop_type(ArrayTypeAnnotation(reserved(name)), imports)

        assert descriptor == PASS_THROUGH
        assert len(imports) == 0

    def test_edge_insets_array_is_fatal(self):
        with pytest.raises(UnknownTypeAnnotation) as exc_info:
            map_prop_type(ArrayTypeAnnotation(reserved("EdgeInsetsPrimitive")))

        assert exc_info.value.array_element is True
        assert "array" in str(exc_info.value)

    def test_primitive_array_passes_through(self):
        element = PrimitiveTypeAnnotation(PrimitiveKind.STRING)

        assert map_prop_type(ArrayTypeAnnotation(element)) == PASS_THROUGH

    def test_nested_color_array_passes_through_without_import(self, imports):
        inner = ArrayTypeAnnotation(reserved("ColorPrimitive"))

        assert map_prop_type(ArrayTypeAnnotation(inner), imports) == PASS_THROUGH
        assert len(imports) == 0

    @pytest.mark.parametrize("name", ["EdgeInsetsPrimitive", "PointPrimitive"])
    def test_nested_reserved_array_passes_through(self, name, imports):
        inner = ArrayTypeAnnotation(reserved(name))

        assert map_prop_type(ArrayTypeAnnotation(inner), imports) == PASS_THROUGH
        assert len(imports) == 0

    def test_deeply_nested_known_element_passes_through(self):
        annotation = ArrayTypeAnnotation(
            ArrayTypeAnnotation(ArrayTypeAnnotation(reserved("EdgeInsetsPrimitive")))
        )

        assert map_prop_type(annotation) == PASS_THROUGH

    def test_nested_unknown_element_is_fatal(self):
        inner = ArrayTypeAnnotation(reserved("Bogus"))

        with pytest.raises(UnknownTypeAnnotation):
            map_prop_type(ArrayTypeAnnotation(inner))


class TestUnknownTags:
    """Anything outside the closed union aborts generation."""

    def test_unknown_top_level_tag(self):
        with pytest.raises(UnknownTypeAnnotation) as exc_info:
            map_prop_type(MixedTypeAnnotation())

        assert exc_info.value.name == "MixedTypeAnnotation"

    def test_unknown_array_element_tag(self):
        with pytest.raises(UnknownTypeAnnotation):
            map_prop_type(ArrayTypeAnnotation(MixedTypeAnnotation()))

    def test_primitive_with_unknown_kind(self):
        with pytest.raises(UnknownTypeAnnotation) as exc_info:
            map_prop_type(PrimitiveTypeAnnotation("FunctionTypeAnnotation"))

        assert exc_info.value.name == "FunctionTypeAnnotation"
